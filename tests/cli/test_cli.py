import logging

import pytest

from agent_browser import __version__
from agent_browser.cli.cli import load_environment, main
from agent_browser.cli.commands import build_registry, format_help


@pytest.fixture
def recording_registry():
    """The built-in registry plus an ``open`` command that records its input."""
    registry = build_registry()
    calls = []

    async def open_command(flags, args):
        calls.append((flags, args))
        return 0

    registry.register("open", open_command, "Open a URL")
    registry.calls = calls
    return registry


def test_main_dispatches_cleaned_args(env, recording_registry):
    code = main(
        ["--json", "--executable-path", "/p", "--headed", "open", "example.com"],
        env=env,
        registry=recording_registry,
    )

    assert code == 0
    [(flags, args)] = recording_registry.calls
    assert args == ["example.com"]
    assert flags.json_output is True
    assert flags.headed is True
    assert flags.executable_path == "/p"


def test_main_uses_env_defaults(custom_env, recording_registry):
    main(["open", "example.com"], env=custom_env, registry=recording_registry)
    [(flags, _)] = recording_registry.calls
    assert flags.session == "from-env"
    assert flags.executable_path == "/env/chrome"


def test_main_without_command_prints_help(env, capsys):
    code = main(["--headed"], env=env)
    assert code == 0
    out = capsys.readouterr().out
    assert out.startswith("Usage: agent-browser")
    assert "--executable-path <value>" in out


def test_main_version(env, capsys):
    assert main(["version"], env=env) == 0
    assert capsys.readouterr().out.strip() == f"agent-browser {__version__}"


def test_main_help_lists_commands(env, capsys, recording_registry):
    assert main(["help"], env=env, registry=recording_registry) == 0
    out = capsys.readouterr().out
    assert "  open        Open a URL" in out
    assert "  version     Show the installed version" in out


def test_main_unknown_command(env, caplog):
    code = main(["opne", "example.com"], env=env)
    assert code == 1
    assert "Unknown command: opne" in caplog.text


def test_main_handler_error(env, caplog):
    registry = build_registry()

    async def broken(flags, args):
        raise RuntimeError("no browser")

    registry.register("open", broken)
    assert main(["open"], env=env, registry=registry) == 1
    assert "no browser" in caplog.text


def test_main_keyboard_interrupt(env, capsys):
    registry = build_registry()

    async def interrupted(flags, args):
        raise KeyboardInterrupt

    registry.register("wait", interrupted)
    assert main(["wait"], env=env, registry=registry) == 130
    assert "Operation cancelled by user." in capsys.readouterr().out


def test_main_logs_unknown_flags(env, caplog, recording_registry):
    caplog.set_level(logging.DEBUG, logger="agent_browser.cli.cli")
    code = main(["open", "--jsonn", "example.com"], env=env, registry=recording_registry)
    assert code == 0
    assert "--jsonn" in caplog.text
    [(_, args)] = recording_registry.calls
    assert args == ["--jsonn", "example.com"]


def test_main_reads_sys_argv(monkeypatch, env, capsys):
    monkeypatch.setattr("sys.argv", ["agent-browser", "version"])
    assert main(env=env) == 0
    assert __version__ in capsys.readouterr().out


def test_format_help_lists_global_flags():
    text = format_help(build_registry())
    for flag in ["--json", "--full", "-f", "--headed", "--debug", "--session <value>"]:
        assert flag in text


def test_load_environment_process_wins(tmp_path, monkeypatch):
    """Test that the process environment overrides values from the .env file."""
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text(
        "AGENT_BROWSER_SESSION=from-file\nAGENT_BROWSER_EXECUTABLE_PATH=/file/chrome\n"
    )
    monkeypatch.setenv("AGENT_BROWSER_SESSION", "from-process")
    monkeypatch.delenv("AGENT_BROWSER_EXECUTABLE_PATH", raising=False)

    env = load_environment(str(dotenv_file))

    assert env["AGENT_BROWSER_SESSION"] == "from-process"
    assert env["AGENT_BROWSER_EXECUTABLE_PATH"] == "/file/chrome"


def test_load_environment_missing_file(tmp_path, monkeypatch):
    monkeypatch.setenv("AGENT_BROWSER_SESSION", "from-process")
    env = load_environment(str(tmp_path / "missing.env"))
    assert env["AGENT_BROWSER_SESSION"] == "from-process"


def test_main_debug_shows_parser_records(env, capsys):
    """Test that --debug configures logging before the flags are parsed."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    root.handlers.clear()
    try:
        assert main(["--debug", "--session", "work"], env=env) == 0
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)

    assert "--session set to 'work'" in capsys.readouterr().err
