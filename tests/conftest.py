import pytest

from agent_browser.cli.registry import CommandRegistry


@pytest.fixture
def env() -> dict:
    """An environment with no Agent Browser variables set."""
    return {}


@pytest.fixture
def custom_env() -> dict:
    """An environment providing both flag defaults."""
    return {
        "AGENT_BROWSER_SESSION": "from-env",
        "AGENT_BROWSER_EXECUTABLE_PATH": "/env/chrome",
    }


@pytest.fixture
def registry() -> CommandRegistry:
    return CommandRegistry()
