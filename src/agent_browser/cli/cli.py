"""Main CLI entrypoint for Agent Browser."""

import asyncio
import logging
import os
import sys
from typing import Dict, List, Mapping, Optional

from dotenv import dotenv_values

from ..core.exceptions import AgentBrowserError
from .commands import build_registry, format_help
from .flags import parse_flags, split_args, unknown_flags
from .registry import CommandRegistry

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False) -> None:
    """Set up logging configuration.

    Args:
        debug: Whether to enable debug logging
    """
    log_level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def load_environment(dotenv_path: Optional[str] = None) -> Dict[str, str]:
    """Build the environment lookup used for flag defaults.

    Values from the ``.env`` file are overridden by the process environment,
    which is left untouched.

    Args:
        dotenv_path: Path of the ``.env`` file, ``.env`` in the working directory when omitted

    Returns:
        Merged environment mapping
    """
    path = dotenv_path if dotenv_path is not None else os.path.join(os.getcwd(), ".env")
    env = {key: value for key, value in dotenv_values(path).items() if value is not None}
    env.update(os.environ)
    return env


async def main_async(
    args: List[str],
    env: Mapping[str, str],
    registry: Optional[CommandRegistry] = None,
) -> int:
    """Asynchronous main entry point.

    Args:
        args: Command-line arguments, without the program name
        env: Environment lookup for flag defaults
        registry: Command registry, the built-in commands when omitted

    Returns:
        Exit code
    """
    # Logging is configured before the parse whose debug records are kept
    setup_logging(parse_flags(args, env).debug)
    flags, command_args = split_args(args, env)

    for flag in unknown_flags(args):
        logger.debug(f"Passing unrecognized flag through to the command: {flag}")

    if registry is None:
        registry = build_registry()

    if not command_args:
        print(format_help(registry))
        return 0

    command, rest = command_args[0], command_args[1:]
    try:
        return await registry.dispatch(command, rest, flags)
    except AgentBrowserError as e:
        logger.error(f"Error: {e}", exc_info=flags.debug)
        return 1


def main(
    args: Optional[List[str]] = None,
    env: Optional[Mapping[str, str]] = None,
    registry: Optional[CommandRegistry] = None,
) -> int:
    """Main entry point.

    Args:
        args: Optional list of command-line arguments, ``sys.argv[1:]`` when omitted
        env: Optional environment lookup, ``.env`` merged with ``os.environ`` when omitted
        registry: Optional command registry

    Returns:
        Exit code
    """
    if args is None:
        args = sys.argv[1:]
    if env is None:
        env = load_environment()

    try:
        return asyncio.run(main_async(args, env, registry))
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
