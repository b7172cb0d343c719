"""Built-in CLI commands."""

import logging
from typing import List

from .. import __version__
from ..core.config import Flags
from .flags import BOOLEAN_FLAGS, VALUE_FLAGS
from .registry import CommandRegistry

logger = logging.getLogger(__name__)

PROG = "agent-browser"


async def version_command(flags: Flags, args: List[str]) -> int:
    """Print the installed version.

    Returns:
        Exit code
    """
    print(f"{PROG} {__version__}")
    return 0


def format_help(registry: CommandRegistry) -> str:
    """Render usage text listing global flags and registered commands.

    Args:
        registry: Registry whose commands are listed

    Returns:
        Multi-line help text
    """
    lines = [f"Usage: {PROG} [global flags] <command> [args...]", "", "Global flags:"]
    for flag in BOOLEAN_FLAGS:
        lines.append(f"  {flag}")
    for flag in VALUE_FLAGS:
        lines.append(f"  {flag} <value>")

    lines.extend(["", "Commands:"])
    for name in registry.list_commands():
        description = registry.describe(name)
        lines.append(f"  {name:<12}{description}".rstrip())
    return "\n".join(lines)


def build_registry() -> CommandRegistry:
    """Create a registry holding the built-in commands.

    Returns:
        Registry with ``help`` and ``version`` registered
    """
    registry = CommandRegistry()

    async def help_command(flags: Flags, args: List[str]) -> int:
        print(format_help(registry))
        return 0

    registry.register("help", help_command, "Show this help message")
    registry.register("version", version_command, "Show the installed version")
    return registry
