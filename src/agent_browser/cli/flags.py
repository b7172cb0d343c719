"""Global flag parsing for the command line.

Global flags may appear anywhere in the argument list. ``parse_flags``
reads them into a :class:`Flags` value and ``clean_args`` strips them so
the command dispatcher only sees the command and its own arguments.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..core.config import Flags, flags_from_env

logger = logging.getLogger(__name__)

# Flags that switch a boolean field on
BOOLEAN_FLAGS: Dict[str, str] = {
    "--json": "json_output",
    "--full": "full",
    "-f": "full",
    "--headed": "headed",
    "--debug": "debug",
}

# Flags that consume the following token as their value
VALUE_FLAGS: Dict[str, str] = {
    "--session": "session",
    "--executable-path": "executable_path",
}


def parse_flags(args: Sequence[str], env: Optional[Mapping[str, str]] = None) -> Flags:
    """Parse global flags out of a raw argument list.

    Unknown tokens are skipped. A value flag in last position has no value
    and leaves its field at the environment default.

    Args:
        args: Raw command-line arguments, without the program name
        env: Environment lookup for the defaults, ``os.environ`` when omitted

    Returns:
        The parsed flags
    """
    values: Dict[str, Any] = flags_from_env(env)

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in BOOLEAN_FLAGS:
            values[BOOLEAN_FLAGS[arg]] = True
        elif arg in VALUE_FLAGS:
            if i + 1 < len(args):
                values[VALUE_FLAGS[arg]] = args[i + 1]
                logger.debug(f"{arg} set to {args[i + 1]!r}")
                i += 1
            else:
                logger.debug(f"{arg} given without a value, ignoring")
        i += 1

    return Flags(**values)


def clean_args(args: Sequence[str]) -> List[str]:
    """Remove global flags, and the values of value flags, from an argument list.

    Args:
        args: Raw command-line arguments, without the program name

    Returns:
        The remaining arguments in their original order
    """
    result: List[str] = []
    skip_next = False

    for arg in args:
        if skip_next:
            skip_next = False
            continue
        if arg in VALUE_FLAGS:
            skip_next = True
            continue
        if arg in BOOLEAN_FLAGS:
            continue
        result.append(arg)

    return result


def split_args(
    args: Sequence[str], env: Optional[Mapping[str, str]] = None
) -> Tuple[Flags, List[str]]:
    """Parse and clean an argument list in one call.

    Args:
        args: Raw command-line arguments, without the program name
        env: Environment lookup for the defaults, ``os.environ`` when omitted

    Returns:
        Tuple of the parsed flags and the cleaned arguments
    """
    return parse_flags(args, env), clean_args(args)


def unknown_flags(args: Sequence[str]) -> List[str]:
    """List long-flag tokens that are not recognized global flags.

    Values consumed by a value flag are never reported, so
    ``--session --headed`` yields nothing.
    """
    unknown: List[str] = []
    skip_next = False

    for arg in args:
        if skip_next:
            skip_next = False
            continue
        if arg in VALUE_FLAGS:
            skip_next = True
        elif arg.startswith("--") and arg != "--" and arg not in BOOLEAN_FLAGS:
            unknown.append(arg)

    return unknown
