"""Agent Browser - global flag handling for the browser automation CLI."""

from .cli.flags import clean_args, parse_flags, split_args
from .core.config import Flags

__version__ = "0.1.0"

__all__ = [
    "Flags",
    "clean_args",
    "parse_flags",
    "split_args",
]
