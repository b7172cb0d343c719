import logging
from typing import Awaitable, Callable, Dict, List, Optional, Sequence

from ..core.config import Flags
from ..core.exceptions import CommandError, UnknownCommandError

logger = logging.getLogger(__name__)

CommandHandler = Callable[[Flags, List[str]], Awaitable[int]]


class CommandRegistry:
    """Registry mapping command names to async handlers."""

    def __init__(self) -> None:
        """Initialize an empty command registry."""
        self._handlers: Dict[str, CommandHandler] = {}
        self._descriptions: Dict[str, str] = {}

    def register(self, name: str, handler: CommandHandler, description: str = "") -> None:
        """Register a command handler.

        Registering an existing name replaces its handler.

        Args:
            name: Command name as typed on the command line
            handler: Coroutine function called with the flags and the command arguments
            description: One-line summary shown in help output
        """
        if not name or name.startswith("-"):
            raise ValueError(f"Invalid command name: {name!r}")
        if not callable(handler):
            raise ValueError("Only callables can be registered as command handlers")

        self._handlers[name] = handler
        self._descriptions[name] = description
        logger.debug(f"Registered command: {name}")

    def unregister(self, name: str) -> None:
        """Unregister a command.

        Args:
            name: Name of the command to unregister
        """
        self._handlers.pop(name, None)
        self._descriptions.pop(name, None)
        logger.debug(f"Unregistered command: {name}")

    def get(self, name: str) -> Optional[CommandHandler]:
        """Get a command handler by name.

        Args:
            name: Name of the command

        Returns:
            The handler if found, None otherwise
        """
        return self._handlers.get(name)

    def list_commands(self) -> List[str]:
        """List all registered command names in sorted order."""
        return sorted(self._handlers)

    def describe(self, name: str) -> str:
        """Get the one-line description of a command, empty when it has none."""
        return self._descriptions.get(name, "")

    async def dispatch(self, name: str, args: Sequence[str], flags: Flags) -> int:
        """Run the handler registered under ``name``.

        Args:
            name: Command name, the first cleaned argument
            args: The cleaned arguments following the command name
            flags: Parsed global flags

        Returns:
            Exit code returned by the handler, 0 when it returns None

        Raises:
            UnknownCommandError: If no handler is registered for ``name``
            CommandError: If the handler raises
        """
        handler = self.get(name)
        if handler is None:
            raise UnknownCommandError(name)

        logger.debug(f"Dispatching {name} with args {list(args)} (session={flags.session})")
        try:
            result = await handler(flags, list(args))
        except CommandError:
            raise
        except Exception as e:
            raise CommandError(f"Command {name} failed", original_error=e) from e

        return 0 if result is None else result
