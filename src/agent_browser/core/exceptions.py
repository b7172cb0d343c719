"""Custom exceptions for Agent Browser."""

from typing import Optional


class AgentBrowserError(Exception):
    """Base exception for all Agent Browser errors."""
    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)

    def __str__(self):
        if self.original_error:
            return f"{self.message} (Original error: {str(self.original_error)})"
        return self.message


class CommandError(AgentBrowserError):
    """Exception for errors raised while a command runs.

    The registry wraps any other exception a handler raises in a CommandError,
    keeping it as ``original_error``. A CommandError raised by the handler
    itself is passed through unchanged.
    """
    pass


class UnknownCommandError(CommandError):
    """Exception for a command name with no registered handler."""
    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Unknown command: {command}")
