"""Configuration management for Agent Browser."""

import os
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

SESSION_ENV = "AGENT_BROWSER_SESSION"
EXECUTABLE_PATH_ENV = "AGENT_BROWSER_EXECUTABLE_PATH"
DEFAULT_SESSION = "default"


class Flags(BaseModel):
    """Global flags shared by every command of a single invocation."""

    json_output: bool = Field(
        default=False,
        description="Emit machine-readable JSON output"
    )
    full: bool = Field(
        default=False,
        description="Enable full mode"
    )
    headed: bool = Field(
        default=False,
        description="Show the browser window instead of running headless"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug logging"
    )
    session: str = Field(
        default=DEFAULT_SESSION,
        description="Name of the browser session to attach to"
    )
    executable_path: Optional[str] = Field(
        default=None,
        description="Path to a custom browser executable"
    )

    model_config = ConfigDict(frozen=True)

    def launch_options(self) -> Dict[str, Any]:
        """Keyword arguments for launching the browser.

        Returns:
            ``headless`` always, ``executable_path`` only when one is set
        """
        options: Dict[str, Any] = {"headless": not self.headed}
        if self.executable_path is not None:
            options["executable_path"] = self.executable_path
        return options


def flags_from_env(env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Read the environment-derived defaults for :class:`Flags`.

    Args:
        env: Environment lookup, ``os.environ`` when omitted

    Returns:
        Field values for ``session`` and ``executable_path``
    """
    if env is None:
        env = os.environ
    return {
        "session": env.get(SESSION_ENV, DEFAULT_SESSION),
        "executable_path": env.get(EXECUTABLE_PATH_ENV),
    }
