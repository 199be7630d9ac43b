"""Restarting the Dock so it picks up a rewritten preferences file."""

from __future__ import annotations

import subprocess
from typing import Protocol

from pydantic import BaseModel
from result import Err, Ok, Result

from dockpin.common import create_logger

logger = create_logger("dock.restart")


class RestartError(BaseModel):
    """Base error for restarting the Dock."""

    message: str
    command: str


class RestartCommandNotFoundError(RestartError):
    """The restart command is not installed."""

    pass


class RestartFailedError(RestartError):
    """The restart command exited with a non-zero status."""

    returncode: int


class DockRestarter(Protocol):
    """Anything that can be called to restart the Dock."""

    def __call__(self) -> Result[None, RestartError]: ...


class KillallRestarter:
    """Restart a process by name with `killall`; launchd brings the Dock back."""

    def __init__(self, process_name: str = "Dock", command: str = "killall") -> None:
        self._process_name = process_name
        self._command = command

    def __call__(self) -> Result[None, RestartError]:
        argv = [self._command, self._process_name]
        logger.info("Restarting Dock", command=" ".join(argv))

        try:
            subprocess.run(
                argv,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError:
            return Err(
                RestartCommandNotFoundError(
                    command=self._command,
                    message=f"{self._command} command not found",
                )
            )
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.strip() if e.stderr else "Unknown error"
            return Err(
                RestartFailedError(
                    command=self._command,
                    returncode=e.returncode,
                    message=f"Failed to restart the Dock: {stderr}",
                )
            )

        return Ok(None)
