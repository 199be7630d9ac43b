"""Common models used across dockpin."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel

from dockpin.constants import APP_NAME


class AppInfo(BaseModel):
    project_name: str = APP_NAME
    version: str = "0.1.0"
    environment: Literal["test", "dev", "prod"] = "dev"


class DockSettings(BaseModel):
    preferences_path: Path | None = None
    process_name: str = "Dock"
    restart_command: str = "killall"
