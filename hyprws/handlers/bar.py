"""Waybar feed telling whether a workspace is the one being shown."""

import json
import sys
from typing import TextIO

from ..config import Settings
from ..models import Regular, WorkspaceEvent, parse_workspace
from ..workspace import encode
from .interface import Handler

__all__ = ["WorkspaceBar"]


class WorkspaceBar(Handler):
    """Print one JSON line per workspace change, for a waybar custom module."""

    def __init__(self, name: str, settings: Settings, workspace: int, display: int, output: TextIO | None = None) -> None:
        super().__init__(name, settings)
        self.workspace = workspace
        self.display = display
        self.target = encode(display, workspace)
        self.output = output or sys.stdout
        self.label = settings.bar.label.format(workspace=workspace, display=display)

    async def init(self) -> None:
        """Log the watched workspace."""
        self.log.debug("Watching workspace %d (display %d, local %d)", self.target, self.display, self.workspace)

    def status(self, event: WorkspaceEvent) -> str | None:
        """Return the status line for `event`, None if nothing should be printed."""
        if not isinstance(event, Regular):
            return None
        selected = self.settings.bar.selected_class if event.id == self.target else ""
        return json.dumps({"text": self.label, "class": [selected]})

    def emit(self, event: WorkspaceEvent) -> None:
        """Print the status line for `event`, if any."""
        line = self.status(event)
        if line is not None:
            print(line, file=self.output, flush=True)

    async def event_workspace(self, name: str) -> None:
        """Workspace changed."""
        self.emit(parse_workspace(name))

    async def event_focusedmon(self, monitor_workspace: str) -> None:
        """Focused monitor changed, payload is "MONITOR,WORKSPACE"."""
        _, _, workspace_name = monitor_workspace.partition(",")
        self.emit(parse_workspace(workspace_name))
