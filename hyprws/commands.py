"""One-shot operations: query the monitors, compute, dispatch once."""

from .backend import HyprlandBackend
from .config import Settings
from .models import Direction, Monitor
from .ring import MonitorRing
from .workspace import encode

__all__ = [
    "focus_display",
    "focus_workspace",
    "move_to_display",
    "move_to_workspace",
    "workspace_for",
]


async def workspace_for(backend: HyprlandBackend, settings: Settings, local: int) -> int:
    """Return the id of workspace `local` on the focused monitor."""
    ring = MonitorRing(await backend.get_monitors())
    return encode(ring.ordinal(ring.active(), settings.ordinals), local)


async def focus_workspace(backend: HyprlandBackend, settings: Settings, local: int) -> None:
    """Show workspace `local` of the focused monitor."""
    await backend.dispatch(f"workspace {await workspace_for(backend, settings, local)}")


async def move_to_workspace(backend: HyprlandBackend, settings: Settings, local: int) -> None:
    """Move the focused window to workspace `local` of the focused monitor."""
    await backend.dispatch(f"movetoworkspace {await workspace_for(backend, settings, local)}")


async def _neighbour(backend: HyprlandBackend, direction: Direction) -> Monitor:
    ring = MonitorRing(await backend.get_monitors())
    return ring.next(ring.active().id, direction)


async def focus_display(backend: HyprlandBackend, direction: Direction) -> None:
    """Focus the next monitor in `direction`, looping at the ends."""
    target = await _neighbour(backend, direction)
    await backend.dispatch(f"focusmonitor {target.id}")


async def move_to_display(backend: HyprlandBackend, direction: Direction) -> None:
    """Move the focused window to the next monitor in `direction`, looping at the ends."""
    target = await _neighbour(backend, direction)
    await backend.dispatch(f"movewindow mon:{target.id}")
