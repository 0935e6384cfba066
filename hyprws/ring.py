"""Monitors ordered from left to right, wrapping around."""

from collections.abc import Iterable

from .models import Direction, Monitor, MonitorNotFound, OrdinalSource

__all__ = ["MonitorRing"]


class MonitorRing:
    """A snapshot of the monitors sorted by their x position."""

    def __init__(self, monitors: Iterable[Monitor]) -> None:
        self.monitors: list[Monitor] = sorted(monitors, key=lambda mon: mon.x)

    def __len__(self) -> int:
        return len(self.monitors)

    def index(self, monitor_id: int) -> int:
        """Return the ring position of the monitor with id `monitor_id`."""
        for i, mon in enumerate(self.monitors):
            if mon.id == monitor_id:
                return i
        msg = f"monitor id {monitor_id} not found"
        raise MonitorNotFound(msg)

    def next(self, monitor_id: int, direction: Direction) -> Monitor:
        """Return the neighbour of `monitor_id` in `direction`, looping at the ends.

        With a single monitor, that monitor is returned for both directions.
        """
        index = self.index(monitor_id)
        step = 1 if direction == Direction.RIGHT else -1
        return self.monitors[(index + step) % len(self.monitors)]

    def active(self) -> Monitor:
        """Return the focused monitor."""
        for mon in self.monitors:
            if mon.focused:
                return mon
        msg = "no focused monitor"
        raise MonitorNotFound(msg)

    def find(self, name: str) -> Monitor:
        """Return the monitor called `name`."""
        for mon in self.monitors:
            if mon.name == name:
                return mon
        msg = f"monitor {name} not present"
        raise MonitorNotFound(msg)

    def ordinal(self, monitor: Monitor, source: OrdinalSource = OrdinalSource.POSITION) -> int:
        """Return the ordinal used to address `monitor`'s workspaces.

        Args:
            monitor: a monitor of this ring
            source: use the position in the ring, or the compositor id
        """
        if source == OrdinalSource.ID:
            return monitor.id
        if len(self.monitors) == 1:
            return 0
        return self.index(monitor.id) + 1
