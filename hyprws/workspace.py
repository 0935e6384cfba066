"""Workspace addressing.

Every monitor owns a block of nine workspaces. A monitor with ordinal 0 (the
primary one) uses the plain ids 1..9, the others prefix the local number with
their ordinal: local workspace 4 of ordinal 2 is workspace 24.

Only ordinals 0..9 can be expressed this way: a tenth ringed monitor would
collide with the next decade, so it is rejected instead.
"""

from dataclasses import dataclass

from .constants import MAX_LOCAL, MAX_ORDINAL
from .models import InvalidWorkspace

__all__ = ["WorkspaceAddress", "encode"]


def encode(ordinal: int, local: int) -> int:
    """Return the compositor-wide workspace id for `local` on monitor `ordinal`.

    Args:
        ordinal: monitor ordinal, 0 for the primary monitor
        local: workspace number on that monitor, 1..9

    Raises:
        InvalidWorkspace: either number is out of range
    """
    if not 1 <= local <= MAX_LOCAL:
        msg = f"workspace {local} out of range, must be 1..{MAX_LOCAL}"
        raise InvalidWorkspace(msg)
    if not 0 <= ordinal <= MAX_ORDINAL:
        msg = f"monitor ordinal {ordinal} out of range, at most {MAX_ORDINAL + 1} monitors can be addressed"
        raise InvalidWorkspace(msg)
    if ordinal == 0:
        return local
    return ordinal * 10 + local


@dataclass(frozen=True)
class WorkspaceAddress:
    """A (monitor ordinal, local workspace) pair."""

    ordinal: int
    local: int

    @property
    def id(self) -> int:
        """The composite workspace id."""
        return encode(self.ordinal, self.local)
