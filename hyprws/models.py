"""Data types and errors shared by hyprws modules."""

from dataclasses import dataclass
from enum import IntEnum, StrEnum
from typing import TypedDict

__all__ = [
    "BindingRequest",
    "BindingResult",
    "ConfigError",
    "Direction",
    "DispatchFailure",
    "Event",
    "ExitCode",
    "HyprwsError",
    "InvalidWorkspace",
    "Monitor",
    "MonitorInfo",
    "MonitorNotFound",
    "OrdinalSource",
    "QueryFailure",
    "Regular",
    "Special",
    "WorkspaceEvent",
    "parse_workspace",
]

SPECIAL_PREFIX = "special"


class WorkspaceDf(TypedDict):
    """Workspace definition."""

    id: int
    name: str


class MonitorInfo(TypedDict):
    """Monitor information as returned by Hyprland (subset used here)."""

    id: int
    name: str
    description: str
    width: int
    height: int
    x: int
    y: int
    activeWorkspace: WorkspaceDf
    specialWorkspace: WorkspaceDf
    focused: bool
    disabled: bool


@dataclass(frozen=True)
class Monitor:
    """A monitor snapshot, only valid until the next query."""

    id: int
    name: str
    x: int
    focused: bool = False
    active_workspace: int = 0

    @classmethod
    def from_info(cls, info: MonitorInfo) -> "Monitor":
        """Build a monitor from the `monitors` JSON entry."""
        return cls(
            id=info["id"],
            name=info["name"],
            x=info["x"],
            focused=bool(info.get("focused", False)),
            active_workspace=info.get("activeWorkspace", {}).get("id", 0),
        )


@dataclass(frozen=True)
class Regular:
    """A numbered workspace."""

    id: int


@dataclass(frozen=True)
class Special:
    """A scratchpad or named workspace, never shown on the bar."""

    name: str = ""


WorkspaceEvent = Regular | Special


def parse_workspace(name: str) -> WorkspaceEvent:
    """Classify a workspace name received in an event.

    Args:
        name: workspace name as sent by Hyprland ("3", "special:term", "mail"...)
    """
    name = name.strip()
    if name.startswith(SPECIAL_PREFIX):
        return Special(name)
    try:
        return Regular(int(name))
    except ValueError:
        return Special(name)


@dataclass(frozen=True)
class Event:
    """One compositor event, as read from the event socket."""

    name: str  # handler name, eg: "event_monitoradded"
    data: str


@dataclass(frozen=True)
class BindingRequest:
    """Associate the `workspace` composite id with the `monitor` output."""

    monitor: str
    local: int
    workspace: int
    activate: bool = False

    @property
    def keyword(self) -> tuple[str, str]:
        """The (keyword, value) pair sent to Hyprland."""
        if self.activate:
            return ("workspace", f"{self.monitor},{self.workspace}")
        return ("wsbind", f"{self.workspace},{self.monitor}")


@dataclass(frozen=True)
class BindingResult:
    """Outcome of one binding request."""

    request: BindingRequest
    error: str | None = None

    @property
    def ok(self) -> bool:
        """True if the compositor accepted the request."""
        return self.error is None


class Direction(StrEnum):
    """Ring traversal direction."""

    LEFT = "L"
    RIGHT = "R"


class OrdinalSource(StrEnum):
    """How a monitor's ordinal is derived."""

    ID = "id"  # compositor monitor id, 0 is the primary monitor
    POSITION = "position"  # 1-based position in the x-sorted ring, 0 when alone


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    USAGE_ERROR = 1
    ENV_ERROR = 2  # Hyprland isn't running
    CONNECTION_ERROR = 3  # sockets unavailable or event stream lost
    COMMAND_ERROR = 4  # query/dispatch failed
    CONFIG_ERROR = 5


class HyprwsError(Exception):
    """Base class for the errors raised by hyprws."""

    exit_code: ExitCode = ExitCode.COMMAND_ERROR


class QueryFailure(HyprwsError):
    """Monitors can't be enumerated."""


class MonitorNotFound(HyprwsError):
    """The monitor isn't part of the current snapshot."""


class DispatchFailure(HyprwsError):
    """The compositor rejected or could not run a command."""


class InvalidWorkspace(HyprwsError):
    """Workspace address outside of the supported range."""


class ConfigError(HyprwsError):
    """The configuration file can't be used."""

    exit_code = ExitCode.CONFIG_ERROR
