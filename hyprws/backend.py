"""Hyprland backend: the queries and commands used by hyprws.

A `HyprlandBackend` carries the logger of its caller, so every IPC
operation is logged under the component that triggered it.
"""

from logging import Logger
from typing import cast

from . import ipc
from .models import Event, Monitor, MonitorInfo, QueryFailure

__all__ = ["HyprlandBackend", "parse_event"]


def parse_event(raw_data: str) -> Event | None:
    """Parse a raw event line into an `Event`.

    Args:
        raw_data: one line read from the event socket, eg: "monitoradded>>DP-2"
    """
    if ">>" not in raw_data:
        return None
    cmd, params = raw_data.split(">>", 1)
    return Event(f"event_{cmd}", params.rstrip("\n"))


class HyprlandBackend:
    """Monitor queries and command dispatch over the Hyprland request socket."""

    def __init__(self, log: Logger) -> None:
        self.log = log

    async def get_monitors(self) -> list[Monitor]:
        """Return a fresh snapshot of the enabled monitors.

        Raises:
            QueryFailure: monitors can't be enumerated
        """
        data = await ipc.hyprctl_json("monitors", logger=self.log)
        if not isinstance(data, list):
            msg = f"unexpected monitors reply: {data!r}"
            raise QueryFailure(msg)
        try:
            return [Monitor.from_info(cast("MonitorInfo", info)) for info in data if not info.get("disabled")]
        except (AttributeError, KeyError, TypeError) as e:
            msg = f"malformed monitor entry: {e}"
            raise QueryFailure(msg) from e

    async def dispatch(self, command: str) -> None:
        """Run a dispatcher, eg: "workspace 12".

        Raises:
            DispatchFailure: the compositor rejected the command
        """
        await ipc.hyprctl(command, "dispatch", logger=self.log)

    async def keyword(self, name: str, value: str) -> None:
        """Set a configuration keyword, eg: ("wsbind", "11,DP-2").

        Raises:
            DispatchFailure: the compositor rejected the keyword
        """
        await ipc.hyprctl(f"{name} {value}", "keyword", logger=self.log)
