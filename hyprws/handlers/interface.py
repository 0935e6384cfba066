"""Common event handler interface."""

from ..backend import HyprlandBackend
from ..config import Settings
from ..logging_setup import get_logger


class Handler:
    """Base class for the listeners' event handlers.

    Events are delivered by calling `event_<name>` methods with the raw
    event payload, eg: `event_monitoradded("DP-2")`. Events without a
    matching method are ignored.
    """

    backend: HyprlandBackend
    " Hyprland queries and commands, logging under this handler's logger "

    def __init__(self, name: str, settings: Settings) -> None:
        self.name = name
        """ the handler name """
        self.log = get_logger(name)
        """ the logger to use for this handler """
        self.settings = settings
        self.backend = HyprlandBackend(self.log)

    async def init(self) -> None:
        """Run once before the first event is delivered."""

    def handles(self, event_name: str) -> bool:
        """Return True if `event_name` has a handler method."""
        return event_name.startswith("event_") and callable(getattr(self, event_name, None))
