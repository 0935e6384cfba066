"""Bind a block of workspaces to every monitor being plugged."""

from ..constants import WORKSPACES_PER_MONITOR
from ..models import BindingRequest, BindingResult, DispatchFailure, HyprwsError
from ..ring import MonitorRing
from ..workspace import WorkspaceAddress
from .interface import Handler

__all__ = ["MonitorBinder", "plan_bindings"]


def plan_bindings(monitor: str, ordinal: int) -> list[BindingRequest]:
    """Return the requests binding workspaces 1..9 of `ordinal` to `monitor`.

    The last request switches the monitor to its first workspace.

    Raises:
        InvalidWorkspace: `ordinal` can't be addressed
    """
    requests = [
        BindingRequest(monitor, local, WorkspaceAddress(ordinal, local).id) for local in range(1, WORKSPACES_PER_MONITOR + 1)
    ]
    requests.append(BindingRequest(monitor, 1, WorkspaceAddress(ordinal, 1).id, activate=True))
    return requests


class MonitorBinder(Handler):
    """Assign workspaces to monitors as they are attached."""

    async def bind_monitor(self, name: str) -> list[BindingResult]:
        """Bind the workspaces of the monitor called `name`.

        Every request is attempted, failures are reported in the results.

        Raises:
            QueryFailure: monitors can't be listed
            MonitorNotFound: `name` isn't attached anymore
            InvalidWorkspace: the monitor's ordinal is too large
        """
        ring = MonitorRing(await self.backend.get_monitors())
        monitor = ring.find(name)
        ordinal = ring.ordinal(monitor, self.settings.ordinals)
        self.log.debug("Binding %s with ordinal %d", name, ordinal)

        results = []
        for request in plan_bindings(name, ordinal):
            try:
                await self.backend.keyword(*request.keyword)
            except DispatchFailure as e:
                results.append(BindingResult(request, str(e)))
            else:
                results.append(BindingResult(request))
        return results

    async def event_monitoradded(self, name: str) -> None:
        """Set up the workspaces of a new monitor."""
        try:
            results = await self.bind_monitor(name)
        except HyprwsError as e:
            self.log.error("Can't bind workspaces for %s: %s", name, e)  # noqa: TRY400
            return

        failures = [r for r in results if not r.ok]
        for failure in failures:
            if failure.request.activate:
                self.log.error("Error setting workspace: %s", failure.error)
            else:
                self.log.error("Error binding workspace %d: %s", failure.request.workspace, failure.error)
        self.log.info("%s: %d/%d workspace rules applied", name, len(results) - len(failures), len(results))
