from unittest.mock import AsyncMock, Mock, call

import pytest

from hyprws.backend import HyprlandBackend
from hyprws.config import Settings
from hyprws.handlers.binder import MonitorBinder, plan_bindings
from hyprws.models import DispatchFailure, InvalidWorkspace, Monitor, OrdinalSource, QueryFailure


def layout():
    # "X" is the third monitor from the left
    return [
        Monitor(0, "DP-1", 0, focused=True),
        Monitor(1, "DP-2", 1920),
        Monitor(3, "X", 3840),
    ]


@pytest.fixture
def binder():
    ext = MonitorBinder("binder", Settings())
    ext.backend = AsyncMock()
    ext.backend.get_monitors.return_value = layout()
    ext.log = Mock()
    return ext


def test_plan():
    requests = plan_bindings("X", 3)
    assert len(requests) == 10
    assert [r.workspace for r in requests[:9]] == list(range(31, 40))
    assert all(r.monitor == "X" and not r.activate for r in requests[:9])
    assert requests[-1].activate
    assert requests[-1].keyword == ("workspace", "X,31")
    assert requests[0].keyword == ("wsbind", "31,X")


def test_plan_too_many_monitors():
    with pytest.raises(InvalidWorkspace):
        plan_bindings("X", 10)


@pytest.mark.asyncio
async def test_bind_ordinal_3(binder):
    results = await binder.bind_monitor("X")

    expected = [call("wsbind", f"{ws},X") for ws in range(31, 40)]
    expected.append(call("workspace", "X,31"))
    assert binder.backend.keyword.await_args_list == expected
    assert len(results) == 10
    assert all(r.ok for r in results)


@pytest.mark.asyncio
async def test_bind_sole_monitor(binder):
    binder.backend.get_monitors.return_value = [Monitor(2, "DP-1", 0, focused=True)]

    await binder.event_monitoradded("DP-1")

    expected = [call("wsbind", f"{ws},DP-1") for ws in range(1, 10)]
    expected.append(call("workspace", "DP-1,1"))
    assert binder.backend.keyword.await_args_list == expected
    binder.log.error.assert_not_called()


@pytest.mark.asyncio
async def test_failure_does_not_abort(binder):
    def keyword(name, value):
        if value == "35,X":
            raise DispatchFailure("keyword wsbind 35,X: rejected")

    binder.backend.keyword.side_effect = keyword

    results = await binder.bind_monitor("X")

    assert binder.backend.keyword.await_count == 10
    failed = [r for r in results if not r.ok]
    assert len(failed) == 1
    assert failed[0].request.local == 5
    assert "rejected" in failed[0].error
    # 6..9 and the activation were still sent
    sent = [c.args[1] for c in binder.backend.keyword.await_args_list]
    assert sent[5:] == ["36,X", "37,X", "38,X", "39,X", "X,31"]


@pytest.mark.asyncio
async def test_connection_reset_does_not_abort(mocker):
    "A binding failing at the socket level is recorded, the next ones are still sent"
    mocker.patch("asyncio.sleep", new_callable=AsyncMock)
    sent = []

    def write(data):
        sent.append(data.decode())
        if data == b"/keyword wsbind 35,X":
            raise ConnectionResetError

    reader = AsyncMock()
    reader.read.return_value = b"ok"
    writer = Mock()
    writer.write.side_effect = write
    writer.drain = AsyncMock()
    writer.wait_closed = AsyncMock()
    mocker.patch("asyncio.open_unix_connection", return_value=(reader, writer))

    ext = MonitorBinder("binder", Settings())
    ext.backend = HyprlandBackend(Mock())
    mocker.patch.object(ext.backend, "get_monitors", AsyncMock(return_value=layout()))
    ext.log = Mock()

    await ext.event_monitoradded("X")

    assert sent.count("/keyword wsbind 35,X") == 3
    assert sent[-5:] == [
        "/keyword wsbind 36,X",
        "/keyword wsbind 37,X",
        "/keyword wsbind 38,X",
        "/keyword wsbind 39,X",
        "/keyword workspace X,31",
    ]
    ext.log.error.assert_called_once()
    assert ext.log.error.call_args.args[1] == 35


@pytest.mark.asyncio
async def test_failures_are_logged(binder):
    binder.backend.keyword.side_effect = DispatchFailure("nope")

    await binder.event_monitoradded("X")

    assert binder.backend.keyword.await_count == 10
    assert binder.log.error.call_count == 10


@pytest.mark.asyncio
async def test_missing_monitor(binder):
    await binder.event_monitoradded("DP-9")

    binder.backend.keyword.assert_not_awaited()
    binder.log.error.assert_called_once()


@pytest.mark.asyncio
async def test_query_failure(binder):
    binder.backend.get_monitors.side_effect = QueryFailure("socket gone")

    await binder.event_monitoradded("X")

    binder.backend.keyword.assert_not_awaited()
    binder.log.error.assert_called_once()


@pytest.mark.asyncio
async def test_tenth_monitor_is_rejected(binder):
    monitors = [Monitor(i, f"OUT-{i}", i * 1000) for i in range(9)]
    monitors.append(Monitor(9, "X", 9000))
    binder.backend.get_monitors.return_value = monitors

    await binder.event_monitoradded("X")

    binder.backend.keyword.assert_not_awaited()
    binder.log.error.assert_called_once()


@pytest.mark.asyncio
async def test_id_out_of_range(binder):
    binder.settings = Settings(ordinals=OrdinalSource.ID)
    binder.backend.get_monitors.return_value = [Monitor(10, "X", 0)]

    await binder.event_monitoradded("X")

    binder.backend.keyword.assert_not_awaited()
    binder.log.error.assert_called_once()


@pytest.mark.asyncio
async def test_monitors_queried_on_every_event(binder):
    await binder.event_monitoradded("X")
    binder.backend.get_monitors.return_value = [Monitor(0, "DP-1", 0), Monitor(3, "X", 1920)]
    binder.backend.keyword.reset_mock()

    await binder.event_monitoradded("X")

    assert binder.backend.get_monitors.await_count == 2
    assert binder.backend.keyword.await_args_list[0] == call("wsbind", "21,X")


@pytest.mark.asyncio
async def test_id_ordinals(binder):
    binder.settings = Settings(ordinals=OrdinalSource.ID)
    binder.backend.get_monitors.return_value = [Monitor(0, "DP-1", 1920), Monitor(4, "X", 0)]

    await binder.event_monitoradded("X")

    assert binder.backend.keyword.await_args_list[0] == call("wsbind", "41,X")
    assert binder.backend.keyword.await_args_list[-1] == call("workspace", "X,41")
