" generic fixtures "
from copy import deepcopy
from unittest.mock import AsyncMock

import pytest

from hyprws.config import Settings
from hyprws.models import Monitor


def pytest_configure():
    "Runs once before all"
    from hyprws.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


def make_monitors(*entries):
    "Build monitors from (id, name, x) tuples, the first one is focused"
    return [Monitor(id=mid, name=name, x=x, focused=i == 0) for i, (mid, name, x) in enumerate(entries)]


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def backend():
    "A backend mock, answering `get_monitors` with `MONITORS`"
    mock = AsyncMock()
    mock.get_monitors.return_value = [Monitor.from_info(info) for info in deepcopy(MONITORS)]
    return mock


EXTRA_MON = {
    "id": 2,
    "name": "eDP-1",
    "description": "Sony (eDP-1)",
    "make": "Sony",
    "model": "XXX",
    "serial": "YYY",
    "width": 640,
    "height": 480,
    "refreshRate": 59.99900,
    "x": 5360,
    "y": 0,
    "activeWorkspace": {"id": 21, "name": "21"},
    "specialWorkspace": {"id": 0, "name": ""},
    "reserved": [0, 50, 0, 0],
    "scale": 1.00,
    "transform": 0,
    "focused": False,
    "dpmsStatus": True,
    "vrr": False,
    "activelyTearing": False,
    "disabled": False,
}

MONITORS = [
    {
        "id": 1,
        "name": "DP-1",
        "description": "Microstep MAG342CQPV DB6H513700137 (DP-1)",
        "make": "Microstep",
        "model": "MAG342CQPV",
        "serial": "DB6H513700137",
        "width": 3440,
        "height": 1440,
        "refreshRate": 59.99900,
        "x": 1920,
        "y": 0,
        "activeWorkspace": {"id": 12, "name": "12"},
        "specialWorkspace": {"id": 0, "name": ""},
        "reserved": [0, 50, 0, 0],
        "scale": 1.00,
        "transform": 0,
        "focused": True,
        "dpmsStatus": True,
        "vrr": False,
        "activelyTearing": False,
        "disabled": False,
    },
    {
        "id": 0,
        "name": "HDMI-A-1",
        "description": "BNQ BenQ PJ 0x01010101 (HDMI-A-1)",
        "make": "BNQ",
        "model": "BenQ PJ",
        "serial": "0x01010101",
        "width": 1920,
        "height": 1080,
        "refreshRate": 60.00000,
        "x": 0,
        "y": 0,
        "activeWorkspace": {"id": 4, "name": "4"},
        "specialWorkspace": {"id": 0, "name": ""},
        "reserved": [0, 50, 0, 0],
        "scale": 1.00,
        "transform": 0,
        "focused": False,
        "dpmsStatus": True,
        "vrr": False,
        "activelyTearing": False,
        "disabled": False,
    },
]
