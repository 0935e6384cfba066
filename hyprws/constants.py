"""Shared constants for hyprws."""

import os
from pathlib import Path

__all__ = [
    "CONFIG_FILE",
    "EVENTS",
    "EVENT_STREAM_MAX_RETRIES",
    "HYPRCTL",
    "HYPRLAND_INSTANCE_SIGNATURE",
    "IPC_FOLDER",
    "IPC_MAX_RETRIES",
    "IPC_RETRY_DELAY_MULTIPLIER",
    "MAX_LOCAL",
    "MAX_ORDINAL",
    "WORKSPACES_PER_MONITOR",
]

HYPRLAND_INSTANCE_SIGNATURE = os.environ.get("HYPRLAND_INSTANCE_SIGNATURE")

if HYPRLAND_INSTANCE_SIGNATURE:
    _runtime_folder = Path(os.environ.get("XDG_RUNTIME_DIR", "")) / "hypr" / HYPRLAND_INSTANCE_SIGNATURE
    IPC_FOLDER = str(_runtime_folder) if _runtime_folder.exists() else f"/tmp/hypr/{HYPRLAND_INSTANCE_SIGNATURE}"  # noqa: S108
else:
    IPC_FOLDER = ""

HYPRCTL = f"{IPC_FOLDER}/.socket.sock"
EVENTS = f"{IPC_FOLDER}/.socket2.sock"

_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
CONFIG_FILE = _xdg_config_home / "hypr" / "hyprws.toml"

# Workspace addressing: composite = ordinal * 10 + local
WORKSPACES_PER_MONITOR = 9
MAX_LOCAL = WORKSPACES_PER_MONITOR
MAX_ORDINAL = 9

# IPC retry settings
IPC_MAX_RETRIES = 3
IPC_RETRY_DELAY_MULTIPLIER = 0.5
EVENT_STREAM_MAX_RETRIES = 10
