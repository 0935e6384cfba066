"""hyprws - monitor-aware workspaces for Hyprland.

Provides one-shot commands addressing workspaces relative to the focused
monitor, directional monitor cycling, a hot-plug listener binding a block of
workspaces to every new monitor and a status feed for waybar.
"""
