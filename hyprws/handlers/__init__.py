"""Event handlers run by the listener."""
