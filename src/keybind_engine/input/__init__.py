"""Input state consumed by keybind press queries."""

from .source import InputSnapshot, InputSource, KeyStateTracker

__all__ = ["InputSnapshot", "InputSource", "KeyStateTracker"]
