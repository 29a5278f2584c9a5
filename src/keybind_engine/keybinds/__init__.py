"""Rebindable keybinds, their registry and default snapshots."""

from .models import NO_MODIFIER, Keybind, normalize_key
from .registry import DuplicateKeybindError, KeybindRegistry, RegistryStats
from .defaults import modified_keybinds, reset_to_default

__all__ = [
    "NO_MODIFIER",
    "Keybind",
    "normalize_key",
    "KeybindRegistry",
    "DuplicateKeybindError",
    "RegistryStats",
    "modified_keybinds",
    "reset_to_default",
]
