"""Registry of rebindable, owner-scoped keybinds."""

from .input import InputSnapshot, InputSource, KeyStateTracker
from .keybinds import (
    NO_MODIFIER,
    DuplicateKeybindError,
    Keybind,
    KeybindRegistry,
    RegistryStats,
    modified_keybinds,
    reset_to_default,
)

__all__ = [
    "NO_MODIFIER",
    "DuplicateKeybindError",
    "InputSnapshot",
    "InputSource",
    "KeyStateTracker",
    "Keybind",
    "KeybindRegistry",
    "RegistryStats",
    "modified_keybinds",
    "reset_to_default",
]

__version__ = "0.1.0"
