"""pygame adapter (requires the ``pygame`` extra)."""

from .source import MODIFIER_ALIASES, PygameInputSource

__all__ = ["MODIFIER_ALIASES", "PygameInputSource"]
