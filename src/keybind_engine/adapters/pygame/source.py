"""Input source backed by pygame's keyboard state."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional, Sequence

import pygame

from keybind_engine.keybinds.models import normalize_key

# pygame only knows the sided names ("left shift"); accept the plain ones too.
MODIFIER_ALIASES: Dict[str, tuple[str, ...]] = {
    "shift": ("left shift", "right shift"),
    "ctrl": ("left ctrl", "right ctrl"),
    "alt": ("left alt", "right alt"),
    "meta": ("left meta", "right meta"),
}


class PygameInputSource:
    """Reads held keys from ``pygame.key.get_pressed`` and edges from events.

    Pass each frame's events to ``process_events`` then call ``tick``.
    Key names follow ``pygame.key.name`` (``"space"``, ``"left shift"``).
    """

    def __init__(
        self, *, get_pressed: Optional[Callable[[], Sequence[bool]]] = None
    ) -> None:
        self._get_pressed = get_pressed or pygame.key.get_pressed
        self._state: Optional[Sequence[bool]] = None
        self._edges: set[str] = set()
        self._pressed: frozenset[str] = frozenset()
        self._codes: Dict[str, Optional[int]] = {}

    def process_events(self, events: Iterable[pygame.event.Event]) -> None:
        for event in events:
            if event.type == pygame.KEYDOWN:
                self._edges.add(normalize_key(pygame.key.name(event.key)))

    def tick(self) -> None:
        self._state = self._get_pressed()
        self._pressed = frozenset(self._edges)
        self._edges.clear()

    def is_held(self, key: str) -> bool:
        if self._state is None:
            return False
        for name in _expand(key):
            code = self._code(name)
            if code is not None and self._state[code]:
                return True
        return False

    def is_newly_pressed(self, key: str) -> bool:
        return any(name in self._pressed for name in _expand(key))

    def _code(self, name: str) -> Optional[int]:
        if name not in self._codes:
            try:
                self._codes[name] = pygame.key.key_code(name)
            except ValueError:
                self._codes[name] = None
        return self._codes[name]


def _expand(key: str) -> tuple[str, ...]:
    name = normalize_key(key)
    if not name:
        return ()
    return MODIFIER_ALIASES.get(name, (name,))


__all__ = ["PygameInputSource", "MODIFIER_ALIASES"]
