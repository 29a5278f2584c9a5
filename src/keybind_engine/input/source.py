"""Input sources consulted by keybind press-state queries.

An input source answers two questions per key: is it held right now
(level-triggered) and did it go down on this tick (edge-triggered).
Keybinds only read from a source; polling and ticking belong to the host.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Protocol, runtime_checkable

from keybind_engine.keybinds.models import normalize_key


@runtime_checkable
class InputSource(Protocol):
    def is_held(self, key: str) -> bool:
        ...

    def is_newly_pressed(self, key: str) -> bool:
        ...


def _normalized(keys: Iterable[str]) -> frozenset[str]:
    return frozenset(k for k in (normalize_key(key) for key in keys) if k)


@dataclass(frozen=True, slots=True)
class InputSnapshot:
    """Immutable view of the input state for a single tick."""

    held: frozenset[str] = field(default_factory=frozenset)
    pressed: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def of(
        cls, *, held: Iterable[str] = (), pressed: Iterable[str] = ()
    ) -> "InputSnapshot":
        return cls(held=_normalized(held), pressed=_normalized(pressed))

    def is_held(self, key: str) -> bool:
        return normalize_key(key) in self.held

    def is_newly_pressed(self, key: str) -> bool:
        return normalize_key(key) in self.pressed


class KeyStateTracker:
    """Turns raw press/release transitions into per-tick snapshots.

    Call ``press``/``release`` as raw input arrives and ``tick`` once per
    simulation step. A key pressed since the previous tick is newly pressed
    for exactly the following tick; a key pressed and released between two
    ticks is newly pressed but not held.
    """

    def __init__(self) -> None:
        self._down: set[str] = set()
        self._edges: set[str] = set()
        self._snapshot = InputSnapshot()
        self._ticks = 0

    @property
    def ticks(self) -> int:
        return self._ticks

    def press(self, key: str) -> None:
        name = normalize_key(key)
        if not name or name in self._down:
            return
        self._down.add(name)
        self._edges.add(name)

    def release(self, key: str) -> None:
        self._down.discard(normalize_key(key))

    def release_all(self) -> None:
        self._down.clear()

    def is_down(self, key: str) -> bool:
        """Raw state since the last transition, ignoring tick boundaries."""

        return normalize_key(key) in self._down

    def tick(self) -> InputSnapshot:
        self._snapshot = InputSnapshot(
            held=frozenset(self._down), pressed=frozenset(self._edges)
        )
        self._edges.clear()
        self._ticks += 1
        return self._snapshot

    def snapshot(self) -> InputSnapshot:
        return self._snapshot

    def is_held(self, key: str) -> bool:
        return self._snapshot.is_held(key)

    def is_newly_pressed(self, key: str) -> bool:
        return self._snapshot.is_newly_pressed(key)


__all__ = ["InputSource", "InputSnapshot", "KeyStateTracker"]
