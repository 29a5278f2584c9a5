"""Input source fed by Textual key events."""

from __future__ import annotations

from typing import Dict, Optional

from textual.events import Key

from keybind_engine.input.source import InputSnapshot, KeyStateTracker
from keybind_engine.keybinds.models import normalize_key


def split_textual_key(key: str) -> tuple[str, ...]:
    """Split a Textual key name like ``"ctrl+shift+x"`` into key names.

    An upper-case single character implies ``shift``.
    """

    parts = [part for part in key.split("+") if part]
    if not parts:
        return ()
    *modifiers, primary = parts
    if len(primary) == 1 and primary.isupper() and "shift" not in modifiers:
        modifiers.append("shift")
    return tuple(normalize_key(part) for part in (*modifiers, primary))


class TextualInputSource:
    """Bridges Textual ``Key`` events to tick-based press state.

    Terminals report key presses (and auto-repeat) but never releases, so a
    key stays held for ``hold_ticks`` ticks after its last event. Hosts
    forward ``on_key`` from their app or widget and call ``tick`` from a
    timer at the simulation rate.
    """

    def __init__(
        self, *, hold_ticks: int = 1, tracker: Optional[KeyStateTracker] = None
    ) -> None:
        if hold_ticks < 1:
            raise ValueError("hold_ticks must be at least 1")
        self.hold_ticks = hold_ticks
        self.tracker = tracker or KeyStateTracker()
        self._expires: Dict[str, int] = {}

    def on_key(self, event: Key) -> None:
        self.feed_key(event.key)

    def feed_key(self, key: str) -> None:
        deadline = self.tracker.ticks + self.hold_ticks
        for name in split_textual_key(key):
            self.tracker.press(name)
            self._expires[name] = deadline

    def tick(self) -> InputSnapshot:
        # Expiry runs before the snapshot; a key refreshed by auto-repeat
        # stays down and produces no new edge.
        now = self.tracker.ticks
        for name in [k for k, deadline in self._expires.items() if deadline <= now]:
            del self._expires[name]
            self.tracker.release(name)
        return self.tracker.tick()

    def is_held(self, key: str) -> bool:
        return self.tracker.is_held(key)

    def is_newly_pressed(self, key: str) -> bool:
        return self.tracker.is_newly_pressed(key)


__all__ = ["TextualInputSource", "split_textual_key"]
