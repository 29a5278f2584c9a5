"""Keybind record and its press-state queries."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Final, Optional

if TYPE_CHECKING:
    from keybind_engine.input.source import InputSource

NO_MODIFIER: Final = "none"


def normalize_key(value: object) -> str:
    """Return the canonical spelling of a symbolic key identifier."""

    if value is None:
        return ""
    return str(value).strip().lower()


@dataclass(slots=True)
class Keybind:
    """Rebindable trigger: a primary key plus an optional modifier.

    ``id`` and ``name`` are fixed descriptive fields. ``key`` and
    ``modifier`` are live values a settings consumer may reassign when the
    user rebinds. ``owner`` stays ``None`` until a registry stamps it.
    """

    id: str
    name: str
    key: str
    modifier: str = NO_MODIFIER
    owner: Optional[str] = field(default=None, kw_only=True)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("keybind id cannot be empty")

    def __setattr__(self, attr: str, value: Any) -> None:
        if attr == "key":
            value = normalize_key(value)
        elif attr == "modifier":
            value = normalize_key(value) or NO_MODIFIER
        elif attr == "owner":
            current = getattr(self, "owner", None)
            if current is not None and value != current:
                raise ValueError(
                    f"keybind '{self.id}' already belongs to owner '{current}'"
                )
        object.__setattr__(self, attr, value)

    @property
    def has_modifier(self) -> bool:
        return self.modifier != NO_MODIFIER

    @property
    def signature(self) -> str:
        if self.has_modifier:
            return f"{self.modifier}+{self.key}"
        return self.key

    def snapshot(self) -> "Keybind":
        """Independent value copy of every field, owner included."""

        return replace(self)

    def is_pressed(self, source: "InputSource") -> bool:
        """True while the key (and modifier, if any) are held."""

        if self.has_modifier:
            return source.is_held(self.modifier) and source.is_held(self.key)
        return source.is_held(self.key)

    def is_down(self, source: "InputSource") -> bool:
        """True on the tick the key goes down while the modifier is held."""

        if self.has_modifier:
            return source.is_held(self.modifier) and source.is_newly_pressed(
                self.key
            )
        return source.is_newly_pressed(self.key)


__all__ = ["Keybind", "NO_MODIFIER", "normalize_key"]
