"""Reset-to-default support built on the registry's default snapshots."""

from __future__ import annotations

from typing import Optional

from keybind_engine.runtime.telemetry import record_event

from .models import Keybind
from .registry import KeybindRegistry


def modified_keybinds(registry: KeybindRegistry, owner: str) -> list[Keybind]:
    """Live keybinds whose trigger no longer matches the registered default."""

    return [
        live for live, default in registry.pairs(owner) if _differs(live, default)
    ]


def reset_to_default(
    registry: KeybindRegistry,
    owner: str,
    keybind_id: Optional[str] = None,
    *,
    logger_name: Optional[str] = None,
) -> list[Keybind]:
    """Copy default key/modifier values back into the live keybinds.

    Only ``keybind_id`` is reset when given. Events go to ``logger_name``,
    falling back to the registry's logger. Returns the live entries that
    actually changed.
    """

    changed: list[Keybind] = []
    for live, default in registry.pairs(owner):
        if keybind_id is not None and live.id != keybind_id:
            continue
        if not _differs(live, default):
            continue
        live.key = default.key
        live.modifier = default.modifier
        changed.append(live)

    if changed:
        record_event(
            "keybinds.reset",
            data={"owner": owner, "keybind_ids": [kb.id for kb in changed]},
            logger_name=logger_name or registry.logger_name,
        )
    return changed


def _differs(live: Keybind, default: Keybind) -> bool:
    return live.key != default.key or live.modifier != default.modifier


__all__ = ["modified_keybinds", "reset_to_default"]
