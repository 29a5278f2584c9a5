"""Owner-partitioned registry of live keybinds and their defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from keybind_engine.runtime.telemetry import record_event, span

from .models import Keybind


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    keybind_count: int
    owner_count: int
    owners: tuple[str, ...]


class DuplicateKeybindError(ValueError):
    """Raised by a strict registry when an owner reuses a keybind id."""

    def __init__(self, owner: str, keybind_id: str):
        super().__init__(
            f"Keybind '{keybind_id}' is already registered for owner '{owner}'"
        )
        self.owner = owner
        self.keybind_id = keybind_id


class KeybindRegistry:
    """Holds the current keybinds and a frozen default copy of each.

    Both collections are append-only. Populate the registry once during
    start-up and hand it to whatever needs lookups; it does no locking.
    Duplicate ids within an owner are kept (and logged) unless the
    registry is created with ``strict=True``.
    """

    def __init__(self, *, strict: bool = False, logger_name: str | None = None) -> None:
        self._current: List[Keybind] = []
        self._defaults: List[Keybind] = []
        self._owner_ids: Dict[str, set[str]] = {}
        self._strict = strict
        self._logger_name = logger_name
        self._revision = 0

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def logger_name(self) -> str | None:
        return self._logger_name

    def revision(self) -> int:
        return self._revision

    def add(self, owner: str, keybind: Keybind) -> Keybind:
        with span(
            "keybinds::add",
            logger_name=self._logger_name,
            component="keybinds",
            metadata={"owner": owner, "keybind_id": keybind.id},
        ) as handle:
            if keybind.owner is not None and keybind.owner != owner:
                raise ValueError(
                    f"Keybind '{keybind.id}' is already registered for owner "
                    f"'{keybind.owner}'"
                )
            seen = self._owner_ids.setdefault(owner, set())
            if keybind.id in seen:
                if self._strict:
                    raise DuplicateKeybindError(owner, keybind.id)
                handle.add_metadata("duplicate", True)
                record_event(
                    "keybinds.duplicate_id",
                    level="warning",
                    data={"owner": owner, "keybind_id": keybind.id},
                    logger_name=self._logger_name,
                )
            seen.add(keybind.id)

            keybind.owner = owner
            self._current.append(keybind)
            self._defaults.append(keybind.snapshot())
            self._revision += 1
            return keybind

    def get(self, owner: str) -> list[Keybind]:
        return [keybind for keybind in self._current if keybind.owner == owner]

    def get_default(self, owner: str) -> list[Keybind]:
        return [keybind for keybind in self._defaults if keybind.owner == owner]

    def find(self, owner: str, keybind_id: str) -> Optional[Keybind]:
        return _first(self._current, owner, keybind_id)

    def find_default(self, owner: str, keybind_id: str) -> Optional[Keybind]:
        return _first(self._defaults, owner, keybind_id)

    def owners(self) -> tuple[str, ...]:
        return tuple(self._owner_ids)

    def pairs(self, owner: str) -> list[Tuple[Keybind, Keybind]]:
        """Live entries zipped with the default captured when each was added.

        Entries are paired by registration index and filtered on the
        default's owner.
        """

        return [
            (live, default)
            for live, default in zip(self._current, self._defaults)
            if default.owner == owner
        ]

    def detect_conflicts(
        self, owner: Optional[str] = None
    ) -> list[Tuple[Keybind, Keybind]]:
        """Pairs of live keybinds that share a trigger signature.

        Unbound entries (empty key) never conflict.
        """

        candidates = self._current if owner is None else self.get(owner)
        by_signature: Dict[str, list[Keybind]] = {}
        conflicts: list[Tuple[Keybind, Keybind]] = []
        for keybind in candidates:
            if not keybind.key:
                continue
            bucket = by_signature.setdefault(keybind.signature, [])
            conflicts.extend((existing, keybind) for existing in bucket)
            bucket.append(keybind)
        return conflicts

    def stats(self) -> RegistryStats:
        owners = self.owners()
        return RegistryStats(
            keybind_count=len(self._current),
            owner_count=len(owners),
            owners=owners,
        )

    def __len__(self) -> int:
        return len(self._current)

    def __iter__(self) -> Iterator[Keybind]:
        return iter(list(self._current))


def _first(
    collection: List[Keybind], owner: str, keybind_id: str
) -> Optional[Keybind]:
    for keybind in collection:
        if keybind.owner == owner and keybind.id == keybind_id:
            return keybind
    return None


__all__ = [
    "KeybindRegistry",
    "DuplicateKeybindError",
    "RegistryStats",
]
