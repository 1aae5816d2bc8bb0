"""In-memory last-write-wins element set.

This is the only component that applies the resolution policy.  Merging two
stores is nothing more than replaying one store's entries through the other's
``set``, so every convergence property follows from the per-key rule in
:mod:`lwwset.policy`.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, ItemsView, KeysView, Mapping
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from lwwset.clock import wall_clock
from lwwset.config import LwwConfig
from lwwset.exceptions import KeyNotFoundError
from lwwset.models import Entry
from lwwset.policy import resolve

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class LastWriteWins(Generic[T]):
    """Mapping from string keys to timestamped entries.

    Removal is local only: a removed key is forgotten entirely and a later
    merge from a replica that still holds it brings it back.

    Not thread-safe; callers serialise access to one instance.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], int] | None = None,
        config: LwwConfig | None = None,
    ) -> None:
        self._config = config or LwwConfig()
        self._clock = clock if clock is not None else wall_clock(self._config.timestamp_unit)
        # Logical clocks must move past every timestamp this replica stores or rejects.
        self._observe: Callable[[int], None] | None = getattr(self._clock, "observe", None)
        self._entries: dict[str, Entry[T]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entries={len(self._entries)})"

    def _lookup(self, key: str) -> Entry[T] | None:
        return self._entries.get(key)

    def _apply(self, key: str, entry: Entry[T]) -> bool:
        """Resolve *entry* against the stored one; return True if it was stored."""
        if self._observe is not None:
            self._observe(entry.timestamp)
        existing = self._lookup(key)
        if existing is None:
            self._entries[key] = entry
            return True

        winner = resolve(existing, entry)
        if winner is existing:
            if entry is not existing:
                _logger.debug(
                    "Ignoring write to %r: timestamp %s not newer than stored %s",
                    key,
                    entry.timestamp,
                    existing.timestamp,
                )
            return False

        self._entries[key] = winner
        return True

    def set(self, key: str, entry: Entry[T]) -> None:
        """Store *entry* unless the current entry for *key* is as new or newer."""
        self._apply(key, entry)

    def put(self, key: str, value: T) -> Entry[T]:
        """Stamp *value* with the store clock and ``set`` it.

        Returns the entry that is current for *key* afterwards.
        """
        self._apply(key, Entry(value=value, timestamp=self._clock()))
        return self._entries[key]

    def get_entry(self, key: str) -> Entry[T]:
        """Return the stored entry itself (not a copy)."""
        entry = self._lookup(key)
        if entry is None:
            raise KeyNotFoundError(key)
        return entry

    def get(self, key: str) -> T:
        return self.get_entry(key).value

    def remove(self, key: str) -> None:
        """Forget *key*.  Absent keys are ignored."""
        self._entries.pop(key, None)

    def entries(self) -> ItemsView[str, Entry[T]]:
        return self._entries.items()

    def keys(self) -> KeysView[str]:
        return self._entries.keys()

    def elements(self) -> Mapping[str, Entry[T]]:
        """Read-only live view of the whole key space."""
        return MappingProxyType(self._entries)

    def merge(self, source: LastWriteWins[T]) -> LastWriteWins[T]:
        """Absorb every entry of *source* and return ``self``.

        On equal timestamps the entry already held by ``self`` is kept.
        """
        # Materialise first so merging a store into itself is safe.
        items = list(source.entries())
        taken = sum(1 for key, entry in items if self._apply(key, entry))
        _logger.debug("Merged %d entries, %d taken from source", len(items), taken)
        return self

    def copy(self) -> LastWriteWins[T]:
        """Return an independent store holding the same entries."""
        clone: LastWriteWins[T] = type(self)(clock=self._clock, config=self._config)
        clone._entries.update(self._entries)
        return clone

    def snapshot(self) -> dict[str, dict[str, Any]]:
        """Dump the current state as plain dicts, keyed by key.

        Values are passed through as-is, never serialized.
        """
        return {key: {"value": entry.value, "timestamp": entry.timestamp} for key, entry in self._entries.items()}

    @classmethod
    def from_snapshot(
        cls,
        data: Mapping[str, Mapping[str, Any]],
        *,
        clock: Callable[[], int] | None = None,
        config: LwwConfig | None = None,
    ) -> LastWriteWins[Any]:
        """Rebuild a store by replaying ``set`` over a :meth:`snapshot` dump.

        Malformed items raise :class:`pydantic.ValidationError`.
        """
        store: LastWriteWins[Any] = cls(clock=clock, config=config)
        for key, raw in data.items():
            store.set(key, Entry.model_validate(raw))
        return store


def merge(target: LastWriteWins[T], source: LastWriteWins[T]) -> LastWriteWins[T]:
    """Merge *source* into *target* in place and return *target*."""
    return target.merge(source)


def merge_all(first: LastWriteWins[T], *others: LastWriteWins[T]) -> LastWriteWins[T]:
    """Left-fold :func:`merge` over *others*, seeded with *first*."""
    return functools.reduce(merge, others, first)
