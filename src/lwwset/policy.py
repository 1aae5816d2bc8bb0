"""Deterministic conflict-resolution policy.

This module only decides which of two entries survives.  It never looks at
entry values, and on equal timestamps it always keeps the entry that was
already stored, which is what makes re-applying an entry a no-op.
"""

from __future__ import annotations

from typing import TypeVar

from lwwset.models import Entry

T = TypeVar("T")


def should_replace(existing_ts: int, incoming_ts: int) -> bool:
    """Return ``True`` only when the incoming timestamp is strictly newer."""
    return existing_ts < incoming_ts


def resolve(existing: Entry[T], incoming: Entry[T]) -> Entry[T]:
    """Pick the surviving entry for a key.

    Policy:
    - incoming strictly newer: incoming wins.
    - otherwise (older or tied): existing wins.
    """
    if should_replace(existing.timestamp, incoming.timestamp):
        return incoming
    return existing
