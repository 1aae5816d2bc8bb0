"""Custom exception hierarchy for lwwset."""

from __future__ import annotations


class LwwError(Exception):
    """Base exception for all lwwset errors."""


class LwwConfigError(LwwError):
    """Invalid configuration value."""


class KeyNotFoundError(LwwError, KeyError):
    """No entry exists for the requested key.

    Raised only by read-by-key operations.  It is also a :class:`KeyError`
    so ``except KeyError`` handlers written against plain dicts keep working.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Key {key} not found")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0])
