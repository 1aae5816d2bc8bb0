"""Per-key state carried by a last-write-wins store."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")


class Entry(BaseModel, Generic[T]):
    """A value together with the timestamp it was written at.

    Entries are frozen: a superseded entry is replaced as a whole, never
    edited.  ``value`` is opaque to the store and is never compared; only
    ``timestamp`` takes part in conflict resolution.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: T
    timestamp: int = Field(..., description="Logical clock or epoch timestamp of the write")

    @field_validator("timestamp", mode="before")
    @classmethod
    def _reject_bool(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("timestamp must be an integer, not a bool")
        return value
