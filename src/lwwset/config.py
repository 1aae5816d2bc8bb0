"""Store configuration for lwwset."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from lwwset.clock import TimestampUnit
from lwwset.exceptions import LwwConfigError


@dataclasses.dataclass(frozen=True)
class LwwConfig:
    """Store configuration.

    Parameters
    ----------
    timestamp_unit : TimestampUnit
        Unit of the wall-clock timestamps used to stamp local writes made
        through :meth:`LastWriteWins.put`.  Defaults to milliseconds.
        Ignored when the store is given an explicit clock.
    """

    timestamp_unit: TimestampUnit = TimestampUnit.MILLISECONDS

    def __post_init__(self) -> None:
        try:
            unit = TimestampUnit(self.timestamp_unit)
        except ValueError as exc:
            raise LwwConfigError(f"Unknown timestamp unit: {self.timestamp_unit!r}") from exc
        object.__setattr__(self, "timestamp_unit", unit)

    @classmethod
    def from_env(cls, **overrides: Any) -> LwwConfig:
        """Create configuration from environment variables.

        Reads ``LWW_TIMESTAMP_UNIT`` (``s``, ``ms``, ``us`` or ``ns``).
        Explicit keyword arguments override environment values.

        Raises
        ------
        LwwConfigError
            If the environment or an override holds an unknown timestamp unit.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        unit_env = env.get("LWW_TIMESTAMP_UNIT")
        if unit_env is not None and "timestamp_unit" not in overrides:
            config_kwargs["timestamp_unit"] = unit_env.strip().lower()

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
