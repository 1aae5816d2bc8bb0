from __future__ import annotations

import pytest

from lwwset.clock import TimestampUnit
from lwwset.config import LwwConfig
from lwwset.exceptions import LwwConfigError
from lwwset.store import LastWriteWins


def test_default_unit_is_milliseconds(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LWW_TIMESTAMP_UNIT", raising=False)

    assert LwwConfig().timestamp_unit == TimestampUnit.MILLISECONDS
    assert LwwConfig.from_env().timestamp_unit == TimestampUnit.MILLISECONDS


def test_from_env_reads_unit(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LWW_TIMESTAMP_UNIT", " NS ")

    assert LwwConfig.from_env().timestamp_unit == TimestampUnit.NANOSECONDS


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LWW_TIMESTAMP_UNIT", "bogus")

    config = LwwConfig.from_env(timestamp_unit=TimestampUnit.SECONDS)

    assert config.timestamp_unit == TimestampUnit.SECONDS


def test_from_env_rejects_unknown_unit(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LWW_TIMESTAMP_UNIT", "bogus")

    with pytest.raises(LwwConfigError, match="bogus"):
        LwwConfig.from_env()


def test_store_uses_configured_unit() -> None:
    store: LastWriteWins[str] = LastWriteWins(config=LwwConfig(timestamp_unit=TimestampUnit.SECONDS))

    entry = store.put("k", "v")

    # Seconds since the epoch stay far below millisecond values.
    assert entry.timestamp < 10**11


def test_direct_construction_normalizes_string_unit() -> None:
    config = LwwConfig(timestamp_unit="s")  # type: ignore[arg-type]

    assert config.timestamp_unit is TimestampUnit.SECONDS


def test_direct_construction_rejects_unknown_unit() -> None:
    with pytest.raises(LwwConfigError, match="bogus"):
        LwwConfig(timestamp_unit="bogus")  # type: ignore[arg-type]


def test_from_env_rejects_unknown_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LWW_TIMESTAMP_UNIT", raising=False)

    with pytest.raises(LwwConfigError, match="bogus"):
        LwwConfig.from_env(timestamp_unit="bogus")
