"""lwwset - Last-write-wins element set CRDT."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("lwwset")
except PackageNotFoundError:
    __version__ = "0+local"
from lwwset.clock import LogicalClock, TimestampUnit, wall_clock
from lwwset.config import LwwConfig
from lwwset.exceptions import KeyNotFoundError, LwwConfigError, LwwError
from lwwset.models import Entry
from lwwset.policy import resolve, should_replace
from lwwset.store import LastWriteWins, merge, merge_all

__all__ = [
    "__version__",
    "Entry",
    "KeyNotFoundError",
    "LastWriteWins",
    "LogicalClock",
    "LwwConfig",
    "LwwConfigError",
    "LwwError",
    "TimestampUnit",
    "merge",
    "merge_all",
    "resolve",
    "should_replace",
    "wall_clock",
]
