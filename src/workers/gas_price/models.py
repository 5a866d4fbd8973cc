"""Data models for the gas price change watch.

Everything here is created fresh for a single run and discarded when the
run ends; nothing is persisted between runs.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum


class RunState(str, Enum):
    """States a run passes through, in order."""

    IDLE = "idle"
    LISTING = "listing"
    AGGREGATING = "aggregating"
    REPORTING = "reporting"
    DONE = "done"


@dataclass(frozen=True)
class GasPriceMatch:
    """A chain whose ``chain.json`` gas price fields a commit touched."""

    entity_name: str
    commit_sha: str


@dataclass(frozen=True)
class TimeWindow:
    """Commit window ``[start, end]`` handed to the listing endpoint."""

    start: datetime
    end: datetime

    @classmethod
    def ending_at(cls, end: datetime, lookback: timedelta) -> "TimeWindow":
        """Window of length ``lookback`` ending at ``end``."""
        return cls(start=end - lookback, end=end)


@dataclass(frozen=True)
class RunResult:
    """Outcome of one run: the matches found, or why the run failed."""

    success: bool
    matches: tuple[GasPriceMatch, ...] = field(default_factory=tuple)
    error: str | None = None

    @classmethod
    def succeeded(cls, matches: list[GasPriceMatch]) -> "RunResult":
        return cls(success=True, matches=tuple(matches))

    @classmethod
    def failed(cls, description: str) -> "RunResult":
        return cls(success=False, error=description)

    @property
    def should_notify(self) -> bool:
        """A run notifies when it failed or found at least one match."""
        return not self.success or bool(self.matches)

    def __str__(self) -> str:
        if self.success:
            return f"RunResult(success, matches={len(self.matches)})"
        return f"RunResult(failure, error={self.error!r})"
