"""Creation monitor — rolling timing and success statistics for agent creation."""

from __future__ import annotations

import threading
from collections import deque
from datetime import UTC, datetime

from pydantic import BaseModel, Field

_DEFAULT_MAX_RECENT = 100
_UNKNOWN_ROLE = "Unknown"


class CreationRecord(BaseModel):
    """Outcome of one creation request."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    duration_ms: float = Field(ge=0)
    success: bool
    target_met: bool
    role: str | None = None
    error: str | None = None


class RolePerformance(BaseModel):
    average_time_ms: float
    count: int
    success_rate: float = Field(description="Percentage of successful creations")


class CreationStats(BaseModel):
    """Snapshot of the monitor.

    Averages and rates cover the recent window only; ``total_creations``,
    fastest and slowest cover everything since the last reset.
    """

    total_creations: int = 0
    average_creation_time_ms: float = 0.0
    fastest_creation_ms: float | None = None
    slowest_creation_ms: float = 0.0
    success_rate: float = 100.0
    target_met_rate: float = 100.0
    recent: list[CreationRecord] = Field(default_factory=list)


def _percent(part: int, whole: int) -> float:
    return part / whole * 100 if whole else 100.0


class CreationMonitor:
    """Tracks recent creation outcomes against a time target.

    Thread-safe: a single monitor may be shared by concurrent callers.
    """

    def __init__(self, target_ms: float = 30_000, max_recent: int = _DEFAULT_MAX_RECENT) -> None:
        self._target_ms = target_ms
        self._max_recent = max_recent
        self._lock = threading.Lock()
        self.reset()

    @property
    def target_ms(self) -> float:
        return self._target_ms

    def reset(self) -> None:
        with self._lock:
            self._recent: deque[CreationRecord] = deque(maxlen=self._max_recent)
            self._total = 0
            self._fastest: float | None = None
            self._slowest = 0.0

    def record(self, record: CreationRecord) -> None:
        with self._lock:
            self._recent.append(record)
            self._total += 1
            if self._fastest is None or record.duration_ms < self._fastest:
                self._fastest = record.duration_ms
            self._slowest = max(self._slowest, record.duration_ms)

    def stats(self) -> CreationStats:
        with self._lock:
            recent = list(self._recent)
            total, fastest, slowest = self._total, self._fastest, self._slowest
        count = len(recent)
        return CreationStats(
            total_creations=total,
            average_creation_time_ms=sum(r.duration_ms for r in recent) / count if count else 0.0,
            fastest_creation_ms=fastest,
            slowest_creation_ms=slowest,
            success_rate=_percent(sum(r.success for r in recent), count),
            target_met_rate=_percent(sum(r.target_met for r in recent), count),
            recent=[r.model_copy() for r in recent],
        )

    def role_performance(self) -> dict[str, RolePerformance]:
        """Average time and success rate per role over the recent window."""
        with self._lock:
            recent = list(self._recent)
        grouped: dict[str, list[CreationRecord]] = {}
        for record in recent:
            grouped.setdefault(record.role or _UNKNOWN_ROLE, []).append(record)
        return {
            role: RolePerformance(
                average_time_ms=sum(r.duration_ms for r in records) / len(records),
                count=len(records),
                success_rate=_percent(sum(r.success for r in records), len(records)),
            )
            for role, records in grouped.items()
        }

    def is_healthy(self) -> bool:
        stats = self.stats()
        return (
            stats.average_creation_time_ms < self._target_ms
            and stats.success_rate > 90
            and stats.target_met_rate > 80
        )

    def recommendations(self) -> list[str]:
        stats = self.stats()
        advice: list[str] = []
        if stats.average_creation_time_ms > self._target_ms * 5 / 6:
            advice.append("Average creation time is approaching the target")
        if stats.success_rate < 95:
            advice.append("Success rate is below 95% - review error patterns")
        if stats.target_met_rate < 85:
            advice.append("Performance target met rate is low - optimize creation process")
        if sum(not r.success for r in stats.recent) > 5:
            advice.append("High number of recent failures - review validation logic")
        for role, perf in self.role_performance().items():
            if perf.average_time_ms > self._target_ms:
                advice.append(f"{role} agents are exceeding performance targets")
        return advice
