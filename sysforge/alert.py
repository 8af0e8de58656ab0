"""Alert types and the thresholds that trigger them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

__all__ = ["AlertThreshold", "AlertKind", "Alert"]


@dataclass
class AlertThreshold:
    """Percentages above which CPU and memory alerts fire."""

    cpu_percent: float
    memory_percent: float


class AlertKind(Enum):
    """What an alert is about."""

    HIGH_CPU = "high_cpu"
    HIGH_MEMORY = "high_memory"


def _round_percent(value: float) -> int:
    """Round half away from zero, clamping negatives to zero."""
    if value <= 0 or math.isnan(value):
        return 0
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class Alert:
    """A fired alert: its kind, the rounded percentage and a readable message."""

    kind: AlertKind
    actual: int
    message: str

    @classmethod
    def high_cpu(cls, actual_pct: float) -> Alert:
        """Alert for CPU usage at ``actual_pct`` percent."""
        return cls(
            kind=AlertKind.HIGH_CPU,
            actual=_round_percent(actual_pct),
            message=f"High CPU usage: {actual_pct:.1f}%",
        )

    @classmethod
    def high_memory(cls, actual_pct: float) -> Alert:
        """Alert for memory usage at ``actual_pct`` percent."""
        return cls(
            kind=AlertKind.HIGH_MEMORY,
            actual=_round_percent(actual_pct),
            message=f"High memory usage: {actual_pct:.1f}%",
        )