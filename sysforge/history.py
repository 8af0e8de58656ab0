"""Rolling window of metric snapshots with threshold-based alert detection."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, List, Optional

from sysforge.alert import Alert, AlertThreshold
from sysforge.metrics import Snapshot

__all__ = ["MetricsHistory"]


class MetricsHistory:
    """Keeps at most ``max_snapshots`` readings, dropping the oldest first.

    Alerts are raised from the most recent snapshot against ``threshold``.
    """

    def __init__(self, max_snapshots: int, threshold: AlertThreshold) -> None:
        if max_snapshots < 0:
            raise ValueError(
                f"max_snapshots must not be negative, got {max_snapshots}"
            )
        self.max_snapshots = max_snapshots
        self.threshold = threshold
        self._snapshots: Deque[Snapshot] = deque(maxlen=max_snapshots)

    def __len__(self) -> int:
        return len(self._snapshots)

    def __iter__(self) -> Iterator[Snapshot]:
        """Iterate over stored snapshots, oldest first."""
        return iter(self._snapshots)

    def record(self, snapshot: Snapshot) -> None:
        """Add a snapshot; when the window is full the oldest one is discarded."""
        self._snapshots.append(snapshot)

    def latest(self) -> Optional[Snapshot]:
        """The most recent snapshot, or None if nothing has been recorded."""
        return self._snapshots[-1] if self._snapshots else None

    def check_alerts(self) -> List[Alert]:
        """Alerts triggered by the most recent snapshot, CPU before memory."""
        snapshot = self.latest()
        if snapshot is None:
            return []
        alerts: List[Alert] = []
        if snapshot.cpu.is_above(self.threshold.cpu_percent):
            alerts.append(Alert.high_cpu(snapshot.cpu.usage_percent))
        if snapshot.memory.is_above(self.threshold.memory_percent):
            alerts.append(Alert.high_memory(snapshot.memory.usage_percent()))
        return alerts

    def average_cpu_usage(self) -> float:
        """Mean CPU usage across stored snapshots; 0.0 when empty."""
        if not self._snapshots:
            return 0.0
        total = sum(s.cpu.usage_percent for s in self._snapshots)
        return total / len(self._snapshots)

    def peak_cpu_usage(self) -> float:
        """Highest CPU usage across stored snapshots; 0.0 when empty."""
        return max((s.cpu.usage_percent for s in self._snapshots), default=0.0)

    def is_empty(self) -> bool:
        return not self._snapshots