"""Collected measurements: CPU, memory, per-process figures and snapshots."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List, Optional

__all__ = ["CpuMetrics", "MemoryMetrics", "ProcessMetrics", "Snapshot"]


@dataclass
class CpuMetrics:
    """Aggregate CPU usage across all cores (0.0 to 100.0)."""

    usage_percent: float
    core_count: int

    def is_above(self, threshold: float) -> bool:
        """True when usage is strictly above ``threshold`` percent."""
        return self.usage_percent > threshold


@dataclass
class MemoryMetrics:
    """Total, used and free memory in bytes."""

    total_bytes: int
    used_bytes: int
    free_bytes: int

    @classmethod
    def from_usage(cls, total_bytes: int, used_bytes: int) -> MemoryMetrics:
        """Build from total and used bytes; free bytes never go below zero."""
        return cls(
            total_bytes=total_bytes,
            used_bytes=used_bytes,
            free_bytes=max(0, total_bytes - used_bytes),
        )

    def usage_percent(self) -> float:
        """Percentage of total memory in use; 0.0 when the total is zero."""
        if self.total_bytes == 0:
            return 0.0
        return self.used_bytes / self.total_bytes * 100.0

    def is_above(self, threshold_pct: float) -> bool:
        """True when usage is strictly above ``threshold_pct`` percent."""
        return self.usage_percent() > threshold_pct


@dataclass
class ProcessMetrics:
    """Resource usage of a single process."""

    pid: int
    name: str
    cpu_percent: float
    memory_bytes: int
    threads: int


@dataclass
class Snapshot:
    """A point-in-time reading of the system."""

    cpu: CpuMetrics
    memory: MemoryMetrics
    processes: List[ProcessMetrics] = field(default_factory=list)
    timestamp: float = field(default_factory=time.monotonic)

    def total_process_memory(self) -> int:
        """Memory consumed across all tracked processes."""
        return sum(p.memory_bytes for p in self.processes)

    def top_cpu_process(self) -> Optional[ProcessMetrics]:
        """The process with the highest CPU usage, or None if there are none."""
        return max(self.processes, key=lambda p: p.cpu_percent, default=None)

    def top_memory_process(self) -> Optional[ProcessMetrics]:
        """The process with the highest memory usage, or None if there are none."""
        return max(self.processes, key=lambda p: p.memory_bytes, default=None)