"""Command-line walkthrough of snapshots, rolling history and alerting."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from sysforge.alert import AlertKind, AlertThreshold
from sysforge.history import MetricsHistory
from sysforge.metrics import CpuMetrics, MemoryMetrics, ProcessMetrics, Snapshot

__all__ = ["main"]


class DemoFailure(RuntimeError):
    """Raised when a demo's expectation does not hold."""


def _check(condition: bool, what: str) -> None:
    if not condition:
        raise DemoFailure(what)


def _demo_snapshot_metrics() -> None:
    print("[ Demo 1 ] Snapshot metrics")

    processes = [
        ProcessMetrics(pid=1, name="kernel", cpu_percent=5.0, memory_bytes=50_000, threads=8),
        ProcessMetrics(pid=2, name="server", cpu_percent=45.0, memory_bytes=200_000, threads=4),
        ProcessMetrics(pid=3, name="agent", cpu_percent=12.0, memory_bytes=30_000, threads=2),
    ]
    snapshot = Snapshot(
        CpuMetrics(usage_percent=62.0, core_count=8),
        MemoryMetrics(total_bytes=8_000_000, used_bytes=5_000_000, free_bytes=3_000_000),
        processes,
    )

    mem_pct = snapshot.memory.usage_percent()
    _check(abs(mem_pct - 62.5) < 0.1, "unexpected memory usage")
    print(f"  memory usage: {mem_pct:.1f}%  ok")

    top = snapshot.top_cpu_process()
    _check(top is not None and top.name == "server", "unexpected top CPU process")
    print(f"  top CPU process: {top.name} ({top.cpu_percent:.1f}%)  ok")

    total_mem = snapshot.total_process_memory()
    _check(total_mem == 280_000, "unexpected total process memory")
    print(f"  total process memory: {total_mem} bytes  ok")


def _demo_rolling_history() -> None:
    print("[ Demo 2 ] Rolling history (max 4 snapshots)")

    history = MetricsHistory(4, AlertThreshold(90.0, 90.0))
    for cpu, mem in [(10.0, 200), (20.0, 300), (30.0, 400), (40.0, 500), (50.0, 600)]:
        history.record(
            Snapshot(
                CpuMetrics(usage_percent=cpu, core_count=4),
                MemoryMetrics(total_bytes=1000, used_bytes=mem, free_bytes=1000 - mem),
            )
        )

    _check(len(history) == 4, "oldest should have been dropped")
    print(f"  window len = {len(history)} (oldest dropped)  ok")
    print(f"  average CPU: {history.average_cpu_usage():.1f}%  ok")
    print(f"  peak CPU:    {history.peak_cpu_usage():.1f}%  ok")


def _demo_alerting() -> None:
    print("[ Demo 3 ] Alert detection")

    history = MetricsHistory(10, AlertThreshold(80.0, 80.0))

    history.record(
        Snapshot(
            CpuMetrics(usage_percent=50.0, core_count=4),
            MemoryMetrics(total_bytes=1000, used_bytes=500, free_bytes=500),
        )
    )
    _check(not history.check_alerts(), "normal snapshot raised alerts")
    print("  normal snapshot -> no alerts  ok")

    history.record(
        Snapshot(
            CpuMetrics(usage_percent=95.0, core_count=4),
            MemoryMetrics(total_bytes=1000, used_bytes=950, free_bytes=50),
        )
    )
    alerts = history.check_alerts()
    _check(len(alerts) == 2, "expected HighCpu + HighMemory")

    for alert in alerts:
        if alert.kind is AlertKind.HIGH_CPU:
            print(f"  ALERT: HighCpu    {alert.actual}%  ok")
        else:
            print(f"  ALERT: HighMemory {alert.actual}%  ok")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the systems-monitor demos and return an exit status."""
    parser = argparse.ArgumentParser(
        prog="monitor-demo",
        description="Walk through snapshots, rolling history and alerting.",
    )
    parser.parse_args(argv)

    print("=== systems-monitor integration demo ===\n")
    _demo_snapshot_metrics()
    _demo_rolling_history()
    _demo_alerting()
    print("\nAll demos completed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())