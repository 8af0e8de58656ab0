"""Command-line walkthrough of paging and round-robin scheduling."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from sysforge.paging import PAGE_SIZE, PageTable, PhysAddr, VirtAddr
from sysforge.scheduler import Scheduler

__all__ = ["main"]


class DemoFailure(RuntimeError):
    """Raised when a demo's expectation does not hold."""


def _check(condition: bool, what: str) -> None:
    if not condition:
        raise DemoFailure(what)


def _demo_paging() -> None:
    print("[ Demo 1 ] Page table")

    table = PageTable()
    table.map(VirtAddr(0 * PAGE_SIZE), PhysAddr(0xA000), True, False)
    table.map(VirtAddr(1 * PAGE_SIZE), PhysAddr(0xB000), False, True)
    table.map(VirtAddr(2 * PAGE_SIZE), PhysAddr(0xC000), True, True)

    virt = VirtAddr(1 * PAGE_SIZE + 256)
    phys = table.translate(virt)
    _check(phys == PhysAddr(0xB000 + 256), "translation lost the page offset")
    print(f"  translate 0x{virt.address:X} -> 0x{phys.address:X}  ok")

    _check(table.translate(VirtAddr(0xDEAD_0000)) is None, "unmapped address translated")
    print("  unmapped address -> None (page fault simulated)  ok")

    _check(table.unmap(VirtAddr(0)), "unmap of a mapped page failed")
    _check(not table.is_mapped(VirtAddr(0)), "page still mapped after unmap")
    print("  unmap verified  ok")

    table.map(VirtAddr(0x1000), PhysAddr(0xF000), False, False)
    _check(
        table.translate(VirtAddr(0x1100)) == PhysAddr(0xF100),
        "remap did not replace the old mapping",
    )
    print("  remap overwrites old mapping  ok")


def _demo_scheduler() -> None:
    print("[ Demo 2 ] Round-robin scheduler")

    scheduler = Scheduler()
    scheduler.spawn("shell", 1, 2)
    scheduler.spawn("editor", 1, 2)
    scheduler.spawn("network", 1, 1)
    print(f"  spawned {scheduler.ready_count()} processes")

    history = [pid for pid in (scheduler.tick() for _ in range(6)) if pid is not None]
    print(f"  tick history: {history}")
    _check(bool(history), "no process ever ran")

    scheduler.block_current()
    blocked_pid = history[-1]
    print(f"  blocked PID {blocked_pid}")
    _check(scheduler.blocked_count() == 1, "expected one blocked process")

    _check(scheduler.unblock(blocked_pid), "blocked process not found")
    _check(scheduler.blocked_count() == 0, "process still blocked")
    print(f"  unblocked PID {blocked_pid}  ok")

    scheduler.tick()
    scheduler.terminate_current()
    _check(scheduler.terminated_count() == 1, "expected one terminated process")
    print("  terminated 1 process  ok")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the operating-system demos and return an exit status."""
    parser = argparse.ArgumentParser(
        prog="os-demo",
        description="Walk through paging and round-robin scheduling.",
    )
    parser.parse_args(argv)

    print("=== operating-system integration demo ===\n")
    _demo_paging()
    _demo_scheduler()
    print("\nAll demos completed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())