"""Preemptive round-robin process scheduler."""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, List, Optional

from sysforge.pcb import Pcb, ProcessState

__all__ = ["Scheduler"]

_PRIORITY_LIMIT = 256


class Scheduler:
    """Round-robin scheduler with ready, running, blocked and terminated sets.

    Each call to :meth:`tick` charges one tick to the running process. Once a
    process has used its whole time slice it goes to the back of the ready
    queue, and the process at the front of the queue takes the CPU.
    """

    def __init__(self) -> None:
        self._ready: Deque[Pcb] = deque()
        self._running: Optional[Pcb] = None
        self._blocked: Dict[int, Pcb] = {}
        self._terminated: List[int] = []
        self._next_pid = 1

    def spawn(self, name: str, priority: int, time_slice: int) -> int:
        """Create a process, enqueue it as ready and return its PID (from 1)."""
        if not 0 <= priority < _PRIORITY_LIMIT:
            raise ValueError(f"priority must be in 0..255, got {priority}")
        if time_slice < 0:
            raise ValueError(f"time slice must not be negative, got {time_slice}")
        pid = self._next_pid
        self._next_pid += 1
        self._ready.append(Pcb(pid=pid, name=name, priority=priority, time_slice=time_slice))
        return pid

    def tick(self) -> Optional[int]:
        """Advance one tick and return the PID now running, or None."""
        running = self._running
        if running is not None:
            running.used_time += 1
            if running.used_time >= running.time_slice:
                running.used_time = 0
                running.state = ProcessState.READY
                self._ready.append(running)
                self._running = None

        if self._running is None and self._ready:
            nxt = self._ready.popleft()
            nxt.state = ProcessState.RUNNING
            self._running = nxt

        return self.running_pid()

    def terminate_current(self) -> Optional[int]:
        """Terminate the running process; return its PID, or None if idle."""
        running = self._running
        if running is None:
            return None
        self._running = None
        running.state = ProcessState.TERMINATED
        self._terminated.append(running.pid)
        return running.pid

    def block_current(self) -> Optional[int]:
        """Move the running process to the blocked set; return its PID, or None."""
        running = self._running
        if running is None:
            return None
        self._running = None
        running.state = ProcessState.BLOCKED
        running.used_time = 0
        self._blocked[running.pid] = running
        return running.pid

    def unblock(self, pid: int) -> bool:
        """Return a blocked process to the ready queue; True if it was blocked."""
        pcb = self._blocked.pop(pid, None)
        if pcb is None:
            return False
        pcb.state = ProcessState.READY
        self._ready.append(pcb)
        return True

    def running_pid(self) -> Optional[int]:
        """PID of the running process, or None."""
        return None if self._running is None else self._running.pid

    def ready_count(self) -> int:
        return len(self._ready)

    def blocked_count(self) -> int:
        return len(self._blocked)

    def terminated_count(self) -> int:
        return len(self._terminated)