"""Process control block and process states."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

__all__ = ["ProcessState", "Pcb"]


class ProcessState(Enum):
    """Lifecycle state of a process."""

    READY = auto()
    RUNNING = auto()
    BLOCKED = auto()
    TERMINATED = auto()


@dataclass
class Pcb:
    """Bookkeeping for one process.

    ``time_slice`` is the number of ticks allotted per scheduling round and
    ``used_time`` the ticks consumed in the current round.
    """

    pid: int
    name: str
    priority: int
    time_slice: int
    state: ProcessState = ProcessState.READY
    used_time: int = 0

    def is_ready(self) -> bool:
        return self.state is ProcessState.READY

    def is_running(self) -> bool:
        return self.state is ProcessState.RUNNING

    def is_blocked(self) -> bool:
        return self.state is ProcessState.BLOCKED

    def is_terminated(self) -> bool:
        return self.state is ProcessState.TERMINATED