# sysforge

Four small systems models in plain Python, each usable as a library and
each with a demo command. There are no third-party dependencies.

- **Binary protocol** (`sysforge.message`, `sysforge.framing`): a 10-byte
  big-endian `Header` (version, message type, sequence, payload length),
  `Message` encoding and decoding, and 4-byte length-prefixed framing with
  `encode_frame`, `decode_frame` and `iter_frames`. Invalid or truncated
  messages raise `sysforge.message.ProtocolError` (a `ValueError`);
  `decode_frame` returns `None` while a frame is still incomplete.
- **Operating-system concepts** (`sysforge.paging`, `sysforge.pcb`,
  `sysforge.scheduler`): `VirtAddr` / `PhysAddr` with 4096-byte pages
  (`PAGE_SIZE`), a flat `PageTable` with `map`, `unmap`, `translate`,
  `is_mapped` and `get_entry`, the `Pcb` process control block with
  `ProcessState`, and a preemptive round-robin `Scheduler`.
- **Metrics monitor** (`sysforge.metrics`, `sysforge.alert`,
  `sysforge.history`): `CpuMetrics`, `MemoryMetrics` and `ProcessMetrics`
  gathered into `Snapshot`s, a bounded `MetricsHistory` with
  `average_cpu_usage` and `peak_cpu_usage`, and `Alert`s of kind
  `AlertKind.HIGH_CPU` / `AlertKind.HIGH_MEMORY` fired against an
  `AlertThreshold`.
- **Stack VM** (`sysforge.opcode`, `sysforge.vm`): `Instruction`s built from
  `Op` codes, run by `Vm` with signed 64-bit wrapping arithmetic,
  comparisons, jumps, registers and a print log.

## Installation

```
pip install .
```

## Examples

Framing a message and reading it back:

```python
from sysforge.message import Message, MessageType
from sysforge.framing import encode_frame, decode_frame, iter_frames

msg = Message.create(MessageType.REQUEST, 1, b"hello")
frame = encode_frame(msg)
decoded, consumed = decode_frame(frame)
assert decoded == msg and consumed == len(frame)

assert list(iter_frames(frame + frame)) == [msg, msg]
```

Paging:

```python
from sysforge.paging import PageTable, PhysAddr, VirtAddr

pt = PageTable()
pt.map(VirtAddr(0x1000), PhysAddr(0x5000), True, False)
assert pt.translate(VirtAddr(0x1ABC)) == PhysAddr(0x5ABC)
assert pt.translate(VirtAddr(0xDEAD_0000)) is None
```

Round-robin scheduling:

```python
from sysforge.scheduler import Scheduler

s = Scheduler()
a = s.spawn("A", 1, 1)
b = s.spawn("B", 1, 1)
assert [s.tick() for _ in range(4)] == [a, b, a, b]
```

Monitoring with alerts:

```python
from sysforge.alert import AlertKind, AlertThreshold
from sysforge.history import MetricsHistory
from sysforge.metrics import CpuMetrics, MemoryMetrics, Snapshot

history = MetricsHistory(10, AlertThreshold(80.0, 80.0))
history.record(Snapshot(CpuMetrics(95.0, 4), MemoryMetrics.from_usage(1000, 500)))
assert [a.kind for a in history.check_alerts()] == [AlertKind.HIGH_CPU]
```

Running a VM program:

```python
from sysforge.opcode import Instruction, Op
from sysforge.vm import Vm

vm = Vm(0)
vm.execute([
    Instruction(Op.PUSH, 3), Instruction(Op.PUSH, 4), Instruction(Op.ADD),
    Instruction(Op.PRINT), Instruction(Op.HALT),
])
assert vm.output() == [7]
```

Errors during execution raise subclasses of `sysforge.opcode.VmError`:
`StackUnderflow`, `DivisionByZero`, `InvalidJump` and `InvalidRegister`.

## Demos

Each command runs a short walkthrough and prints its results:

```
sysforge-protocol-demo
sysforge-os-demo
sysforge-monitor-demo
sysforge-vm-demo
```

## What it does not do

- The protocol modules only encode and decode bytes; there is no network
  client or server.
- The metrics monitor works on readings you supply; it does not read CPU,
  memory or process figures from the running system.
- Paging and scheduling are in-memory models; nothing touches real memory
  or real processes.

## Tests

```
pip install .[test]
pytest
```