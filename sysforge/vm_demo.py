"""Command-line walkthrough of the stack machine running small programs."""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

from sysforge.opcode import Instruction, Op
from sysforge.vm import Vm

__all__ = ["main"]


class DemoFailure(RuntimeError):
    """Raised when a demo's expectation does not hold."""


def _check(condition: bool, what: str) -> None:
    if not condition:
        raise DemoFailure(what)


def _i(op: Op, operand: Optional[int] = None) -> Instruction:
    return Instruction(op, operand)


def _run(program: List[Instruction], registers: int) -> List[int]:
    vm = Vm(registers)
    vm.execute(program)
    return vm.output()


def _demo_basic_arithmetic() -> None:
    print("[ Demo 1 ] arithmetic")
    output = _run(
        [
            _i(Op.PUSH, 3), _i(Op.PUSH, 4), _i(Op.ADD),
            _i(Op.PUSH, 2), _i(Op.MUL), _i(Op.PRINT), _i(Op.HALT),
        ],
        0,
    )
    _check(output == [14], "unexpected arithmetic result")
    print(f"  (3 + 4) * 2 = {output[0]}  ok")


def _demo_register_ops() -> None:
    print("[ Demo 2 ] register store / load")
    output = _run(
        [
            _i(Op.PUSH, 100), _i(Op.STORE, 0),
            _i(Op.PUSH, 200), _i(Op.STORE, 1),
            _i(Op.LOAD, 0), _i(Op.LOAD, 1), _i(Op.ADD), _i(Op.STORE, 2),
            _i(Op.LOAD, 2), _i(Op.PRINT),
            _i(Op.HALT),
        ],
        3,
    )
    _check(output == [300], "unexpected register result")
    print(f"  reg[0]+reg[1] = {output[0]} stored in reg[2]  ok")


def _demo_control_flow() -> None:
    print("[ Demo 3 ] conditional control flow")
    # if 5 > 3 { print(1) } else { print(0) }
    output = _run(
        [
            _i(Op.PUSH, 5), _i(Op.PUSH, 3), _i(Op.GT),
            _i(Op.JUMP_IF_NOT, 7),
            _i(Op.PUSH, 1), _i(Op.PRINT), _i(Op.JUMP, 9),
            _i(Op.PUSH, 0), _i(Op.PRINT),
            _i(Op.HALT),
        ],
        0,
    )
    _check(output == [1], "wrong branch taken")
    print(f"  5 > 3 -> printed {output[0]}  ok")


def _demo_sum_loop() -> None:
    print("[ Demo 4 ] sum 1..=10 via loop")
    output = _run(
        [
            _i(Op.PUSH, 0), _i(Op.STORE, 0),
            _i(Op.PUSH, 10), _i(Op.STORE, 1),
            _i(Op.LOAD, 1), _i(Op.JUMP_IF_NOT, 15),
            _i(Op.LOAD, 0), _i(Op.LOAD, 1), _i(Op.ADD), _i(Op.STORE, 0),
            _i(Op.LOAD, 1), _i(Op.PUSH, 1), _i(Op.SUB), _i(Op.STORE, 1),
            _i(Op.JUMP, 4),
            _i(Op.LOAD, 0), _i(Op.PRINT),
            _i(Op.HALT),
        ],
        2,
    )
    _check(output == [55], "unexpected loop sum")
    print(f"  sum(1..=10) = {output[0]}  ok")


def _demo_fibonacci() -> None:
    print("[ Demo 5 ] Fibonacci(7) = 13")
    # reg[0]=a, reg[1]=b, reg[2]=counter, reg[3]=tmp
    output = _run(
        [
            _i(Op.PUSH, 0), _i(Op.STORE, 0),
            _i(Op.PUSH, 1), _i(Op.STORE, 1),
            _i(Op.PUSH, 6), _i(Op.STORE, 2),
            _i(Op.LOAD, 0), _i(Op.LOAD, 1), _i(Op.ADD), _i(Op.STORE, 3),
            _i(Op.LOAD, 1), _i(Op.STORE, 0),
            _i(Op.LOAD, 3), _i(Op.STORE, 1),
            _i(Op.LOAD, 2), _i(Op.PUSH, 1), _i(Op.SUB), _i(Op.STORE, 2),
            _i(Op.LOAD, 2), _i(Op.JUMP_IF, 6),
            _i(Op.LOAD, 1), _i(Op.PRINT),
            _i(Op.HALT),
        ],
        4,
    )
    _check(output == [13], "unexpected Fibonacci result")
    print(f"  fib(7) = {output[0]}  ok")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the virtual machine demos and return an exit status."""
    parser = argparse.ArgumentParser(
        prog="vm-demo",
        description="Run small programs on the stack machine.",
    )
    parser.parse_args(argv)

    print("=== vm-runtime integration demo ===\n")
    _demo_basic_arithmetic()
    _demo_register_ops()
    _demo_control_flow()
    _demo_sum_loop()
    _demo_fibonacci()
    print("\nAll demos completed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())