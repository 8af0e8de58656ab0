"""Instruction set of the stack machine and the errors it can raise."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

__all__ = [
    "Op",
    "Instruction",
    "VmError",
    "StackUnderflow",
    "DivisionByZero",
    "InvalidJump",
    "InvalidRegister",
]

_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1


class Op(Enum):
    """Operation codes.

    Binary arithmetic and comparisons pop the right operand first, then the
    left; comparisons push 1 for true and 0 for false. Jump targets are
    instruction indices.
    """

    # Stack manipulation
    PUSH = "Push"
    POP = "Pop"
    DUP = "Dup"
    SWAP = "Swap"
    # Arithmetic
    ADD = "Add"
    SUB = "Sub"
    MUL = "Mul"
    DIV = "Div"
    MOD = "Mod"
    NEG = "Neg"
    # Comparison
    EQ = "Eq"
    NE = "Ne"
    LT = "Lt"
    LE = "Le"
    GT = "Gt"
    GE = "Ge"
    # Control flow
    JUMP = "Jump"
    JUMP_IF = "JumpIf"
    JUMP_IF_NOT = "JumpIfNot"
    # Registers
    LOAD = "Load"
    STORE = "Store"
    # I/O
    PRINT = "Print"
    # Termination
    HALT = "Halt"


_INDEX_OPS = frozenset({Op.JUMP, Op.JUMP_IF, Op.JUMP_IF_NOT, Op.LOAD, Op.STORE})
_OPERAND_OPS = _INDEX_OPS | {Op.PUSH}


@dataclass(frozen=True)
class Instruction:
    """One instruction: an operation and, where it takes one, its operand.

    PUSH carries a signed 64-bit literal; jumps carry a target index and
    LOAD/STORE a register index. Every other operation takes no operand.
    """

    op: Op
    operand: Optional[int] = None

    def __post_init__(self) -> None:
        op = Op(self.op)
        object.__setattr__(self, "op", op)
        if op not in _OPERAND_OPS:
            if self.operand is not None:
                raise ValueError(f"{op.value} takes no operand")
            return
        operand = self.operand
        if operand is None or isinstance(operand, bool) or not isinstance(operand, int):
            raise ValueError(f"{op.value} needs an integer operand")
        if op is Op.PUSH:
            if not _I64_MIN <= operand <= _I64_MAX:
                raise ValueError(f"push literal out of 64-bit range: {operand}")
        elif operand < 0:
            raise ValueError(f"{op.value} index must not be negative: {operand}")

    def __str__(self) -> str:
        if self.operand is None:
            return self.op.value
        return f"{self.op.value}({self.operand})"


class VmError(Exception):
    """Base class for errors raised while executing a program."""


class StackUnderflow(VmError):
    """An instruction needed more values than the stack held."""

    def __init__(self) -> None:
        super().__init__("stack underflow")


class DivisionByZero(VmError):
    """Division or remainder by zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")


class InvalidJump(VmError):
    """Execution ran to an index outside the program."""

    def __init__(self, target: int, length: int) -> None:
        self.target = target
        self.length = length
        super().__init__(f"invalid jump to {target} (program length {length})")


class InvalidRegister(VmError):
    """A register index beyond the machine's registers."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"invalid register index {index}")