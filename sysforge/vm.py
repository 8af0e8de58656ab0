"""Stack-based bytecode virtual machine."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence

from sysforge.opcode import (
    DivisionByZero,
    Instruction,
    InvalidJump,
    InvalidRegister,
    Op,
    StackUnderflow,
)

__all__ = ["Vm"]

_MASK = (1 << 64) - 1
_SIGN = 1 << 63


def _wrap(value: int) -> int:
    """Wrap an integer into the signed 64-bit range."""
    value &= _MASK
    return value - (1 << 64) if value & _SIGN else value


def _div(lhs: int, rhs: int) -> int:
    if rhs == 0:
        raise DivisionByZero()
    quotient = abs(lhs) // abs(rhs)
    if (lhs < 0) != (rhs < 0):
        quotient = -quotient
    return _wrap(quotient)


def _mod(lhs: int, rhs: int) -> int:
    if rhs == 0:
        raise DivisionByZero()
    quotient = abs(lhs) // abs(rhs)
    if (lhs < 0) != (rhs < 0):
        quotient = -quotient
    return _wrap(lhs - rhs * quotient)


_BINARY: Dict[Op, Callable[[int, int], int]] = {
    Op.ADD: lambda a, b: _wrap(a + b),
    Op.SUB: lambda a, b: _wrap(a - b),
    Op.MUL: lambda a, b: _wrap(a * b),
    Op.DIV: _div,
    Op.MOD: _mod,
    Op.EQ: lambda a, b: int(a == b),
    Op.NE: lambda a, b: int(a != b),
    Op.LT: lambda a, b: int(a < b),
    Op.LE: lambda a, b: int(a <= b),
    Op.GT: lambda a, b: int(a > b),
    Op.GE: lambda a, b: int(a >= b),
}


class Vm:
    """A machine with an operand stack, zeroed registers and an output log.

    Values are signed 64-bit integers; arithmetic wraps on overflow and
    division truncates toward zero.
    """

    def __init__(self, num_registers: int = 0) -> None:
        if num_registers < 0:
            raise ValueError(f"register count must not be negative: {num_registers}")
        self._stack: List[int] = []
        self._registers: List[int] = [0] * num_registers
        self._output: List[int] = []

    def execute(self, program: Sequence[Instruction]) -> None:
        """Run ``program`` from instruction 0 until Halt or the end of the program.

        Raises a VmError subclass if an instruction cannot be carried out.
        """
        length = len(program)
        pc = 0
        while pc < length:
            instruction = program[pc]
            pc += 1
            op, operand = instruction.op, instruction.operand

            if op is Op.HALT:
                return
            if op is Op.PUSH:
                self._stack.append(operand)
            elif op is Op.POP:
                self._pop()
            elif op is Op.DUP:
                value = self._pop()
                self._stack.extend((value, value))
            elif op is Op.SWAP:
                rhs = self._pop()
                lhs = self._pop()
                self._stack.extend((rhs, lhs))
            elif op in _BINARY:
                rhs = self._pop()
                lhs = self._pop()
                self._stack.append(_BINARY[op](lhs, rhs))
            elif op is Op.NEG:
                self._stack.append(_wrap(-self._pop()))
            elif op is Op.JUMP:
                pc = self._jump_target(operand, length)
            elif op is Op.JUMP_IF:
                if self._pop() != 0:
                    pc = self._jump_target(operand, length)
            elif op is Op.JUMP_IF_NOT:
                if self._pop() == 0:
                    pc = self._jump_target(operand, length)
            elif op is Op.LOAD:
                self._check_register(operand)
                self._stack.append(self._registers[operand])
            elif op is Op.STORE:
                value = self._pop()
                self._check_register(operand)
                self._registers[operand] = value
            elif op is Op.PRINT:
                self._output.append(self._pop())

    def stack(self) -> List[int]:
        """Current stack contents, bottom to top."""
        return list(self._stack)

    def register(self, index: int) -> Optional[int]:
        """Value of register ``index``, or None if it is out of range."""
        if 0 <= index < len(self._registers):
            return self._registers[index]
        return None

    def output(self) -> List[int]:
        """Values recorded by Print instructions, in execution order."""
        return list(self._output)

    def reset(self) -> None:
        """Clear the stack and output log and zero every register."""
        self._stack.clear()
        self._output.clear()
        self._registers = [0] * len(self._registers)

    def _pop(self) -> int:
        if not self._stack:
            raise StackUnderflow()
        return self._stack.pop()

    def _check_register(self, index: int) -> None:
        if index >= len(self._registers):
            raise InvalidRegister(index)

    @staticmethod
    def _jump_target(target: int, length: int) -> int:
        if target > length:
            raise InvalidJump(target, length)
        return target