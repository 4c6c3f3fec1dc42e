"""A tiny register machine running mov/inc/dec/jnz programs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

_ARITY = {"mov": 2, "inc": 1, "dec": 1, "jnz": 2}


@dataclass(frozen=True)
class _Instruction:
    op: str
    operands: tuple[str, ...]


def _parse(line: str) -> _Instruction:
    tokens = line.split()
    if not tokens or tokens[0] not in _ARITY:
        raise ValueError(f"Unknown instruction: {line}")
    op = tokens[0]
    if len(tokens) < 1 + _ARITY[op]:
        raise ValueError(f"Missing operand: {line}")
    return _Instruction(op, tuple(tokens[1:1 + _ARITY[op]]))


def _value(token: str, registers: dict[str, int]) -> int:
    try:
        return int(token)
    except ValueError:
        return registers.get(token, 0)


def simple_assembler(program: Iterable[str]) -> dict[str, int]:
    """Execute ``program`` and return the final register contents."""
    instructions = [_parse(line) for line in program]
    registers: dict[str, int] = {}
    pointer = 0

    while 0 <= pointer < len(instructions):
        instruction = instructions[pointer]
        match instruction.op, instruction.operands:
            case "mov", (target, source):
                registers[target] = _value(source, registers)
            case "inc", (target,):
                registers[target] = registers.get(target, 0) + 1
            case "dec", (target,):
                registers[target] = registers.get(target, 0) - 1
            case "jnz", (condition, offset):
                if _value(condition, registers) != 0:
                    pointer += _value(offset, registers) - 1
        pointer += 1

    return registers