"""
Instruction-frequency classification over LLVM IR functions.

Each instruction's opcode is looked up in a fixed table; opcodes that are
not listed are not counted. Functions whose counts are all zero are left
out of the rendered table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List

from ccmetrics.ir.reader import IRFunction

COLUMN_WIDTH = 15
NO_ROWS_MESSAGE = "No functions with non-zero counts found."


class Category(Enum):
    ARITHMETIC = "Arithmetic"
    LOGICAL = "Logical"
    COMPARISON = "Comparison"
    MEMORY = "Memory"
    CONTROL_FLOW = "Control Flow"
    CALL = "Function Call"


OPCODE_CATEGORIES: Dict[str, Category] = {
    **{
        opcode: Category.ARITHMETIC
        for opcode in (
            "add", "fadd", "sub", "fsub", "mul", "fmul",
            "udiv", "sdiv", "fdiv", "urem", "srem", "frem",
        )
    },
    **{opcode: Category.LOGICAL for opcode in ("and", "or", "xor", "shl", "lshr", "ashr")},
    **{opcode: Category.COMPARISON for opcode in ("icmp", "fcmp")},
    **{opcode: Category.MEMORY for opcode in ("load", "store", "alloca", "getelementptr")},
    **{opcode: Category.CONTROL_FLOW for opcode in ("br", "switch", "phi")},
    **{opcode: Category.CALL for opcode in ("call", "invoke", "ret")},
}


@dataclass
class InstructionCounts:
    function: str
    counts: Dict[Category, int] = field(default_factory=lambda: {category: 0 for category in Category})

    @property
    def is_zero(self) -> bool:
        return not any(self.counts.values())

    def __getitem__(self, category: Category) -> int:
        return self.counts[category]


def classify_function(function: IRFunction) -> InstructionCounts:
    result = InstructionCounts(function=function.name)
    for instruction in function.instructions:
        category = OPCODE_CATEGORIES.get(instruction.opcode)
        if category is not None:
            result.counts[category] += 1
    return result


def classify_module(functions: Iterable[IRFunction]) -> List[InstructionCounts]:
    return [classify_function(function) for function in functions]


def _row(cells: Iterable[object]) -> str:
    return " | ".join(f"{cell:>{COLUMN_WIDTH}}" for cell in cells)


def format_instruction_table(rows: Iterable[InstructionCounts]) -> str:
    lines = [
        _row(["Function Name"] + [category.value for category in Category]),
        _row(["-" * COLUMN_WIDTH] * (len(Category) + 1)),
    ]
    has_rows = False
    for row in rows:
        if row.is_zero:
            continue
        lines.append(_row([row.function] + [row[category] for category in Category]))
        has_rows = True
    if not has_rows:
        lines.append(NO_ROWS_MESSAGE)
    return "\n".join(lines) + "\n"
