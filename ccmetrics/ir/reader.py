"""
Line-oriented reader for textual LLVM IR.

Extracts each function's instructions as (opcode, operands) pairs in
module order. Declarations are kept as functions without instructions.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

_NAME = r'@(?P<name>"(?:[^"\\]|\\.)*"|[-\w$.]+)'
_DEFINE_RE = re.compile(r"^define\b[^@]*" + _NAME)
_DECLARE_RE = re.compile(r"^declare\b[^@]*" + _NAME)
_INSTRUCTION_RE = re.compile(
    r"^\s+(?:(?:%[-\w$.]+|%\"[^\"]*\")\s*=\s*)?"
    r"(?:(?:tail|musttail|notail)\s+)?"
    r"(?P<opcode>[a-z][a-z_]*)\b(?P<rest>.*)$"
)
# invoke targets and landingpad clauses continue the previous instruction
_CONTINUATION_RE = re.compile(r"^\s+(?:(?:to|unwind)\s+label\b|cleanup\b|catch\s|filter\s)")


@dataclass(frozen=True)
class Instruction:
    opcode: str
    operands: Tuple[str, ...] = ()


@dataclass
class IRFunction:
    name: str
    instructions: List[Instruction] = field(default_factory=list)

    @property
    def is_declaration(self) -> bool:
        return not self.instructions


def read_module(text: str) -> List[IRFunction]:
    functions: List[IRFunction] = []
    current: Optional[IRFunction] = None
    pending = ""

    for raw in text.splitlines():
        if current is None:
            match = _DEFINE_RE.match(raw)
            if match:
                current = IRFunction(name=_unquote(match.group("name")))
                functions.append(current)
                continue
            match = _DECLARE_RE.match(raw)
            if match:
                functions.append(IRFunction(name=_unquote(match.group("name"))))
            continue

        if pending:
            pending += " " + raw.strip()
            if _balanced(pending):
                _append_instruction(current, pending)
                pending = ""
            continue
        if raw.startswith("}"):
            current = None
            continue
        stripped = raw.strip()
        if not stripped or stripped.startswith(";") or not raw[:1].isspace():
            # blank line, comment or basic block label
            continue
        if _CONTINUATION_RE.match(raw):
            _extend_last(current, stripped)
            continue
        if not _balanced(raw):
            pending = raw
            continue
        _append_instruction(current, raw)

    return functions


def _append_instruction(function: IRFunction, line: str) -> None:
    match = _INSTRUCTION_RE.match(line if line[:1].isspace() else " " + line)
    if match is None:
        return
    operands = tuple(split_operands(_strip_comment(match.group("rest"))))
    function.instructions.append(Instruction(opcode=match.group("opcode"), operands=operands))


def _extend_last(function: IRFunction, text: str) -> None:
    if not function.instructions:
        return
    last = function.instructions[-1]
    function.instructions[-1] = Instruction(
        opcode=last.opcode,
        operands=last.operands + tuple(split_operands(_strip_comment(text))),
    )


def split_operands(text: str) -> List[str]:
    """Split on top-level commas, keeping bracketed groups together."""
    operands = []
    depth = 0
    in_string = False
    start = 0
    for index, char in enumerate(text):
        if char == '"':
            in_string = not in_string
        elif in_string:
            continue
        elif char in "([{<":
            depth += 1
        elif char in ")]}>":
            depth -= 1
        elif char == "," and depth == 0:
            operands.append(text[start:index].strip())
            start = index + 1
    tail = text[start:].strip()
    if tail:
        operands.append(tail)
    return [operand for operand in operands if operand]


def _balanced(text: str) -> bool:
    return text.count("[") <= text.count("]")


def _strip_comment(text: str) -> str:
    in_string = False
    for index, char in enumerate(text):
        if char == '"':
            in_string = not in_string
        elif char == ";" and not in_string:
            return text[:index]
    return text


def _unquote(name: str) -> str:
    if name.startswith('"') and name.endswith('"'):
        return name[1:-1]
    return name
