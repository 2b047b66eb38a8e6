"""
LLVM IR instruction-frequency classification.
"""

from ccmetrics.ir.classifier import (
    NO_ROWS_MESSAGE,
    Category,
    InstructionCounts,
    classify_function,
    classify_module,
    format_instruction_table,
)
from ccmetrics.ir.frontend import emit_llvm_ir, load_module
from ccmetrics.ir.reader import Instruction, IRFunction, read_module

__all__ = [
    "NO_ROWS_MESSAGE",
    "Category",
    "InstructionCounts",
    "classify_function",
    "classify_module",
    "format_instruction_table",
    "emit_llvm_ir",
    "load_module",
    "Instruction",
    "IRFunction",
    "read_module",
]
