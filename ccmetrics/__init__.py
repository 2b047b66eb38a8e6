"""
ccmetrics

Per-function static metrics for C and C++ code: McCabe cyclomatic
complexity under two counting strategies, and LLVM IR instruction
frequency tables.
"""

__version__ = "1.0.0"
__author__ = "ccmetrics developers"

from ccmetrics.config import Config
from ccmetrics.core.engine import ComplexityAnalyzer
from ccmetrics.core.records import FunctionRecord, Strategy

__all__ = [
    "ComplexityAnalyzer",
    "Config",
    "FunctionRecord",
    "Strategy",
]
