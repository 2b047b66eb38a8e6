"""
Core data structures and the analysis engine.
"""

from ccmetrics.core.records import ANONYMOUS, FunctionRecord, Strategy

__all__ = [
    "ANONYMOUS",
    "FunctionRecord",
    "Strategy",
]
