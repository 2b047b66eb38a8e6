"""
Complexity strategies and the function discovery they run over.
"""

from ccmetrics.analysis.base import ComplexityCounter
from ccmetrics.analysis.decision import DecisionPointCounter
from ccmetrics.analysis.discovery import FunctionDiscovery, discover_functions
from ccmetrics.analysis.graph import ControlFlowGraphCounter, EdgeNodeCount
from ccmetrics.analysis.operators import OperatorResolution, resolve_operator

__all__ = [
    "ComplexityCounter",
    "DecisionPointCounter",
    "ControlFlowGraphCounter",
    "EdgeNodeCount",
    "FunctionDiscovery",
    "discover_functions",
    "OperatorResolution",
    "resolve_operator",
]
