"""
Edge/node complexity over the whole function-definition subtree.

Every branching construct (If, For, While, Case, Default, the conditional
operator and each short-circuit ``&&``/``||``) adds two edges and one
node. Switch itself adds nothing; its labels do. The subtree includes the
signature, so e.g. a conditional in a default argument is counted.

    complexity = edges - (nodes + 1) + 2
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from ccmetrics.analysis.base import ComplexityCounter
from ccmetrics.core.records import Strategy
from ccmetrics.parsing.base import NodeKind, SyntaxNode

# None means the node branches only for logical operators.
BRANCHES: Dict[NodeKind, Optional[bool]] = {
    NodeKind.FUNCTION_DEFINITION: False,
    NodeKind.IF: True,
    NodeKind.FOR: True,
    NodeKind.WHILE: True,
    NodeKind.SWITCH: False,
    NodeKind.CASE: True,
    NodeKind.DEFAULT: True,
    NodeKind.CONDITIONAL_OPERATOR: True,
    NodeKind.BINARY_OPERATOR: None,
    NodeKind.OTHER: False,
}


@dataclass
class EdgeNodeCount:
    edges: int = 0
    nodes: int = 0

    def add_branch(self) -> None:
        self.edges += 2
        self.nodes += 1

    @property
    def complexity(self) -> int:
        return self.edges - (self.nodes + 1) + 2


class ControlFlowGraphCounter(ComplexityCounter):
    strategy = Strategy.GRAPH

    def count(self, function: SyntaxNode) -> EdgeNodeCount:
        """Accumulate edges and nodes; each call owns a fresh accumulator."""
        counts = EdgeNodeCount()
        for node in function.walk():
            branches = BRANCHES[node.kind]
            if branches is None:
                branches = self.is_logical(node)
            if branches:
                counts.add_branch()
        return counts

    def complexity(self, function: SyntaxNode) -> int:
        return self.count(function).complexity
