"""
Decision-point complexity.

complexity = 1 + number of decision points in the function body. If, For,
While and Switch each count once, as does every short-circuit ``&&`` or
``||``. Case and Default labels are not counted, so a switch adds one
regardless of how many labels it has. The signature is outside the scope,
and so are definitions nested in the body, such as local-class methods;
those are discovered and counted as functions of their own.
"""

from __future__ import annotations

from typing import Dict, Optional

from ccmetrics.analysis.base import ComplexityCounter
from ccmetrics.core.records import Strategy
from ccmetrics.parsing.base import NodeKind, SyntaxNode

# None means the weight depends on the resolved operator.
DECISION_WEIGHTS: Dict[NodeKind, Optional[int]] = {
    NodeKind.FUNCTION_DEFINITION: 0,
    NodeKind.IF: 1,
    NodeKind.FOR: 1,
    NodeKind.WHILE: 1,
    NodeKind.SWITCH: 1,
    NodeKind.CASE: 0,
    NodeKind.DEFAULT: 0,
    NodeKind.CONDITIONAL_OPERATOR: 0,
    NodeKind.BINARY_OPERATOR: None,
    NodeKind.OTHER: 0,
}


class DecisionPointCounter(ComplexityCounter):
    strategy = Strategy.DECISION

    def complexity(self, function: SyntaxNode) -> int:
        if function.body is None:
            return 1
        return 1 + self.decision_points(function.body)

    def decision_points(self, node: SyntaxNode) -> int:
        """Count decision points under ``node``, not entering nested definitions."""
        points = 0
        stack = [node]
        while stack:
            current = stack.pop()
            if current is not node and current.kind is NodeKind.FUNCTION_DEFINITION:
                continue
            weight = DECISION_WEIGHTS[current.kind]
            if weight is None:
                weight = 1 if self.is_logical(current) else 0
            points += weight
            stack.extend(current.children)
        return points
