from __future__ import annotations

from typing import Optional

from ccmetrics.analysis.operators import OperatorResolution, Tokenizer, is_logical_operator
from ccmetrics.core.records import Strategy
from ccmetrics.parsing.base import SyntaxNode


class ComplexityCounter:
    """Base class for the complexity strategies."""

    strategy: Strategy

    def __init__(
        self,
        tokenizer: Optional[Tokenizer] = None,
        resolution: OperatorResolution = OperatorResolution.AUTO,
    ) -> None:
        self.tokenizer = tokenizer
        self.resolution = resolution

    def complexity(self, function: SyntaxNode) -> int:
        raise NotImplementedError

    def is_logical(self, node: SyntaxNode) -> bool:
        return is_logical_operator(node, self.tokenizer, self.resolution)
