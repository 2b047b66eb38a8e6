"""
Binary operator resolution shared by both counters.

A binary operator node may carry its operator as a structured field. When
it does not, the operator is recovered by token lookahead: the expression
and its left operand are lexed, and the token right after the operand's
tokens is the operator.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional, Sequence

from ccmetrics.parsing.base import SyntaxNode

logger = logging.getLogger(__name__)

Tokenizer = Callable[[SyntaxNode], Sequence[str]]

LOGICAL_OPERATORS = frozenset({"&&", "||"})

# C++ alternative tokens
ALTERNATIVE_SPELLINGS = {"and": "&&", "or": "||"}


class OperatorResolution(Enum):
    AUTO = "auto"
    TOKENS = "tokens"
    STRUCTURED = "structured"


def operator_from_tokens(node: SyntaxNode, tokenizer: Tokenizer) -> Optional[str]:
    if not node.children:
        return None
    expression_tokens = tokenizer(node)
    operand_tokens = tokenizer(node.children[0])
    if not expression_tokens or not operand_tokens:
        return None
    if len(operand_tokens) >= len(expression_tokens):
        return None
    return expression_tokens[len(operand_tokens)]


def resolve_operator(
    node: SyntaxNode,
    tokenizer: Optional[Tokenizer] = None,
    resolution: OperatorResolution = OperatorResolution.AUTO,
) -> Optional[str]:
    """Return the operator spelling of ``node``, or None when unresolved."""
    if resolution is OperatorResolution.STRUCTURED:
        symbol = node.operator
    elif resolution is OperatorResolution.AUTO and node.operator is not None:
        symbol = node.operator
    elif tokenizer is not None:
        symbol = operator_from_tokens(node, tokenizer)
    else:
        symbol = None
    if symbol is None:
        logger.debug("Unresolved operator at line %d", node.line)
        return None
    return ALTERNATIVE_SPELLINGS.get(symbol, symbol)


def is_logical_operator(
    node: SyntaxNode,
    tokenizer: Optional[Tokenizer] = None,
    resolution: OperatorResolution = OperatorResolution.AUTO,
) -> bool:
    return resolve_operator(node, tokenizer, resolution) in LOGICAL_OPERATORS
