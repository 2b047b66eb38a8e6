"""
Generic syntax tree representation consumed by the complexity engine.

Front ends convert their native trees into SyntaxNode instances so the
counters never depend on a particular parsing library.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Sequence

from ccmetrics.parsing.tokens import tokenize


class NodeKind(Enum):
    """Node kinds the complexity counters distinguish."""
    FUNCTION_DEFINITION = "FunctionDefinition"
    IF = "If"
    FOR = "For"
    WHILE = "While"
    SWITCH = "Switch"
    CASE = "Case"
    DEFAULT = "Default"
    CONDITIONAL_OPERATOR = "ConditionalOperator"
    BINARY_OPERATOR = "BinaryOperator"
    OTHER = "Other"


@dataclass
class SyntaxNode:
    """
    Read-only node handle.

    ``start`` and ``end`` delimit the node's extent in the owning
    translation unit's source. ``operator`` is only meaningful for binary
    operators, ``name`` and ``body`` only for function definitions; the
    body is always one of ``children``.
    """
    kind: NodeKind
    children: List["SyntaxNode"] = field(default_factory=list)
    line: int = 0
    start: int = 0
    end: int = 0
    operator: Optional[str] = None
    name: Optional[str] = None
    body: Optional["SyntaxNode"] = field(default=None, repr=False, compare=False)

    def __repr__(self) -> str:
        return f"SyntaxNode(kind={self.kind.value}, line={self.line}, children={len(self.children)})"

    def walk(self) -> Iterator["SyntaxNode"]:
        """Yield this node and its descendants in preorder."""
        stack = [self]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))

    def find_all(self, kind: NodeKind) -> Iterator["SyntaxNode"]:
        for node in self.walk():
            if node.kind is kind:
                yield node

    @property
    def has_body(self) -> bool:
        return self.kind is NodeKind.FUNCTION_DEFINITION and self.body is not None


def make_node(kind: NodeKind, *children: SyntaxNode, line: int = 0, **kwargs) -> SyntaxNode:
    """Build a node from positional children."""
    return SyntaxNode(kind=kind, children=list(children), line=line, **kwargs)


def make_function(
    name: str,
    body: Optional[SyntaxNode],
    line: int = 0,
    signature: Sequence[SyntaxNode] = (),
) -> SyntaxNode:
    """
    Build a function definition node.

    The signature nodes precede the body among the children, mirroring the
    layout of a parsed definition. Passing ``body=None`` yields a
    declaration without a realized body.
    """
    children = list(signature)
    if body is not None:
        children.append(body)
    return SyntaxNode(
        kind=NodeKind.FUNCTION_DEFINITION,
        children=children,
        line=line,
        name=name,
        body=body,
    )


@dataclass(frozen=True)
class TranslationUnit:
    """A parsed source file together with the text its extents refer to."""
    path: str
    language: str
    source: bytes
    root: SyntaxNode
    has_errors: bool = False

    def extent_text(self, node: SyntaxNode) -> str:
        return self.source[node.start : node.end].decode("utf-8", errors="replace")

    def tokenize(self, node: SyntaxNode) -> List[str]:
        """Lex the source covered by ``node``'s extent."""
        if node.end <= node.start:
            return []
        return tokenize(self.extent_text(node))
