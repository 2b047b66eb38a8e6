from __future__ import annotations

from typing import Iterator, List

from ccmetrics.parsing.base import SyntaxNode


class FunctionDiscovery:
    """
    Function definitions with a realized body, in preorder.

    Every iteration restarts the scan from the root, so the sequence can
    be consumed any number of times and always yields the same order.
    """

    def __init__(self, root: SyntaxNode) -> None:
        self.root = root

    def __iter__(self) -> Iterator[SyntaxNode]:
        for node in self.root.walk():
            if node.has_body:
                yield node


def discover_functions(root: SyntaxNode) -> List[SyntaxNode]:
    return list(FunctionDiscovery(root))
