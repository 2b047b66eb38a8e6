"""
Syntax tree model and front ends.

The engine only sees SyntaxNode trees; the tree-sitter front end builds
them from C and C++ sources.
"""

from ccmetrics.parsing.base import (
    NodeKind,
    SyntaxNode,
    TranslationUnit,
    make_function,
    make_node,
)
from ccmetrics.parsing.tokens import tokenize
from ccmetrics.parsing.treesitter import language_for_path, parse_file, parse_source

__all__ = [
    "NodeKind",
    "SyntaxNode",
    "TranslationUnit",
    "make_function",
    "make_node",
    "tokenize",
    "language_for_path",
    "parse_file",
    "parse_source",
]
