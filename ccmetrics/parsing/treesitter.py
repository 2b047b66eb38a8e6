from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from ccmetrics.errors import FrontEndError
from ccmetrics.parsing.base import NodeKind, SyntaxNode, TranslationUnit

try:
    from tree_sitter_languages import get_parser
except Exception:  # pragma: no cover - optional dependency handling
    get_parser = None

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LanguageSpec:
    name: str
    extensions: set[str]
    kinds: Dict[str, NodeKind]
    function_node_types: set[str]
    case_node_types: set[str]
    skipped_node_types: set[str]


# Range-based for and do/while are left as OTHER: neither counter treats
# them as loops.
_C_KINDS = {
    "function_definition": NodeKind.FUNCTION_DEFINITION,
    "if_statement": NodeKind.IF,
    "for_statement": NodeKind.FOR,
    "while_statement": NodeKind.WHILE,
    "switch_statement": NodeKind.SWITCH,
    "conditional_expression": NodeKind.CONDITIONAL_OPERATOR,
    "binary_expression": NodeKind.BINARY_OPERATOR,
}

NAME_NODE_TYPES = {
    "identifier",
    "field_identifier",
    "qualified_identifier",
    "operator_name",
    "destructor_name",
    "template_function",
    "operator_cast",
}

LANGUAGE_SPECS = {
    "c": LanguageSpec(
        name="c",
        extensions={".c", ".h"},
        kinds=_C_KINDS,
        function_node_types={"function_definition"},
        case_node_types={"case_statement"},
        skipped_node_types={"comment"},
    ),
    "cpp": LanguageSpec(
        name="cpp",
        extensions={".cpp", ".cc", ".cxx", ".hpp", ".hh", ".hxx"},
        kinds=_C_KINDS,
        function_node_types={"function_definition"},
        case_node_types={"case_statement"},
        skipped_node_types={"comment"},
    ),
}


def language_for_path(path: str) -> Optional[str]:
    ext = Path(path).suffix.lower()
    for name, lang in LANGUAGE_SPECS.items():
        if ext in lang.extensions:
            return name
    return None


def parse_file(path: str, language: Optional[str] = None, strict: bool = False) -> TranslationUnit:
    language = language or language_for_path(path)
    if language is None:
        raise FrontEndError(f"Unsupported source file: {path}")
    try:
        source = Path(path).read_bytes()
    except OSError as exc:
        raise FrontEndError(f"Cannot read {path}: {exc}") from exc
    return parse_source(source, language, path=path, strict=strict)


def parse_source(
    source: bytes,
    language: str,
    path: str = "<memory>",
    strict: bool = False,
) -> TranslationUnit:
    if get_parser is None:
        raise FrontEndError(
            "tree-sitter grammars are not installed; install ccmetrics[treesitter]"
        )
    if language not in LANGUAGE_SPECS:
        raise FrontEndError(f"Unsupported language: {language}")
    lang = LANGUAGE_SPECS[language]
    tree = get_parser(language).parse(source)
    has_errors = tree.root_node.has_error
    if has_errors:
        if strict:
            raise FrontEndError(f"Syntax errors in {path}")
        logger.warning("Syntax errors in %s; analyzing the recovered tree", path)
    root = convert_tree(tree.root_node, lang)
    return TranslationUnit(
        path=path,
        language=language,
        source=source,
        root=root,
        has_errors=has_errors,
    )


def convert_tree(ts_root, lang: LanguageSpec) -> SyntaxNode:
    """Convert a tree-sitter tree into SyntaxNodes without recursion."""
    root = _convert_node(ts_root, lang)
    stack: List[Tuple[object, SyntaxNode]] = [(ts_root, root)]
    while stack:
        ts_node, node = stack.pop()
        body = None
        if node.kind is NodeKind.FUNCTION_DEFINITION:
            body = ts_node.child_by_field_name("body")
        for ts_child in ts_node.named_children:
            if ts_child.type in lang.skipped_node_types:
                continue
            child = _convert_node(ts_child, lang)
            node.children.append(child)
            if body is not None and _same_node(ts_child, body):
                node.body = child
            stack.append((ts_child, child))
    return root


def _convert_node(ts_node, lang: LanguageSpec) -> SyntaxNode:
    kind = _node_kind(ts_node, lang)
    node = SyntaxNode(
        kind=kind,
        line=ts_node.start_point[0] + 1,
        start=ts_node.start_byte,
        end=ts_node.end_byte,
    )
    if kind is NodeKind.BINARY_OPERATOR:
        operator = ts_node.child_by_field_name("operator")
        if operator is not None:
            node.operator = operator.type
    elif kind is NodeKind.FUNCTION_DEFINITION:
        name, line = _function_name(ts_node)
        node.name = name
        node.line = line
    return node


def _node_kind(ts_node, lang: LanguageSpec) -> NodeKind:
    if ts_node.type in lang.case_node_types:
        if ts_node.child_by_field_name("value") is None:
            return NodeKind.DEFAULT
        return NodeKind.CASE
    return lang.kinds.get(ts_node.type, NodeKind.OTHER)


def _function_name(ts_node) -> Tuple[str, int]:
    # Descend through every declarator layer, so a function returning a
    # function pointer reports its own name rather than the outer layer.
    name_node = ts_node.child_by_field_name("declarator")
    while name_node is not None and name_node.type not in NAME_NODE_TYPES:
        nested = name_node.child_by_field_name("declarator")
        if nested is None:
            nested = next(
                (
                    child for child in name_node.named_children
                    if child.type in NAME_NODE_TYPES or child.type.endswith("declarator")
                ),
                None,
            )
        name_node = nested
    if name_node is None:
        return "", ts_node.start_point[0] + 1
    name = "".join(name_node.text.decode("utf-8", errors="replace").split())
    return name, name_node.start_point[0] + 1


def _same_node(left, right) -> bool:
    return (
        left.type == right.type
        and left.start_byte == right.start_byte
        and left.end_byte == right.end_byte
    )
