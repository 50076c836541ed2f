"""Tree-sitter based extraction of top-level Go declarations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING, Iterator

import tree_sitter_go as ts_go
from tree_sitter import Language, Parser

from ..errors import ReceiverShapeError, SourceParseError

if TYPE_CHECKING:
    from tree_sitter import Node, Tree

class DeclarationKind(str, Enum):
    FUNCTION = "function"
    METHOD = "method"
    TYPE = "type"
    VARIABLE = "variable"
    CONSTANT = "constant"


@dataclass(frozen=True, slots=True)
class Declaration:
    name: str
    kind: DeclarationKind
    package_name: str
    line: int
    column: int
    receiver_type: str | None = None


class ReceiverKind(str, Enum):
    POINTER = "pointer"
    VALUE = "value"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class ReceiverShape:
    """Receiver type of a method: ``*T``, ``T`` or something else."""

    kind: ReceiverKind
    type_name: str | None
    text: str


_VALUE_SPECS = {
    "var_spec": DeclarationKind.VARIABLE,
    "const_spec": DeclarationKind.CONSTANT,
}
_TYPE_SPECS = frozenset({"type_spec", "type_alias"})
_PARAMETER_NODES = frozenset({"parameter_declaration", "variadic_parameter_declaration"})


@lru_cache(maxsize=1)
def _go_language() -> Language:
    return Language(ts_go.language())


def _new_parser() -> Parser:
    return Parser(_go_language())


def _node_text(node: "Node", source: bytes) -> str:
    """Extract text content from a tree-sitter node."""
    return source[node.start_byte:node.end_byte].decode("utf-8", errors="surrogateescape")


def _first_error(node: "Node") -> "Node | None":
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def parse_source(source: bytes, path: Path | str | None = None) -> "Tree":
    """Parse Go *source*; raise SourceParseError when the tree has syntax errors.

    A new parser is built per call so concurrent callers share no parser state.
    """
    tree = _new_parser().parse(source)
    root = tree.root_node
    if root.has_error:
        error = _first_error(root) or root
        row, column = error.start_point
        label = str(path) if path is not None else "<source>"
        kind = "missing" if error.is_missing else "syntax error near"
        snippet = error.type if error.is_missing else _node_text(error, source)[:20]
        raise SourceParseError(
            f"{label}:{row + 1}:{column + 1}: {kind} {snippet!r}",
            line=row + 1,
            column=column + 1,
        )
    return tree


def _type_name(node: "Node", source: bytes) -> str | None:
    if node.type == "type_identifier":
        return _node_text(node, source)
    if node.type == "generic_type":
        inner = node.child_by_field_name("type")
        if inner is not None and inner.type == "type_identifier":
            return _node_text(inner, source)
    return None


def classify_receiver(type_node: "Node", source: bytes) -> ReceiverShape:
    text = _node_text(type_node, source)
    if type_node.type == "pointer_type":
        target = type_node.named_children[0] if type_node.named_children else None
        name = _type_name(target, source) if target is not None else None
        if name:
            return ReceiverShape(ReceiverKind.POINTER, name, text)
        return ReceiverShape(ReceiverKind.OTHER, None, text)
    name = _type_name(type_node, source)
    if name:
        return ReceiverShape(ReceiverKind.VALUE, name, text)
    return ReceiverShape(ReceiverKind.OTHER, None, text)


def receiver_type_name(node: "Node", source: bytes) -> str | None:
    """Return the receiver type name of a method node, None for functions."""
    receiver = node.child_by_field_name("receiver")
    if receiver is None:
        return None
    name_node = node.child_by_field_name("name")
    method = _node_text(name_node, source) if name_node is not None else "?"
    line = node.start_point[0] + 1
    params = [child for child in receiver.named_children if child.type in _PARAMETER_NODES]
    type_node = params[0].child_by_field_name("type") if params else None
    if type_node is None:
        raise ReceiverShapeError(method, _node_text(receiver, source), line=line)
    shape = classify_receiver(type_node, source)
    if shape.kind is ReceiverKind.OTHER or not shape.type_name:
        raise ReceiverShapeError(method, shape.text, line=line)
    return shape.type_name


def _package_name(root: "Node", source: bytes) -> str:
    for child in root.named_children:
        if child.type != "package_clause":
            continue
        for part in child.named_children:
            if part.type in {"package_identifier", "identifier"}:
                return _node_text(part, source)
    row, column = root.start_point
    raise SourceParseError("missing package clause", line=row + 1, column=column + 1)


def _iter_specs(node: "Node") -> Iterator["Node"]:
    for child in node.named_children:
        if child.type.endswith("_spec_list"):
            yield from _iter_specs(child)
        elif child.type.endswith("_spec") or child.type in _TYPE_SPECS:
            yield child


def _declaration(
    name_node: "Node",
    source: bytes,
    kind: DeclarationKind,
    package_name: str,
    receiver_type: str | None = None,
) -> Declaration:
    row, column = name_node.start_point
    return Declaration(
        name=_node_text(name_node, source),
        kind=kind,
        package_name=package_name,
        line=row + 1,
        column=column + 1,
        receiver_type=receiver_type,
    )


def extract_declarations(tree: "Tree", source: bytes) -> list[Declaration]:
    """Return the file's top-level declarations in source order.

    Only direct children of the source file are visited, so nothing declared
    inside a function body is reported. Each name of a ``var``/``const`` spec
    yields its own declaration.
    """
    root = tree.root_node
    package_name = _package_name(root, source)
    declarations: list[Declaration] = []
    for node in root.named_children:
        node_type = node.type
        if node_type == "function_declaration":
            name_node = node.child_by_field_name("name")
            if name_node is not None:
                declarations.append(
                    _declaration(name_node, source, DeclarationKind.FUNCTION, package_name)
                )
        elif node_type == "method_declaration":
            name_node = node.child_by_field_name("name")
            if name_node is not None:
                receiver = receiver_type_name(node, source)
                declarations.append(
                    _declaration(
                        name_node, source, DeclarationKind.METHOD, package_name, receiver
                    )
                )
        elif node_type == "type_declaration":
            for spec in _iter_specs(node):
                name_node = spec.child_by_field_name("name")
                if name_node is not None:
                    declarations.append(
                        _declaration(name_node, source, DeclarationKind.TYPE, package_name)
                    )
        elif node_type in {"var_declaration", "const_declaration"}:
            for spec in _iter_specs(node):
                kind = _VALUE_SPECS.get(spec.type)
                if kind is None:
                    continue
                for name_node in spec.children_by_field_name("name"):
                    declarations.append(_declaration(name_node, source, kind, package_name))
    return declarations


def parse_declarations(source: bytes, path: Path | str | None = None) -> list[Declaration]:
    return extract_declarations(parse_source(source, path), source)
