"""Value tree for CSS component values, built from tinycss2 tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import tinycss2

from domxform.errors import CssSyntaxError


class NodeKind(str, Enum):
    VALUE = "Value"
    FUNCTION = "Function"
    WHITESPACE = "WhiteSpace"
    NUMBER = "Number"
    DIMENSION = "Dimension"
    PERCENTAGE = "Percentage"
    OPERATOR = "Operator"
    IDENTIFIER = "Identifier"
    OTHER = "Other"


@dataclass(frozen=True)
class Node:
    """One node of a parsed CSS value.

    ``value`` is set for Number, Dimension and Percentage nodes, ``unit`` for
    Dimension nodes and ``name`` for Function, Identifier and Operator nodes.
    """

    kind: NodeKind
    value: float | None = None
    unit: str | None = None
    name: str | None = None
    children: tuple[Node, ...] = ()
    line: int = 0
    column: int = 0
    text: str = ""


_SIMPLE_KINDS = {
    "whitespace": NodeKind.WHITESPACE,
    "number": NodeKind.NUMBER,
    "percentage": NodeKind.PERCENTAGE,
    "dimension": NodeKind.DIMENSION,
    "ident": NodeKind.IDENTIFIER,
    "literal": NodeKind.OPERATOR,
}


def _convert_token(token) -> Node:
    if token.type == "error":
        raise CssSyntaxError(
            f"{token.message} at line {token.source_line}, column {token.source_column}"
        )

    position = {"line": token.source_line, "column": token.source_column}

    if token.type == "function":
        return Node(
            kind=NodeKind.FUNCTION,
            name=token.name,
            children=_convert_tokens(token.arguments),
            text=token.serialize(),
            **position,
        )

    kind = _SIMPLE_KINDS.get(token.type, NodeKind.OTHER)
    if kind in (NodeKind.NUMBER, NodeKind.PERCENTAGE):
        return Node(kind=kind, value=float(token.value), text=token.serialize(), **position)
    if kind is NodeKind.DIMENSION:
        return Node(
            kind=kind,
            value=float(token.value),
            unit=token.unit,
            text=token.serialize(),
            **position,
        )
    if kind in (NodeKind.IDENTIFIER, NodeKind.OPERATOR):
        return Node(kind=kind, name=token.value, text=token.serialize(), **position)
    return Node(kind=kind, text=token.serialize(), **position)


def _convert_tokens(tokens) -> tuple[Node, ...]:
    return tuple(_convert_token(t) for t in tokens if t.type != "comment")


def build_value_tree(css_text: str) -> Node:
    """Tokenize a CSS value and return its tree rooted at a Value node.

    Raises:
        CssSyntaxError: If tinycss2 reports a parse error anywhere in the value.
    """
    tokens = tinycss2.parse_component_value_list(css_text, skip_comments=True)
    return Node(
        kind=NodeKind.VALUE,
        children=_convert_tokens(tokens),
        line=1,
        column=1,
        text=css_text,
    )
