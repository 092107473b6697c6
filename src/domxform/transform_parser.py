"""Parsing of CSS <transform-list> strings into transform function calls."""

from __future__ import annotations

import logging

from domxform.errors import (
    DomXformError,
    RelativeLengthError,
    TransformSyntaxError,
    UnexpectedNodeError,
)
from domxform.models import TransformFunctionCall
from domxform.signatures import convert_arguments, get_signature
from domxform.value_ast import Node, NodeKind, build_value_tree

logger = logging.getLogger(__name__)


def _visit_function(node: Node) -> TransformFunctionCall:
    name = node.name.lower()
    # TODO: evaluate calc() instead of rejecting it as an unknown function
    get_signature(name)

    args: list[Node | TransformFunctionCall] = []
    # whitespace, commas and any other token are skipped
    for child in node.children:
        if child.kind is NodeKind.FUNCTION:
            args.append(_visit_function(child))
        elif child.kind is NodeKind.PERCENTAGE:
            raise RelativeLengthError("lengths must be absolute, not relative")
        elif child.kind in (NodeKind.NUMBER, NodeKind.DIMENSION):
            args.append(child)

    call = TransformFunctionCall(name=name, params=convert_arguments(name, args))
    logger.debug("Parsed transform function %s", call)
    return call


def _visit_value(node: Node) -> list[TransformFunctionCall]:
    if node.kind is not NodeKind.VALUE:
        raise UnexpectedNodeError(f"encountered an unexpected node type {node.kind.value}")

    calls: list[TransformFunctionCall] = []
    for child in node.children:
        if child.kind is NodeKind.WHITESPACE:
            continue
        if child.kind is not NodeKind.FUNCTION:
            raise UnexpectedNodeError(
                f"encountered an unexpected node type {child.kind.value} {child.text!r} "
                f"at line {child.line}, column {child.column}"
            )
        calls.append(_visit_function(child))
    return calls


def parse_transform_list(css_text: str) -> list[TransformFunctionCall]:
    """Parse a CSS transform list into calls with lengths in px and angles in deg.

    Args:
        css_text: A <transform-list> such as "translateX(10px) rotate(45deg)".
            Only absolute lengths and angles are accepted.

    Returns:
        One TransformFunctionCall per function, in source order. Function
        names are lowercased.

    Raises:
        TransformSyntaxError: On any failure. The original error is kept in
            ``cause`` (and ``__cause__``) and the input in ``source``.
    """
    if not isinstance(css_text, str):
        raise TransformSyntaxError(
            f"failed to parse transform list: expected a string, got {type(css_text).__name__}",
            css_text,
        )
    try:
        return _visit_value(build_value_tree(css_text))
    except DomXformError as e:
        logger.debug("Transform list %r rejected: %s", css_text, e)
        raise TransformSyntaxError(
            f"failed to parse transform list {css_text!r}: {e}", css_text, e
        ) from e


parse_to_transform_functions = parse_transform_list
