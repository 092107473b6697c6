"""Argument signatures of the CSS transform functions.

https://drafts.csswg.org/css-transforms-1/#two-d-transform-functions
https://drafts.csswg.org/css-transforms-2/#three-d-transform-functions
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from domxform.errors import ArgumentTypeError, ArityError, UnknownTransformFunctionError
from domxform.models import TransformFunctionCall
from domxform.units import convert, is_absolute_length, is_angle
from domxform.value_ast import Node, NodeKind


class ParamKind(str, Enum):
    NUMBER = "number"
    LENGTH = "length"
    ANGLE = "angle"


@dataclass(frozen=True)
class TransformSignature:
    """Arity and parameter kinds of one transform function.

    ``kinds`` holds either a single kind shared by every argument or one
    kind per argument position.
    """

    display_name: str
    min_args: int
    max_args: int
    kinds: tuple[ParamKind, ...]

    def kind_at(self, index: int) -> ParamKind:
        if len(self.kinds) == 1:
            return self.kinds[0]
        return self.kinds[index]


def _sig(display_name: str, arity: int | tuple[int, int], *kinds: ParamKind) -> TransformSignature:
    min_args, max_args = arity if isinstance(arity, tuple) else (arity, arity)
    return TransformSignature(display_name, min_args, max_args, kinds)


_N, _L, _A = ParamKind.NUMBER, ParamKind.LENGTH, ParamKind.ANGLE

TRANSFORM_SIGNATURES: MappingProxyType[str, TransformSignature] = MappingProxyType(
    {
        sig.display_name.lower(): sig
        for sig in (
            _sig("matrix3d", 16, _N),
            _sig("matrix", 6, _N),
            _sig("translate3d", 3, _L),
            _sig("translate", (1, 2), _L),
            _sig("translateX", 1, _L),
            _sig("translateY", 1, _L),
            _sig("translateZ", 1, _L),
            _sig("scale3d", 3, _N),
            _sig("scale", (1, 2), _N),
            _sig("scaleX", 1, _N),
            _sig("scaleY", 1, _N),
            _sig("scaleZ", 1, _N),
            _sig("rotate3d", 4, _N, _N, _N, _A),
            _sig("rotate", 1, _A),
            _sig("rotateX", 1, _A),
            _sig("rotateY", 1, _A),
            _sig("rotateZ", 1, _A),
            _sig("perspective", 1, _L),
            _sig("skew", (1, 2), _A),
            _sig("skewX", 1, _A),
            _sig("skewY", 1, _A),
        )
    }
)

TRANSFORM_FUNCTION_NAMES: frozenset[str] = frozenset(TRANSFORM_SIGNATURES)


def get_signature(name: str) -> TransformSignature:
    """Look up a transform function by name, ignoring case.

    Raises:
        UnknownTransformFunctionError: If name is not a transform function.
    """
    signature = TRANSFORM_SIGNATURES.get(name.lower())
    if signature is None:
        raise UnknownTransformFunctionError(f"invalid transform function {name!r}")
    return signature


def _matches(kind: ParamKind, node: Node) -> bool:
    if kind is ParamKind.NUMBER:
        return node.kind is NodeKind.NUMBER
    if node.kind is not NodeKind.DIMENSION:
        return False
    if kind is ParamKind.LENGTH:
        return is_absolute_length(node.unit)
    return is_angle(node.unit)


def _convert_argument(kind: ParamKind, arg: Node | TransformFunctionCall) -> float:
    if isinstance(arg, TransformFunctionCall):
        raise ArgumentTypeError(f"unexpected param: Function {arg.name}, expected {kind.value}")
    if not _matches(kind, arg):
        raise ArgumentTypeError(
            f"unexpected param: {arg.kind.value} {arg.unit or ''}".rstrip()
            + f", expected {kind.value}"
        )
    if arg.kind is NodeKind.NUMBER:
        return arg.value
    return convert(arg.value, arg.unit)


def convert_arguments(
    name: str, args: Sequence[Node | TransformFunctionCall]
) -> tuple[float, ...]:
    """Check arity and argument kinds of a call and convert it to px/deg.

    Raises:
        UnknownTransformFunctionError: If name is not a transform function.
        ArityError: If the argument count is outside the function's range.
        ArgumentTypeError: If an argument has the wrong kind or unit.
    """
    signature = get_signature(name)
    if not signature.min_args <= len(args) <= signature.max_args:
        expected = (
            str(signature.min_args)
            if signature.min_args == signature.max_args
            else f"{signature.min_args}-{signature.max_args}"
        )
        raise ArityError(
            f"received invalid number of parameters for function {signature.display_name}: "
            f"expected {expected}, got {len(args)}"
        )
    return tuple(_convert_argument(signature.kind_at(i), arg) for i, arg in enumerate(args))
