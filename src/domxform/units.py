"""Conversion of CSS absolute lengths to px and angles to deg."""

from __future__ import annotations

import math
from collections.abc import Callable
from types import MappingProxyType

from domxform.errors import UnknownUnitError


# https://drafts.csswg.org/css-values-4/#absolute-lengths
def _px(x: float) -> float:
    return x


def _in(x: float) -> float:
    return x * 96


def _pc(x: float) -> float:
    return _in(x) / 6


def _pt(x: float) -> float:
    return _in(x) / 72


def _cm(x: float) -> float:
    return _in(x) / 2.54


def _mm(x: float) -> float:
    return _cm(x) / 10


def _q(x: float) -> float:
    return _cm(x) / 40


# https://drafts.csswg.org/css-values-4/#angles
def _deg(x: float) -> float:
    return x


def _turn(x: float) -> float:
    return x * 360


def _grad(x: float) -> float:
    return _turn(x) / 400


def _rad(x: float) -> float:
    return x * (180 / math.pi)


LENGTH_CONVERTERS: MappingProxyType[str, Callable[[float], float]] = MappingProxyType(
    {
        "cm": _cm,
        "mm": _mm,
        "q": _q,
        "in": _in,
        "pc": _pc,
        "pt": _pt,
        "px": _px,
    }
)

ANGLE_CONVERTERS: MappingProxyType[str, Callable[[float], float]] = MappingProxyType(
    {
        "deg": _deg,
        "grad": _grad,
        "rad": _rad,
        "turn": _turn,
    }
)

ABSOLUTE_LENGTH_UNITS: frozenset[str] = frozenset(LENGTH_CONVERTERS)
ANGLE_UNITS: frozenset[str] = frozenset(ANGLE_CONVERTERS)


def is_absolute_length(unit: str | None) -> bool:
    return unit is not None and unit.lower() in ABSOLUTE_LENGTH_UNITS


def is_angle(unit: str | None) -> bool:
    return unit is not None and unit.lower() in ANGLE_UNITS


def convert(value: float, unit: str) -> float:
    """Convert a dimension to px (lengths) or deg (angles).

    Units are matched case-insensitively.

    Raises:
        UnknownUnitError: If unit is neither an absolute length nor an angle.
    """
    key = unit.lower()
    if key in LENGTH_CONVERTERS:
        return LENGTH_CONVERTERS[key](value)
    if key in ANGLE_CONVERTERS:
        return ANGLE_CONVERTERS[key](value)
    raise UnknownUnitError(f"unknown unit {unit!r}")
