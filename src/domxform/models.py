"""Pydantic v2 models for normalized matrices and parsed transform calls."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator

# (alias, canonical field, default)
ALIASED_FIELDS: tuple[tuple[str, str, float], ...] = (
    ("a", "m11", 1.0),
    ("b", "m12", 0.0),
    ("c", "m21", 0.0),
    ("d", "m22", 1.0),
    ("e", "m41", 0.0),
    ("f", "m42", 0.0),
)

# Fields that must be zero for a matrix to be 2D
MATRIX_2D_ZERO_FIELDS: tuple[str, ...] = (
    "m13",
    "m14",
    "m23",
    "m24",
    "m31",
    "m32",
    "m34",
    "m43",
)

# Fields that must be one for a matrix to be 2D
MATRIX_2D_ONE_FIELDS: tuple[str, ...] = ("m33", "m44")

MATRIX_2D_ARRAY_FIELDS: tuple[str, ...] = ("m11", "m12", "m21", "m22", "m41", "m42")

MATRIX_3D_ARRAY_FIELDS: tuple[str, ...] = tuple(
    f"m{row}{col}" for row in range(1, 5) for col in range(1, 5)
)


def require_number(v: object) -> float:
    """Return v as a float, raising ValueError for anything but a real number."""
    # bool is an int subclass but never a matrix component
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise ValueError(f"expected a number, got {type(v).__name__}")
    try:
        return float(v)
    except OverflowError as e:
        raise ValueError(f"number out of range: {e}") from e


class NormalizedMatrix(BaseModel):
    """A DOMMatrixInit with every canonical field resolved."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    m11: float = 1.0
    m12: float = 0.0
    m13: float = 0.0
    m14: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    m23: float = 0.0
    m24: float = 0.0
    m31: float = 0.0
    m32: float = 0.0
    m33: float = 1.0
    m34: float = 0.0
    m41: float = 0.0
    m42: float = 0.0
    m43: float = 0.0
    m44: float = 1.0
    is_2d: bool = Field(default=True, alias="is2D")

    @field_validator(*MATRIX_3D_ARRAY_FIELDS, mode="before")
    @classmethod
    def _require_number(cls, v: object) -> float:
        return require_number(v)

    @property
    def a(self) -> float:
        return self.m11

    @property
    def b(self) -> float:
        return self.m12

    @property
    def c(self) -> float:
        return self.m21

    @property
    def d(self) -> float:
        return self.m22

    @property
    def e(self) -> float:
        return self.m41

    @property
    def f(self) -> float:
        return self.m42

    def to_init(self) -> dict[str, float | bool]:
        """Return a plain DOMMatrixInit-style mapping for this matrix."""
        return self.model_dump(by_alias=True)


class TransformFunctionCall(BaseModel):
    """One transform function with its arguments in canonical units (px, deg)."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    params: tuple[float, ...]

    def __str__(self) -> str:
        return f"{self.name}({', '.join(_format_number(p) for p in self.params)})"


def _format_number(value: float) -> str:
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)
