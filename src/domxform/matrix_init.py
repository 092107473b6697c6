"""Validation and fixup of DOMMatrixInit records.

Alias fields (a-f) are reconciled with their m-fields, missing values get
their defaults and the 2D/3D dimensionality is resolved.

https://drafts.fxtf.org/geometry/#matrix-validate-and-fixup
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping

from pydantic import ValidationError as PydanticValidationError

from domxform.errors import ConflictingAliasError, Invalid2DStateError, MatrixInitError
from domxform.models import (
    ALIASED_FIELDS,
    MATRIX_2D_ARRAY_FIELDS,
    MATRIX_2D_ONE_FIELDS,
    MATRIX_2D_ZERO_FIELDS,
    MATRIX_3D_ARRAY_FIELDS,
    NormalizedMatrix,
    require_number,
)

logger = logging.getLogger(__name__)


def _same_value(x: object, y: object) -> bool:
    """Equality where NaN equals NaN."""
    if isinstance(x, float) and isinstance(y, float) and math.isnan(x) and math.isnan(y):
        return True
    return x == y


def _check_aliased_fields(init: Mapping) -> None:
    for alias, name, _default in ALIASED_FIELDS:
        if alias in init and name in init and not _same_value(init[alias], init[name]):
            raise ConflictingAliasError(
                f"invalid matrix init: {alias}={init[alias]!r} conflicts with {name}={init[name]!r}"
            )


def _fixup_aliased_fields(init: Mapping) -> dict:
    fixed = dict(init)
    for alias, name, default in ALIASED_FIELDS:
        if name not in init:
            fixed[name] = init[alias] if alias in init else default
    return fixed


def _check_numbers(init: Mapping) -> None:
    for name in MATRIX_3D_ARRAY_FIELDS:
        if name in init:
            try:
                require_number(init[name])
            except ValueError as e:
                raise MatrixInitError(f"invalid matrix init: {name}: {e}") from e


def is_valid_2d(init: Mapping) -> bool:
    """Return True if no 3D-only field moves the matrix off the 2D plane."""
    if any(name in init and init[name] != 0 for name in MATRIX_2D_ZERO_FIELDS):
        return False
    return not any(name in init and init[name] != 1 for name in MATRIX_2D_ONE_FIELDS)


def _resolve_dimension(init: Mapping) -> bool:
    if "is2D" in init and not init["is2D"]:
        return False

    valid_2d = is_valid_2d(init)
    if init.get("is2D") and not valid_2d:
        raise Invalid2DStateError(
            "invalid 2D state: is2D is true but the matrix has 3D components"
        )
    return valid_2d


def validate_and_fixup(init: Mapping | NormalizedMatrix) -> NormalizedMatrix:
    """Validate a DOMMatrixInit and fill in every missing field.

    Args:
        init: Mapping of field names to numbers. Keys other than a-f,
            m11-m44 and is2D are ignored. A ``NormalizedMatrix`` is accepted
            too, so normalizing twice gives the same result.

    Returns:
        Frozen NormalizedMatrix with all 16 fields and a resolved is2D.

    Raises:
        ConflictingAliasError: If an alias and its m-field disagree.
        Invalid2DStateError: If is2D is true but the matrix is not 2D.
        MatrixInitError: If init is not a mapping or a field is not a number.
    """
    if isinstance(init, NormalizedMatrix):
        init = init.to_init()
    if not isinstance(init, Mapping):
        raise MatrixInitError(f"invalid matrix init: expected a mapping, got {type(init).__name__}")

    _check_aliased_fields(init)
    fixed = _fixup_aliased_fields(init)
    _check_numbers(fixed)
    is_2d = _resolve_dimension(fixed)
    logger.debug("Resolved matrix init dimensionality: is2D=%s", is_2d)

    fields = {name: fixed[name] for name in MATRIX_3D_ARRAY_FIELDS if name in fixed}
    try:
        return NormalizedMatrix(**fields, is2D=is_2d)
    except PydanticValidationError as e:
        raise MatrixInitError(f"invalid matrix init:\n{e}") from e


def to_array(matrix: NormalizedMatrix) -> list[float]:
    """Return the 6 (2D) or 16 (3D) components in matrix()/matrix3d() order."""
    names = MATRIX_2D_ARRAY_FIELDS if matrix.is_2d else MATRIX_3D_ARRAY_FIELDS
    return [getattr(matrix, name) for name in names]
