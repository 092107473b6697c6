"""domxform: DOMMatrixInit normalization and CSS transform-list parsing."""

__version__ = "0.1.0"

from domxform.errors import (  # noqa: E402
    ArgumentTypeError,
    ArityError,
    ConflictingAliasError,
    CssSyntaxError,
    DomXformError,
    Invalid2DStateError,
    MatrixInitError,
    RelativeLengthError,
    SyntaxWrapError,
    TransformParseError,
    TransformSyntaxError,
    UnexpectedNodeError,
    UnknownTransformFunctionError,
    UnknownUnitError,
)
from domxform.matrix_init import to_array, validate_and_fixup  # noqa: E402
from domxform.models import NormalizedMatrix, TransformFunctionCall  # noqa: E402
from domxform.transform_parser import (  # noqa: E402
    parse_to_transform_functions,
    parse_transform_list,
)
from domxform.units import convert  # noqa: E402

__all__ = [
    "ArgumentTypeError",
    "ArityError",
    "ConflictingAliasError",
    "CssSyntaxError",
    "DomXformError",
    "Invalid2DStateError",
    "MatrixInitError",
    "NormalizedMatrix",
    "RelativeLengthError",
    "SyntaxWrapError",
    "TransformFunctionCall",
    "TransformParseError",
    "TransformSyntaxError",
    "UnexpectedNodeError",
    "UnknownTransformFunctionError",
    "UnknownUnitError",
    "convert",
    "parse_to_transform_functions",
    "parse_transform_list",
    "to_array",
    "validate_and_fixup",
]
