"""Custom exception hierarchy for domxform.

Every error subclasses ``TypeError`` so callers written against the
Geometry Interfaces behaviour (which throws ``TypeError``) keep working.
"""

from __future__ import annotations


class DomXformError(TypeError):
    """Base exception for all domxform errors."""


class MatrixInitError(DomXformError):
    """Raised when a matrix init record is not a mapping of numbers."""


class ConflictingAliasError(MatrixInitError):
    """Raised when an alias field (a-f) disagrees with its m-field."""


class Invalid2DStateError(MatrixInitError):
    """Raised when is2D is asserted but 3D components are off-identity."""


class TransformParseError(DomXformError):
    """Base for failures detected while walking a transform list."""


class CssSyntaxError(TransformParseError):
    """Raised when the CSS tokenizer reports a syntax error."""


class UnexpectedNodeError(TransformParseError):
    """Raised when a value node appears where it is not allowed."""


class UnknownTransformFunctionError(TransformParseError):
    """Raised for a function name outside the transform-function set."""


class ArityError(TransformParseError):
    """Raised when a transform function gets the wrong number of arguments."""


class ArgumentTypeError(TransformParseError):
    """Raised when an argument is not of the kind the function expects."""


class RelativeLengthError(TransformParseError):
    """Raised when a percentage is given where only absolute values work."""


class UnknownUnitError(TransformParseError):
    """Raised when a dimension unit is neither a length nor an angle."""


class TransformSyntaxError(DomXformError):
    """Single error raised by ``parse_transform_list`` for any failure.

    ``source`` is the input string and ``cause`` the original error.
    """

    def __init__(self, message: str, source: object, cause: BaseException | None = None) -> None:
        self.source = source
        self.cause = cause
        super().__init__(message)


SyntaxWrapError = TransformSyntaxError
