"""Custom exceptions for token-math.

Every precondition failure in the library raises one of these. Indeterminate
numeric forms (zero denominators) are not errors: they surface as NaN and
infinity sentinels from the numeric projections instead.
"""


class TokenMathError(Exception):
    """Base exception for all token-math errors."""


class ParseError(TokenMathError, ValueError):
    """Raised when an input cannot be read as an exact integer or fraction record."""


class InvalidArgument(TokenMathError, ValueError):
    """Raised when a caller-supplied parameter violates an API precondition."""


class RangeError(TokenMathError, ValueError):
    """Raised when a raw token quantity falls outside a declared u64/u256 bound."""


class TokenMismatch(TokenMathError):
    """Raised when arithmetic is attempted between amounts of different tokens."""
