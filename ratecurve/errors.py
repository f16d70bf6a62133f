"""
Error types raised by curve input validation.
"""


class CurveInputError(ValueError):
    """Base class for curve input validation failures."""


class NullArgument(CurveInputError):
    """A required field was not supplied."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"{field_name} must not be null")


class InvalidArgument(CurveInputError):
    """A structural invariant was violated."""


def require_not_null(value, field_name: str):
    """Return ``value`` or raise :class:`NullArgument` if it is ``None``."""
    if value is None:
        raise NullArgument(field_name)
    return value
