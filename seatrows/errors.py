"""
Exceptions raised by seatrows
"""


class SeatingError(Exception):
    """Base class for all seatrows errors"""


class InvalidRadiusError(SeatingError, ValueError):
    """Raised when an inner or outer radius is negative"""


class SeatingInvariantError(SeatingError, ZeroDivisionError):
    """
    Raised when an internal invariant is broken, e.g. a row reached zero seats
    before its spacing was computed.

    This signals a bug upstream and is never expected through ``distribute``.
    """


class RowSearchExhaustedError(SeatingInvariantError):
    """Raised when the row count search runs past its upper bound"""
