"""Exception hierarchy for varbits.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from VarbitsError for easy catching of any varbits-specific error.

Contract violations (requesting more than 64 bits in one raw operation, a zigzag
block exponent of 64 or more, a value that does not fit its declared width) are
programmer errors and raise ValueError at the call site instead.
"""

from __future__ import annotations


class VarbitsError(Exception):
    """Base exception for all varbits errors."""

    pass


class EncodeError(VarbitsError):
    """Raised when encoding a sequence of values fails.

    Examples:
        - Value does not fit in the declared width
        - Negative value written with unsigned parameters
    """

    pass


class DecodeError(VarbitsError):
    """Raised when decoding binary data fails.

    Examples:
        - Truncated stream (variable-width value cut short)
        - Fewer values available than requested
    """

    pass
