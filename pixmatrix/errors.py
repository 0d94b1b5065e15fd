"""Exception types raised by ``pixmatrix``.

Both concrete errors subclass ``ValueError`` so callers that already guard
conversions with ``except ValueError`` keep working.
"""

from __future__ import annotations


class PixmatrixError(Exception):
    """Base class for all pixmatrix errors."""


class NullInputError(PixmatrixError, ValueError):
    """A required image or channel matrix was ``None``."""


class DimensionMismatchError(PixmatrixError, ValueError):
    """Channel matrices passed to a composer do not share one 2D shape."""
