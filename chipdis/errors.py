"""Exceptions raised by the disassembler and its helpers."""


class ChipdisError(Exception):
    """Base class for all chipdis errors."""


class BoundsError(ChipdisError, IndexError):
    """A memory read fell outside the supplied image."""


class InvalidAddressError(ChipdisError, ValueError):
    """An address is odd-aligned or outside the program region."""
