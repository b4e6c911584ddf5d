"""
Exceptions raised by the board engine.
"""


class BoardError(Exception):
    """Base class for every error raised by the package."""


class OutOfRangeError(BoardError, IndexError):
    """A coordinate or a linear position lies outside the grid."""


class InvalidArgumentError(BoardError, ValueError):
    """An argument is outside its closed set of accepted values."""
