"""
Error taxonomy for SlideNav.
"""

from typing import Optional


class SlideNavError(Exception):
    """Base class for all SlideNav errors."""


class ParseError(SlideNavError, ValueError):
    """Source could not be turned into a deck (e.g. it was empty)."""


class IndexOutOfRange(SlideNavError, IndexError):
    """Navigation target lies outside the deck."""

    def __init__(self, index: object, length: int, message: Optional[str] = None):
        self.index = index
        self.length = length
        if message is None:
            message = f"Slide index {index!r} out of range for deck of {length} slides"
        super().__init__(message)
