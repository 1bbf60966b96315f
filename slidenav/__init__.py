"""
SlideNav: parse, navigate and render markdown slide decks.

A deck is one structured-text document whose slides are separated by
``---`` lines. SlideNav turns it into an immutable Deck, keeps a bounded
cursor over it and renders the active slide as HTML or terminal text.
"""

__version__ = "0.1.0"

from slidenav.exceptions import SlideNavError, ParseError, IndexOutOfRange
from slidenav.models import Deck, Slide, NavigationState
from slidenav.parser import load, load_file
from slidenav.navigator import Navigator

__all__ = [
    "Deck",
    "Slide",
    "NavigationState",
    "Navigator",
    "load",
    "load_file",
    "SlideNavError",
    "ParseError",
    "IndexOutOfRange",
]
