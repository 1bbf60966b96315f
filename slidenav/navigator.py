"""
Bounded navigation over a Deck.
"""

from pathlib import Path
from typing import Union

from slidenav.exceptions import IndexOutOfRange
from slidenav.models import Deck, NavigationState, Slide
from slidenav.parser import load, load_file


class Navigator:
    """
    Owns the navigation state for one viewing session of a deck.

    ``next``/``previous``/``first``/``last`` saturate at the deck boundaries
    and never fail. ``goto``/``goto_name`` raise IndexOutOfRange for targets
    outside the deck and leave the state untouched.
    """

    def __init__(self, deck: Deck, start: int = 0):
        self._deck = deck
        self._state = NavigationState(deck_length=len(deck))
        if start:
            self.goto(start)

    @classmethod
    def from_source(cls, source: str) -> "Navigator":
        return cls(load(source))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Navigator":
        return cls(load_file(path))

    @property
    def deck(self) -> Deck:
        return self._deck

    @property
    def index(self) -> int:
        return self._state.index

    @property
    def at_start(self) -> bool:
        return self._state.index == 0

    @property
    def at_end(self) -> bool:
        return self._state.index == len(self._deck) - 1

    @property
    def position(self) -> str:
        """Human-facing position, e.g. ``3/12``."""
        return f"{self._state.index + 1}/{len(self._deck)}"

    def current(self) -> Slide:
        return self._deck[self._state.index]

    def next(self) -> Slide:
        if not self.at_end:
            self._state.index += 1
        return self.current()

    def previous(self) -> Slide:
        if not self.at_start:
            self._state.index -= 1
        return self.current()

    def first(self) -> Slide:
        self._state.index = 0
        return self.current()

    def last(self) -> Slide:
        self._state.index = len(self._deck) - 1
        return self.current()

    def goto(self, n: int) -> Slide:
        # bool is an int subclass; goto(True) is a caller bug, not slide 1
        if isinstance(n, bool) or not isinstance(n, int):
            raise IndexOutOfRange(n, len(self._deck))
        if not 0 <= n < len(self._deck):
            raise IndexOutOfRange(n, len(self._deck))
        self._state.index = n
        return self.current()

    def goto_name(self, name: str) -> Slide:
        slide = self._deck.find(name)
        if slide is None:
            raise IndexOutOfRange(
                name, len(self._deck), f"No slide named {name!r} in deck"
            )
        return self.goto(slide.index)

    def __len__(self) -> int:
        return len(self._deck)

    def __repr__(self) -> str:
        return f"Navigator(position={self.position!r}, source={self._deck.source_name!r})"
