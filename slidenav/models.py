"""
Core data models for SlideNav.

A Deck is the immutable result of parsing a slideshow document; the
NavigationState is the only mutable piece and is owned by the Navigator.
"""

from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Slide(BaseModel):
    """One navigable unit of content plus its layout directives."""

    model_config = ConfigDict(frozen=True)

    content: str = ""
    classes: Tuple[str, ...] = ()
    index: int = Field(ge=0)
    name: Optional[str] = None
    directives: Tuple[Tuple[str, str], ...] = ()
    notes: str = ""

    @field_validator("classes")
    @classmethod
    def dedupe_classes(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        seen = []
        for token in v:
            if token and token not in seen:
                seen.append(token)
        return tuple(seen)

    def has_class(self, token: str) -> bool:
        return token in self.classes

    @property
    def properties(self) -> Mapping[str, str]:
        """Directives other than ``class`` and ``name``, read-only."""
        return MappingProxyType(dict(self.directives))

    @property
    def title(self) -> Optional[str]:
        """First markdown heading of the slide, if any."""
        for line in self.content.splitlines():
            stripped = line.strip()
            if stripped.startswith("#"):
                return stripped.lstrip("#").strip() or None
        return None

    def __str__(self) -> str:
        return self.content


class Deck(BaseModel):
    """
    Ordered, non-empty collection of slides parsed from one source document.
    Read-only once constructed.
    """

    model_config = ConfigDict(frozen=True)

    slides: Tuple[Slide, ...]
    source_name: Optional[str] = None

    @field_validator("slides")
    @classmethod
    def validate_slides(cls, v: Tuple[Slide, ...]) -> Tuple[Slide, ...]:
        if not v:
            raise ValueError("A deck must contain at least one slide")
        for position, slide in enumerate(v):
            if slide.index != position:
                raise ValueError(
                    f"Slide at position {position} has index {slide.index}"
                )
        return v

    def __len__(self) -> int:
        return len(self.slides)

    def __getitem__(self, index: int) -> Slide:
        return self.slides[index]

    def __iter__(self) -> Iterator[Slide]:
        return iter(self.slides)

    def find(self, name: str) -> Optional[Slide]:
        """Return the first slide carrying the given ``name:`` directive."""
        for slide in self.slides:
            if slide.name == name:
                return slide
        return None


class NavigationState(BaseModel):
    """Cursor into a deck. 0 <= index < deck_length at all times."""

    model_config = ConfigDict(validate_assignment=True)

    deck_length: int = Field(gt=0)
    index: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def check_bounds(self) -> "NavigationState":
        if self.index >= self.deck_length:
            raise ValueError(
                f"index {self.index} outside deck of {self.deck_length} slides"
            )
        return self
