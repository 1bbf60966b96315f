"""
Map discrete input events (key presses, typed commands) to navigation.
"""

import re
from typing import Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict

from slidenav.exceptions import IndexOutOfRange
from slidenav.models import Slide
from slidenav.navigator import Navigator


class ControlResult(BaseModel):
    """Outcome of handling one input event."""

    model_config = ConfigDict(frozen=True)

    slide: Slide
    quit: bool = False
    error: Optional[str] = None


DEFAULT_BINDINGS: Dict[str, str] = {
    "": "next",
    "n": "next",
    "j": "next",
    "l": "next",
    "right": "next",
    "space": "next",
    "p": "previous",
    "k": "previous",
    "h": "previous",
    "left": "previous",
    "g": "first",
    "home": "first",
    "G": "last",
    "end": "last",
    "q": "quit",
    "quit": "quit",
}


class KeyMap:
    """
    Dispatches events to Navigator operations.

    A bare integer event ``N`` jumps to slide N (1-based). Anything not bound
    is reported back as an error without changing the navigator.
    """

    def __init__(self, bindings: Optional[Dict[str, str]] = None):
        self.bindings = dict(DEFAULT_BINDINGS if bindings is None else bindings)

    def action_for(self, event: str) -> Optional[str]:
        event = event.strip()
        if event in self.bindings:
            return self.bindings[event]
        return self.bindings.get(event.lower())

    def dispatch(self, navigator: Navigator, event: str) -> ControlResult:
        event = event.strip()

        if re.fullmatch(r"-?\d+", event, re.ASCII):
            try:
                slide = navigator.goto(int(event) - 1)
            except IndexOutOfRange:
                return ControlResult(
                    slide=navigator.current(),
                    error=f"No slide {event} (deck has {len(navigator)} slides)",
                )
            return ControlResult(slide=slide)

        action = self.action_for(event)
        if action is None:
            return ControlResult(slide=navigator.current(), error=f"Unknown command: {event}")
        if action == "quit":
            return ControlResult(slide=navigator.current(), quit=True)

        operations: Dict[str, Callable[[], Slide]] = {
            "next": navigator.next,
            "previous": navigator.previous,
            "first": navigator.first,
            "last": navigator.last,
        }
        if action not in operations:
            return ControlResult(slide=navigator.current(), error=f"Unknown action: {action}")
        return ControlResult(slide=operations[action]())
