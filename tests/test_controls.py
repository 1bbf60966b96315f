"""
Tests for key event dispatch.
"""

import pytest

from slidenav.controls import KeyMap
from slidenav.navigator import Navigator


@pytest.fixture
def navigator():
    return Navigator.from_source("A\n---\nB\n---\nC")


@pytest.mark.parametrize("event", ["n", "j", "l", "right", "Right", "space", ""])
def test_next_events(navigator, event):
    result = KeyMap().dispatch(navigator, event)
    assert result.slide.content == "B"
    assert not result.quit
    assert result.error is None


@pytest.mark.parametrize("event", ["p", "k", "h", "left"])
def test_previous_events(navigator, event):
    navigator.goto(2)
    assert KeyMap().dispatch(navigator, event).slide.content == "B"


def test_first_and_last_events(navigator):
    keymap = KeyMap()
    assert keymap.dispatch(navigator, "G").slide.content == "C"
    assert keymap.dispatch(navigator, "g").slide.content == "A"
    assert keymap.dispatch(navigator, "end").slide.content == "C"
    assert keymap.dispatch(navigator, "home").slide.content == "A"


def test_number_jumps_one_based(navigator):
    result = KeyMap().dispatch(navigator, "3")
    assert result.slide.content == "C"
    assert navigator.index == 2


@pytest.mark.parametrize("event", ["0", "4", "-1", "--2", "²"])
def test_number_out_of_range_reports_error(navigator, event):
    navigator.goto(1)

    result = KeyMap().dispatch(navigator, event)

    assert result.error is not None
    assert result.slide.content == "B"
    assert navigator.index == 1


def test_unknown_event(navigator):
    result = KeyMap().dispatch(navigator, "xyz")
    assert result.error == "Unknown command: xyz"
    assert navigator.index == 0


def test_quit(navigator):
    assert KeyMap().dispatch(navigator, "q").quit
    assert KeyMap().dispatch(navigator, "quit").quit


def test_custom_bindings(navigator):
    keymap = KeyMap({"f": "next", "x": "quit"})

    assert keymap.dispatch(navigator, "f").slide.content == "B"
    assert keymap.dispatch(navigator, "n").error is not None
    assert keymap.dispatch(navigator, "x").quit


def test_bad_action_in_bindings(navigator):
    result = KeyMap({"z": "explode"}).dispatch(navigator, "z")
    assert result.error == "Unknown action: explode"
