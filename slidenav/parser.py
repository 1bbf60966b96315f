"""
Slide source parser.

Splits a structured-text document into a Deck. Slides are separated by a
line holding only ``---``; each slide may open with directive lines such as
``class: center, middle`` or ``name: intro`` and may end with presenter
notes introduced by a ``???`` line.
"""

import re
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

from slidenav.exceptions import ParseError
from slidenav.models import Deck, Slide


SLIDE_DELIMITER = "---"
NOTES_DELIMITER = "???"

_DIRECTIVE_RE = re.compile(r"^([a-z][a-z0-9-]*):(?!:)(?:\s|$)(.*)$")
_FENCE_RE = re.compile(r"^\s*(```|~~~)")


def _scan_fences(lines: List[str]) -> Iterator[Tuple[int, str, bool]]:
    """Yield ``(position, line, fenced)``; fence marker lines count as fenced."""
    fence: Optional[str] = None
    for position, line in enumerate(lines):
        match = _FENCE_RE.match(line)
        if match:
            if fence is None:
                fence = match.group(1)
            elif match.group(1) == fence:
                fence = None
            yield position, line, True
        else:
            yield position, line, fence is not None


def _split_segments(lines: List[str]) -> List[List[str]]:
    """Split lines on slide delimiters that sit outside code fences."""
    segments: List[List[str]] = [[]]
    for _, line, fenced in _scan_fences(lines):
        if not fenced and line.rstrip() == SLIDE_DELIMITER:
            segments.append([])
        else:
            segments[-1].append(line)
    return segments


def _parse_directives(lines: List[str]) -> Tuple[Dict[str, str], List[str]]:
    """Consume leading ``key: value`` lines; return them and the remaining body."""
    directives: Dict[str, str] = {}
    position = 0
    while position < len(lines) and not lines[position].strip():
        position += 1
    for line in lines[position:]:
        match = _DIRECTIVE_RE.match(line.rstrip())
        if not match:
            break
        directives[match.group(1)] = match.group(2).strip()
        position += 1
    return directives, lines[position:]


def _split_notes(lines: List[str]) -> Tuple[List[str], List[str]]:
    for position, line, fenced in _scan_fences(lines):
        if not fenced and line.rstrip() == NOTES_DELIMITER:
            return lines[:position], lines[position + 1:]
    return lines, []


def _parse_classes(value: str) -> Tuple[str, ...]:
    # "class: center, middle" and "class: center middle" are equivalent
    return tuple(token for token in re.split(r"[\s,]+", value) if token)


def _trim(lines: List[str]) -> str:
    return "\n".join(lines).strip("\n")


def parse_slide(lines: List[str], index: int) -> Slide:
    """Build a single Slide from the lines of one segment."""
    directives, body = _parse_directives(lines)
    body, notes = _split_notes(body)

    classes = _parse_classes(directives.pop("class", ""))
    name = directives.pop("name", None) or None

    return Slide(
        content=_trim(body),
        classes=classes,
        index=index,
        name=name,
        directives=tuple(directives.items()),
        notes=_trim(notes),
    )


def load(source: str, source_name: Optional[str] = None) -> Deck:
    """
    Parse a slideshow document into a Deck.

    Args:
        source: Raw document text
        source_name: Optional label recorded on the deck (e.g. file path)

    Returns:
        Deck with one Slide per delimiter-separated segment

    Raises:
        ParseError: If the source is empty or not text
    """
    if not isinstance(source, str):
        raise ParseError(f"Slide source must be text, got {type(source).__name__}")
    if source == "":
        raise ParseError("Slide source is empty; a deck needs at least one slide")

    lines = source.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    segments = _split_segments(lines)

    slides = [parse_slide(segment, index) for index, segment in enumerate(segments)]
    return Deck(slides=tuple(slides), source_name=source_name)


def load_file(path: Union[str, Path]) -> Deck:
    """
    Read a UTF-8 slideshow document from disk and parse it.

    Raises:
        FileNotFoundError: If the file does not exist
        ParseError: If the file is not valid UTF-8 or is empty
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Deck not found: {path}")

    try:
        source = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"{path} is not valid UTF-8: {e}") from e

    return load(source, source_name=str(path))
