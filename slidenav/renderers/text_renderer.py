"""
Plain-text rendering for the terminal viewer.
"""

import textwrap
from typing import Optional

from slidenav.models import Slide


class TextRenderer:
    """Frame a slide's raw content for display in a terminal."""

    def __init__(self, width: int = 72, show_notes: bool = False):
        self.width = width
        self.show_notes = show_notes

    def render_slide(self, slide: Slide, position: Optional[str] = None) -> str:
        rule = "=" * self.width

        header = f"Slide {position or slide.index + 1}"
        if slide.name:
            header += f" ({slide.name})"
        if slide.classes:
            header += f"  [{' '.join(slide.classes)}]"

        lines = [rule, header, "-" * self.width]
        body = slide.content or "(empty slide)"
        if slide.has_class("center"):
            lines.extend(line.strip().center(self.width).rstrip() for line in body.splitlines())
        else:
            lines.extend(body.splitlines())

        if self.show_notes and slide.notes:
            lines.append("-" * self.width)
            lines.append("Notes:")
            lines.extend(
                textwrap.indent(slide.notes, "  ").splitlines()
            )

        lines.append(rule)
        return "\n".join(lines)
