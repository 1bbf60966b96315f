"""
Slide renderers.

HTML output for browsers and plain text for the terminal viewer.
"""

from slidenav.renderers.html_renderer import HTMLRenderer
from slidenav.renderers.text_renderer import TextRenderer

__all__ = ["HTMLRenderer", "TextRenderer"]
