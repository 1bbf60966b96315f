"""
Render slides to HTML.

Slide bodies are converted with the ``markdown`` library; page chrome comes
from jinja2 templates. Rendering reads slides only and never touches
navigation state.
"""

from pathlib import Path
from typing import Optional

import markdown
from jinja2 import Template

from slidenav.models import Deck, Slide


class HTMLRenderer:
    """
    Turn slides into ``<section>`` fragments or a standalone slideshow page.

    Layout directives from ``class:`` are copied onto the section element;
    the page stylesheet understands center, middle, inverse, left and right.
    """

    MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "sane_lists"]

    SLIDE_TEMPLATE = """<section class="{{ classes|join(' ')|e }}"{% if slide.name %} id="{{ slide.name|e }}"{% endif %} data-index="{{ slide.index }}">
<div class="slide-content">
{{ body }}
</div>
</section>"""

    DECK_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{{ title|e }}</title>
    <style>
        * {
            margin: 0;
            padding: 0;
            box-sizing: border-box;
        }

        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, sans-serif;
            background: #d7d8d2;
            display: flex;
            align-items: center;
            justify-content: center;
            height: 100vh;
        }

        section.slide {
            display: none;
            background: white;
            color: #333;
            width: 90vw;
            max-width: calc(90vh * {{ ratio_w }} / {{ ratio_h }});
            aspect-ratio: {{ ratio_w }} / {{ ratio_h }};
            padding: 2em 4em;
            box-shadow: 0 2px 4px rgba(0,0,0,0.1);
            flex-direction: column;
            overflow: hidden;
        }

        section.slide.active {
            display: flex;
        }

        section.slide.center { text-align: center; }
        section.slide.left { text-align: left; }
        section.slide.right { text-align: right; }
        section.slide.middle { justify-content: center; }
        section.slide.top { justify-content: flex-start; }
        section.slide.bottom { justify-content: flex-end; }

        section.slide.inverse {
            background: #272822;
            color: #f3f3f3;
            text-shadow: 0 0 20px #333;
        }

        pre {
            text-align: left;
            background: #f5f5f5;
            padding: 10px;
            border-radius: 3px;
            font-size: 0.9em;
        }

        section.slide.inverse pre {
            background: #3a3b35;
        }

        .slide-number {
            position: fixed;
            bottom: 12px;
            right: 20px;
            color: #777;
            font-size: 14px;
        }
    </style>
</head>
<body>
    {% for fragment in slides %}
    {{ fragment }}
    {% endfor %}
    <div class="slide-number" id="slide-number"></div>

    <script>
        const slides = document.querySelectorAll('section.slide');
        let current = {{ start }};

        function show(index) {
            current = Math.max(0, Math.min(slides.length - 1, index));
            slides.forEach((el, i) => el.classList.toggle('active', i === current));
            document.getElementById('slide-number').textContent = (current + 1) + ' / ' + slides.length;
        }

        document.addEventListener('keydown', (event) => {
            switch (event.key) {
                case 'ArrowRight':
                case 'ArrowDown':
                case 'PageDown':
                case ' ':
                    show(current + 1);
                    break;
                case 'ArrowLeft':
                case 'ArrowUp':
                case 'PageUp':
                    show(current - 1);
                    break;
                case 'Home':
                    show(0);
                    break;
                case 'End':
                    show(slides.length - 1);
                    break;
            }
        });

        show(current);
    </script>
</body>
</html>
"""

    def __init__(self, ratio: str = "16:9"):
        width, height = ratio.split(":")
        self.ratio_w = int(width)
        self.ratio_h = int(height)
        self._slide_template = Template(self.SLIDE_TEMPLATE)
        self._deck_template = Template(self.DECK_TEMPLATE)

    def render_markdown(self, content: str) -> str:
        """Convert one slide body from markdown to an HTML fragment."""
        return markdown.markdown(content, extensions=self.MARKDOWN_EXTENSIONS)

    def render_slide(self, slide: Slide) -> str:
        """
        Render a single slide as a ``<section>`` element.

        Presenter notes are never included.
        """
        return self._slide_template.render(
            slide=slide,
            classes=("slide",) + slide.classes,
            body=self.render_markdown(slide.content),
        )

    def render_deck(self, deck: Deck, title: Optional[str] = None, start: int = 0) -> str:
        """
        Render the whole deck as a standalone HTML page with keyboard navigation.

        Args:
            deck: Deck to render
            title: Page title (default: first slide heading or "Slides")
            start: Slide shown when the page opens

        Returns:
            HTML document as a string
        """
        if title is None:
            title = deck[0].title or "Slides"
        start = max(0, min(len(deck) - 1, start))

        return self._deck_template.render(
            title=title,
            slides=[self.render_slide(slide) for slide in deck],
            start=start,
            ratio_w=self.ratio_w,
            ratio_h=self.ratio_h,
        )

    def write_deck(self, deck: Deck, output_path: Path, title: Optional[str] = None) -> Path:
        """
        Render the deck and save it to ``output_path``.

        Returns:
            Path to generated HTML file
        """
        output_path = Path(output_path)
        print(f"[Render] Generating HTML for {len(deck)} slides")

        html_content = self.render_deck(deck, title=title)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(html_content)

        print(f"[Render] Saved HTML slideshow to {output_path}")
        return output_path
