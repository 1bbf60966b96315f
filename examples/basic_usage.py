"""
Basic usage example for SlideNav.

Loads the sample deck, walks through it with the Navigator and writes a
standalone HTML slideshow.
"""

from pathlib import Path
from slidenav import Navigator, IndexOutOfRange
from slidenav.renderers import HTMLRenderer, TextRenderer


def main():
    deck_path = Path(__file__).parent / "cpp_idioms.md"
    navigator = Navigator.from_file(deck_path)
    renderer = TextRenderer(width=60)

    # Walk forward; next() stops at the last slide
    print(renderer.render_slide(navigator.current(), navigator.position))
    while not navigator.at_end:
        print(renderer.render_slide(navigator.next(), navigator.position))

    # Jump straight to a named slide
    print(renderer.render_slide(navigator.goto_name("pimpl"), navigator.position))

    try:
        navigator.goto(len(navigator))
    except IndexOutOfRange as e:
        print(f"Expected failure: {e}")

    output = HTMLRenderer().write_deck(navigator.deck, Path("output/cpp_idioms.html"))
    print(f"\n✓ Slideshow written to {output}")


if __name__ == "__main__":
    main()
