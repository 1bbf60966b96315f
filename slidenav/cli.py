"""
Command-line interface for SlideNav.
"""

import sys
import argparse
from pathlib import Path
from typing import List, Optional, TextIO

from dotenv import load_dotenv
from pydantic import ValidationError

from slidenav import __version__
from slidenav.config import ViewerSettings
from slidenav.controls import KeyMap
from slidenav.exceptions import SlideNavError
from slidenav.navigator import Navigator
from slidenav.parser import load_file
from slidenav.renderers import HTMLRenderer, TextRenderer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slidenav",
        description="SlideNav: parse, navigate and render markdown slide decks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Render a deck to a standalone HTML slideshow
  slidenav render idioms.md

  # Render to a specific file with a custom title
  slidenav render idioms.md -o site/index.html --title "C++ Idioms"

  # Browse a deck in the terminal (n/p/g/G/<number>/q)
  slidenav show idioms.md --notes

  # List slides with their names and layout classes
  slidenav info idioms.md

Environment Variables:
  SLIDENAV_OUTPUT_DIR   Default output directory for render
  SLIDENAV_TITLE        Default page title
  SLIDENAV_RATIO        Slide aspect ratio (default 16:9)
  SLIDENAV_SHOW_NOTES   Show presenter notes in the terminal viewer
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"SlideNav {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    render = subparsers.add_parser("render", help="Write the deck as a standalone HTML slideshow")
    render.add_argument("deck", type=Path, help="Markdown slide source")
    render.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Output HTML file (default: <output_dir>/<deck name>.html)",
    )
    render.add_argument("--title", help="Page title (default: deck file name)")

    show = subparsers.add_parser("show", help="Browse the deck in the terminal")
    show.add_argument("deck", type=Path, help="Markdown slide source")
    show.add_argument(
        "--start",
        type=int,
        default=1,
        help="Slide number to open at, 1-based (default: 1)",
    )
    show.add_argument(
        "--notes",
        action="store_true",
        help="Show presenter notes under each slide",
    )

    info = subparsers.add_parser("info", help="List the slides of a deck")
    info.add_argument("deck", type=Path, help="Markdown slide source")

    return parser


def run_viewer(
    navigator: Navigator,
    renderer: TextRenderer,
    keymap: Optional[KeyMap] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> None:
    """
    Interactive loop: show the current slide, read one event per line, repeat.

    Ends on a quit event or end of input.
    """
    keymap = keymap or KeyMap()
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    print(renderer.render_slide(navigator.current(), navigator.position), file=stdout)

    for line in stdin:
        result = keymap.dispatch(navigator, line.rstrip("\n"))
        if result.quit:
            break
        if result.error:
            print(f"! {result.error}", file=stdout)
            continue
        print(renderer.render_slide(result.slide, navigator.position), file=stdout)


def cmd_render(args: argparse.Namespace, settings: ViewerSettings) -> int:
    print(f"[Load] Reading {args.deck}")
    deck = load_file(args.deck)
    print(f"[Load] Parsed {len(deck)} slides")

    output = args.output or settings.output_dir / f"{args.deck.stem}.html"
    title = args.title or settings.title or args.deck.stem

    HTMLRenderer(ratio=settings.ratio).write_deck(deck, output, title=title)
    return 0


def cmd_show(args: argparse.Namespace, settings: ViewerSettings) -> int:
    navigator = Navigator(load_file(args.deck))
    navigator.goto(args.start - 1)

    renderer = TextRenderer(show_notes=args.notes or settings.show_notes)
    run_viewer(navigator, renderer)
    return 0


def cmd_info(args: argparse.Namespace, settings: ViewerSettings) -> int:
    deck = load_file(args.deck)
    print(f"{deck.source_name}: {len(deck)} slides")
    for slide in deck:
        label = slide.title or (slide.content.splitlines()[0] if slide.content else "(empty)")
        name = f" #{slide.name}" if slide.name else ""
        classes = f" [{' '.join(slide.classes)}]" if slide.classes else ""
        print(f"  {slide.index + 1:>3}{name}{classes}  {label}")
    return 0


COMMANDS = {
    "render": cmd_render,
    "show": cmd_show,
    "info": cmd_info,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    load_dotenv()  # Load .env file if present

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if not args.deck.exists():
        print(f"Error: Deck not found: {args.deck}", file=sys.stderr)
        return 1

    try:
        settings = ViewerSettings.from_env()
        return COMMANDS[args.command](args, settings)

    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130

    except (SlideNavError, ValidationError, OSError) as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
