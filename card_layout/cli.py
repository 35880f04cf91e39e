"""Command-line interface for rendering aspiration cards to SVG files.

WHY: Designers and moderators want to preview a card for a piece of text
without running the HTTP service. The CLI wraps render_card() behind a
single command that reads text from a file or stdin.

HOW: Uses argparse to accept an input path ("-" for stdin), an optional
output path, --preset and --style. Status messages go to stderr; the SVG
goes to the output file, or to stdout when no output path is given.

RULES:
- Usage:
    python -m card_layout input.txt output.svg [--preset compact] [--style minimal]
    python -m card_layout input.txt  (SVG to stdout)
    echo "Hi" | python -m card_layout - card.svg
- Exit codes: 0 = success, 1 = error.
- Status output goes to stderr (not stdout)
"""

import argparse
import sys
from typing import List, Optional

from . import render_card
from .decorations import DECORATIONS, DEFAULT_STYLE
from .errors import CardRenderError
from .presets import DEFAULT_PRESET, PRESETS


def _status(msg: str) -> None:
    """Print a status message to stderr so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="card_layout",
        description="Render an aspiration text as a square SVG social card.",
    )
    parser.add_argument(
        "input",
        help="Path to a UTF-8 text file with the aspiration, or '-' for stdin.",
    )
    parser.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Path of the SVG file to write (default: stdout).",
    )
    parser.add_argument(
        "--preset",
        default=DEFAULT_PRESET,
        help="Canvas preset: {} (default: %(default)s).".format(", ".join(sorted(PRESETS))),
    )
    parser.add_argument(
        "--style",
        default=DEFAULT_STYLE,
        help="Decoration style: {} (default: %(default)s).".format(", ".join(sorted(DECORATIONS))),
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Run the card rendering CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).
    """
    args = build_parser().parse_args(argv)

    if args.input == "-":
        raw = sys.stdin.read()
    else:
        try:
            with open(args.input, "r", encoding="utf-8") as f:
                raw = f.read()
        except OSError as e:
            print("Error: {}".format(e), file=sys.stderr)
            sys.exit(1)

    try:
        card = render_card(raw, preset=args.preset, style=args.style)
    except (CardRenderError, ValueError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(card.svg)
        _status(
            "Wrote {} line(s) at font size {} ({} preset, {} style) to {}".format(
                len(card.layout.lines), card.layout.font_size,
                args.preset, args.style, args.output,
            )
        )
        if card.layout.truncated:
            _status("  Text was truncated to {} lines".format(card.layout.config.max_lines))
    else:
        print(card.svg)


if __name__ == "__main__":
    main()
