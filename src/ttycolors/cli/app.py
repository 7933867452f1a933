"""Command-line preview of the terminal palette."""

import argparse
import logging
import sys

from ttycolors import __version__
from ttycolors.cli.preview import render_preview
from ttycolors.codes import init
from ttycolors.models import ColorMode

log = logging.getLogger("ttycolors")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ttycolors",
        description="Show the ANSI attributes and colors this terminal will get",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--color",
        choices=[m.value for m in ColorMode],
        default=ColorMode.AUTO.value,
        help="Force colors on or off, or detect from the terminal and NO_COLOR (default: auto)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Print the palette preview."""
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    codes = init(args.color)
    log.debug("color=%s enabled=%s", args.color, codes.enabled)
    for line in render_preview(codes):
        print(line)
    return 0


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
