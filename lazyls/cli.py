"""Command-line front door for lazyls.

Parses ``-l``/``-x``/``-R`` and the target path, loads settings, and
dispatches into the directory walker.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import load_settings
from .terminal import stream_is_tty
from .ui_theme import resolve_theme
from .walker import MODE_DEFAULT, MODE_HORIZONTAL, MODE_LONG, ListingOptions, list_directory


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyls",
        description="List directory contents in columns, long format, or across.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument("-l", dest="long", action="store_true", help="Use a long listing format.")
    parser.add_argument("-x", dest="across", action="store_true", help="List entries across rows instead of down columns.")
    parser.add_argument("-R", dest="recursive", action="store_true", help="List subdirectories recursively.")
    return parser


def resolve_mode(long: bool, across: bool) -> str:
    """Pick the display mode; ``-l`` wins over ``-x``."""
    if long:
        return MODE_LONG
    if across:
        return MODE_HORIZONTAL
    return MODE_DEFAULT


def _pass_through_undecodable_bytes(stream) -> None:
    """Write surrogate-escaped name bytes back out unchanged."""
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


def main(argv: list[str] | None = None, default_path: Path | None = None) -> int:
    """Parse CLI arguments and list the requested directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Returns the process exit status: ``1`` when the
    top-level directory cannot be listed, ``0`` otherwise.
    """
    args = build_parser().parse_args(argv)

    if default_path is None:
        default_path = Path(".")
    path = Path(args.path) if args.path is not None else default_path

    settings = load_settings()
    out = sys.stdout
    err = sys.stderr
    # Names and paths the filesystem could not decode carry lone surrogates.
    _pass_through_undecodable_bytes(out)
    _pass_through_undecodable_bytes(err)
    theme = resolve_theme(settings.theme, no_color=not settings.use_color(stream_is_tty(out)))
    options = ListingOptions(
        theme=theme,
        fallback_columns=settings.fallback_columns,
        out=out,
        err=err,
    )
    ok = list_directory(path, resolve_mode(args.long, args.across), args.recursive, options)
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
