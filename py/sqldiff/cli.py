"""Command-line front end for sqldiff."""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import List, Optional

from .types import ALGORITHMS, DiffError, DiffOptions
from .diff import compute_diff
from .align import align
from .render import format_stats, render_html, render_json, render_text
from .table import build_table, format_table, load_comparisons
from .utils import get_stats, is_equivalent


DEFAULT_WIDTH = 60
DEFAULT_ALGORITHM = "lcs"

EXIT_SAME = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2


def _read_text(path: str) -> str:
    """Read a file, or stdin when path is "-"."""
    if path == "-":
        return sys.stdin.read().lstrip("\ufeff")
    return Path(path).read_text(encoding="utf-8-sig")


def _resolve_width(width: Optional[int]) -> int:
    if width is not None:
        value = width
    else:
        raw = os.environ.get("SQLDIFF_WIDTH", str(DEFAULT_WIDTH))
        try:
            value = int(raw)
        except ValueError:
            raise DiffError(f"Invalid SQLDIFF_WIDTH: {raw!r}")
    if value < 1:
        raise DiffError(f"Column width must be positive, got {value}")
    return value


def _resolve_algorithm(algorithm: Optional[str]) -> str:
    value = algorithm or os.environ.get("SQLDIFF_ALGORITHM", DEFAULT_ALGORITHM)
    if value not in ALGORITHMS:
        raise DiffError(f"Unknown diff algorithm: {value!r}")
    return value


def _resolve_color(color: Optional[bool]) -> bool:
    if color is not None:
        return color
    if os.environ.get("NO_COLOR"):
        return False
    return sys.stdout.isatty()


def cmd_diff(args: argparse.Namespace) -> int:
    """Show a side-by-side diff of two files."""
    if args.original == "-" and args.modified == "-":
        raise DiffError("Only one side can be read from stdin")

    original = _read_text(args.original)
    modified = _read_text(args.modified)

    options = DiffOptions(algorithm=_resolve_algorithm(args.algorithm))
    segments = compute_diff(original, modified, options)
    stats = get_stats(segments)
    result = align(segments)

    if args.stat:
        print(format_stats(stats))
    elif args.format == "json":
        print(render_json(result, stats))
    elif args.format == "html":
        print(render_html(result, title=args.title, labels=(args.original, args.modified)))
    else:
        output = render_text(
            result,
            width=_resolve_width(args.width),
            color=_resolve_color(args.color),
            labels=(args.original, args.modified),
        )
        print(output)

    if stats.additions or stats.deletions:
        return EXIT_DIFFERENT
    return EXIT_SAME


def cmd_check(args: argparse.Namespace) -> int:
    """Report whether two files match once whitespace is ignored."""
    if args.original == "-" and args.modified == "-":
        raise DiffError("Only one side can be read from stdin")

    original = _read_text(args.original)
    modified = _read_text(args.modified)

    if is_equivalent(original, modified):
        print("match")
        return EXIT_SAME
    print("differs")
    return EXIT_DIFFERENT


def cmd_table(args: argparse.Namespace) -> int:
    """Print the comparison table for a comparisons file."""
    rows = build_table(load_comparisons(args.file))

    if args.format == "json":
        print(json.dumps([row.to_dict() for row in rows], indent=2, ensure_ascii=False))
    else:
        print(format_table(rows))
    return EXIT_SAME


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sqldiff",
        description="Side-by-side line diff for SQL statements",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True

    diff_parser = subparsers.add_parser("diff", help="show a side-by-side diff")
    diff_parser.add_argument("original", help="original file (- for stdin)")
    diff_parser.add_argument("modified", help="modified file (- for stdin)")
    output_group = diff_parser.add_mutually_exclusive_group()
    output_group.add_argument("--format", choices=["text", "html", "json"], default=None,
                              help="output format (default: text)")
    diff_parser.add_argument("--width", type=int, default=None,
                             help=f"column width (default: from SQLDIFF_WIDTH env or {DEFAULT_WIDTH})")
    diff_parser.add_argument("--algorithm", choices=list(ALGORITHMS), default=None,
                             help=f"diff algorithm (default: from SQLDIFF_ALGORITHM env or {DEFAULT_ALGORITHM})")
    diff_parser.add_argument("--color", dest="color", action="store_true", default=None,
                             help="color removed and added rows")
    diff_parser.add_argument("--no-color", dest="color", action="store_false",
                             help="never color output")
    output_group.add_argument("--stat", action="store_true",
                              help="print only the addition/deletion counts")
    diff_parser.add_argument("--title", default=None,
                             help="heading for HTML output")
    diff_parser.set_defaults(func=cmd_diff)

    check_parser = subparsers.add_parser("check", help="compare ignoring whitespace")
    check_parser.add_argument("original", help="original file (- for stdin)")
    check_parser.add_argument("modified", help="modified file (- for stdin)")
    check_parser.set_defaults(func=cmd_check)

    table_parser = subparsers.add_parser("table", help="compare a file of statement pairs")
    table_parser.add_argument("file", help="JSON array of {id, name, original, modified}")
    table_parser.add_argument("--format", choices=["text", "json"], default="text",
                              help="output format (default: text)")
    table_parser.set_defaults(func=cmd_table)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the sqldiff command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return args.func(args)
    except (DiffError, OSError, UnicodeDecodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR
