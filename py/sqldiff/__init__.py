"""sqldiff library for line diffs and side-by-side alignment of SQL statements."""

from .diff import compute_diff, has_differences
from .align import align, side_by_side
from .render import render_text, render_html, render_json, format_stats
from .table import parse_comparisons, load_comparisons, compare, build_table, format_table
from .utils import (
    split_lines, normalize_whitespace, is_equivalent, get_stats,
    original_lines, modified_lines,
)
from .types import (
    SegmentKind, RowStatus, Algorithm, ComparisonStatus,
    DiffSegment, AlignedRow, AlignmentResult, DiffStats, DiffOptions,
    Comparison, ComparisonRow,
    DiffError, ParseError,
)

__all__ = [
    # Diff functions
    "compute_diff", "has_differences",
    # Alignment functions
    "align", "side_by_side",
    # Rendering functions
    "render_text", "render_html", "render_json", "format_stats",
    # Comparison table functions
    "parse_comparisons", "load_comparisons", "compare", "build_table", "format_table",
    # Utility functions
    "split_lines", "normalize_whitespace", "is_equivalent", "get_stats",
    "original_lines", "modified_lines",
    # Types
    "SegmentKind", "RowStatus", "Algorithm", "ComparisonStatus",
    "DiffSegment", "AlignedRow", "AlignmentResult", "DiffStats", "DiffOptions",
    "Comparison", "ComparisonRow",
    # Errors
    "DiffError", "ParseError",
]
