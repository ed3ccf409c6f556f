"""Batch comparison of named statement pairs."""

import json
from pathlib import Path
from typing import Iterable, List, Union
from .types import Comparison, ComparisonRow, ParseError
from .diff import compute_diff
from .utils import get_stats, is_equivalent


REQUIRED_FIELDS = ("name", "original", "modified")


def parse_comparisons(content: str) -> List[Comparison]:
    """Parse a JSON array of comparison objects.

    Each object needs "name", "original" and "modified" strings; "id" is
    optional and defaults to the 1-based position in the array.

    Raises:
        ParseError: if the content is not valid JSON or an entry is malformed
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid comparisons JSON: {e}") from e

    if not isinstance(data, list):
        raise ParseError("Comparisons file must contain a JSON array")

    comparisons = []
    for position, entry in enumerate(data, start=1):
        if not isinstance(entry, dict):
            raise ParseError(f"Entry {position} is not an object")

        for key in REQUIRED_FIELDS:
            if not isinstance(entry.get(key), str):
                raise ParseError(f"Entry {position} is missing string field {key!r}")

        entry_id = entry.get("id", position)
        if not isinstance(entry_id, int) or isinstance(entry_id, bool):
            raise ParseError(f"Entry {position} has a non-integer id")

        comparisons.append(Comparison(
            id=entry_id,
            name=entry["name"],
            original=entry["original"],
            modified=entry["modified"],
        ))

    return comparisons


def load_comparisons(path: Union[str, Path]) -> List[Comparison]:
    """Read and parse a comparisons file."""
    return parse_comparisons(Path(path).read_text(encoding="utf-8-sig"))


def compare(comparison: Comparison) -> ComparisonRow:
    """Classify one pair as a whitespace-insensitive match or a difference."""
    segments = compute_diff(comparison.original, comparison.modified)
    stats = get_stats(segments)
    return ComparisonRow(
        comparison=comparison,
        status="match" if is_equivalent(comparison.original, comparison.modified) else "differs",
        has_differences=stats.additions > 0 or stats.deletions > 0,
        stats=stats,
    )


def build_table(comparisons: Iterable[Comparison]) -> List[ComparisonRow]:
    return [compare(c) for c in comparisons]


def format_table(rows: List[ComparisonRow]) -> str:
    """Format comparison rows as a fixed-width text table."""
    headers = ("ID", "Name", "Status", "+", "-")
    body = [
        (
            f"#{row.comparison.id}",
            row.comparison.name,
            row.status,
            str(row.stats.additions),
            str(row.stats.deletions),
        )
        for row in rows
    ]

    widths = [len(h) for h in headers]
    for cells in body:
        widths = [max(w, len(c)) for w, c in zip(widths, cells)]

    def fmt(cells) -> str:
        return "  ".join(c.ljust(w) for c, w in zip(cells, widths)).rstrip()

    lines = [fmt(headers), fmt(["-" * w for w in widths])]
    lines.extend(fmt(cells) for cells in body)
    return "\n".join(lines)
