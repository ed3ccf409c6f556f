"""Renderers that turn an alignment into terminal text, HTML or JSON."""

import html
import json
from typing import List, Optional, Tuple
from .types import AlignedRow, AlignmentResult, DiffStats


MARKERS = {
    "unchanged": " ",
    "removed": "-",
    "added": "+",
    "empty": " ",
}

RED = "\033[31m"
GREEN = "\033[32m"
RESET = "\033[0m"

COLORS = {
    "removed": RED,
    "added": GREEN,
}

NUMBER_WIDTH = 4


def _fit(text: str, width: int) -> str:
    """Pad or truncate text to exactly width columns."""
    text = text.expandtabs(4)
    if len(text) > width:
        text = text[:max(width - 1, 0)] + ">"
    return text.ljust(width)


def _cell(row: AlignedRow, line: Optional[str], number: Optional[int],
          width: int, color: bool) -> str:
    num = str(number) if number is not None else ""
    cell = f"{num:>{NUMBER_WIDTH}} {MARKERS[row.status]} {_fit(line or '', width)}"
    if color and row.status in COLORS:
        cell = f"{COLORS[row.status]}{cell}{RESET}"
    return cell


def render_text(result: AlignmentResult, width: int = 60, color: bool = False,
                labels: Optional[Tuple[str, str]] = None) -> str:
    """Render an alignment as two fixed-width columns.

    Each output line shows the left row and the right row of one index,
    with per-side line numbers that skip placeholder rows.
    """
    out: List[str] = []
    gutter = NUMBER_WIDTH + 3

    if labels:
        left_label, right_label = labels
        out.append(f"{_fit(left_label, gutter + width)} | {right_label}".rstrip())
        out.append(f"{'-' * (gutter + width)}-+-{'-' * (gutter + width)}")

    left_no = 0
    right_no = 0

    for left, right in result.pairs():
        left_num = None
        if left.left_line is not None:
            left_no += 1
            left_num = left_no

        right_num = None
        if right.right_line is not None:
            right_no += 1
            right_num = right_no

        left_cell = _cell(left, left.left_line, left_num, width, color)
        right_cell = _cell(right, right.right_line, right_num, width, color)
        out.append(f"{left_cell} | {right_cell.rstrip()}")

    return "\n".join(out)


def _html_column(rows: Tuple[AlignedRow, ...], side: str) -> List[str]:
    cells = []
    for row in rows:
        line = row.left_line if side == "left" else row.right_line
        text = html.escape(line) if line else "&nbsp;"
        cells.append(f'<td class="diff-line {row.status}">{text}</td>')
    return cells


def render_html(result: AlignmentResult, title: Optional[str] = None,
                labels: Tuple[str, str] = ("Original", "Modified")) -> str:
    """Render an alignment as an HTML table.

    Cells carry the classes "diff-line" plus the row status, so a stylesheet
    can color removed, added, unchanged and empty rows.
    """
    parts = []
    if title:
        parts.append(f"<h2>{html.escape(title)}</h2>")

    parts.append('<table class="side-by-side">')
    parts.append(
        f"<thead><tr><th>{html.escape(labels[0])}</th>"
        f"<th>{html.escape(labels[1])}</th></tr></thead>"
    )
    parts.append("<tbody>")

    left_cells = _html_column(result.left_rows, "left")
    right_cells = _html_column(result.right_rows, "right")
    for left_cell, right_cell in zip(left_cells, right_cells):
        parts.append(f"<tr>{left_cell}{right_cell}</tr>")

    parts.append("</tbody>")
    parts.append("</table>")
    return "\n".join(parts)


def render_json(result: AlignmentResult, stats: Optional[DiffStats] = None) -> str:
    """Render an alignment (and optional stats) as indented JSON."""
    data = result.to_dict()
    if stats is not None:
        data["stats"] = stats.to_dict()
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_stats(stats: DiffStats) -> str:
    """Format stats as a one-line summary."""
    return f"{stats.additions} additions(+), {stats.deletions} deletions(-)"
