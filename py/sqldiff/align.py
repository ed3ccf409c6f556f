"""Side-by-side alignment of diff segments."""

from typing import Any, Dict, Iterable, List, Optional, Union
from .types import AlignedRow, AlignmentResult, DiffError, DiffOptions, DiffSegment
from .diff import compute_diff


PLACEHOLDER = AlignedRow(left_line=None, right_line=None, status="empty")


def align(segments: Iterable[DiffSegment]) -> AlignmentResult:
    """Project a segment sequence onto two parallel columns.

    Unchanged lines appear on both sides. A removed run fills the left
    column and gets placeholders on the right; an added run is the mirror
    image. Runs are never compacted against each other, so a removed run
    followed by an added run occupies two separate row ranges.

    Raises:
        DiffError: if a segment has an unknown kind
    """
    left: List[AlignedRow] = []
    right: List[AlignedRow] = []

    for segment in segments:
        if segment.kind == "unchanged":
            for line in segment.lines:
                row = AlignedRow(left_line=line, right_line=line, status="unchanged")
                left.append(row)
                right.append(row)
        elif segment.kind == "removed":
            for line in segment.lines:
                left.append(AlignedRow(left_line=line, status="removed"))
                right.append(PLACEHOLDER)
        elif segment.kind == "added":
            for line in segment.lines:
                left.append(PLACEHOLDER)
                right.append(AlignedRow(right_line=line, status="added"))
        else:
            raise DiffError(f"Unknown segment kind: {segment.kind!r}")

    return AlignmentResult(left_rows=tuple(left), right_rows=tuple(right))


def side_by_side(original: str, modified: str,
                 options: Optional[Union[DiffOptions, Dict[str, Any]]] = None) -> AlignmentResult:
    """Diff two texts and align the result in one step."""
    return align(compute_diff(original, modified, options))
