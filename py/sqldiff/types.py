"""Type definitions for the sqldiff library."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Tuple


# Segment and row tags
SegmentKind = Literal["unchanged", "added", "removed"]
RowStatus = Literal["unchanged", "added", "removed", "empty"]
Algorithm = Literal["lcs", "myers"]
ComparisonStatus = Literal["match", "differs"]

ALGORITHMS = ("lcs", "myers")


@dataclass(frozen=True)
class DiffSegment:
    """A maximal run of lines sharing one diff classification."""
    kind: SegmentKind
    lines: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {"kind": self.kind, "lines": list(self.lines)}


@dataclass(frozen=True)
class AlignedRow:
    """One visual line of a side-by-side column.

    Placeholder rows have status "empty" and no text on either side.
    """
    left_line: Optional[str] = None
    right_line: Optional[str] = None
    status: RowStatus = "empty"

    def to_dict(self) -> dict:
        return {
            "left_line": self.left_line,
            "right_line": self.right_line,
            "status": self.status,
        }


@dataclass(frozen=True)
class AlignmentResult:
    """Two parallel row sequences; index i in each is rendered on the same line."""
    left_rows: Tuple[AlignedRow, ...] = ()
    right_rows: Tuple[AlignedRow, ...] = ()

    def __len__(self) -> int:
        return len(self.left_rows)

    def pairs(self) -> List[Tuple[AlignedRow, AlignedRow]]:
        return list(zip(self.left_rows, self.right_rows))

    def to_dict(self) -> dict:
        return {
            "left_rows": [r.to_dict() for r in self.left_rows],
            "right_rows": [r.to_dict() for r in self.right_rows],
        }


@dataclass(frozen=True)
class DiffStats:
    """Line statistics about a diff."""
    additions: int = 0
    deletions: int = 0
    changes: int = 0  # paired delete+insert lines

    def to_dict(self) -> dict:
        return {
            "additions": self.additions,
            "deletions": self.deletions,
            "changes": self.changes,
        }


@dataclass
class DiffOptions:
    """Options for diff operations."""
    algorithm: Algorithm = "lcs"

    @classmethod
    def from_dict(cls, options: Optional[Dict[str, Any]]) -> "DiffOptions":
        opts = cls()
        if options:
            if "algorithm" in options:
                opts.algorithm = options["algorithm"]
        return opts


# Comparison table types
@dataclass(frozen=True)
class Comparison:
    """A named pair of statements, source dialect and target dialect."""
    id: int
    name: str
    original: str
    modified: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "original": self.original,
            "modified": self.modified,
        }


@dataclass(frozen=True)
class ComparisonRow:
    """Outcome of comparing one statement pair."""
    comparison: Comparison
    status: ComparisonStatus
    has_differences: bool
    stats: DiffStats = field(default_factory=DiffStats)

    def to_dict(self) -> dict:
        return {
            "id": self.comparison.id,
            "name": self.comparison.name,
            "status": self.status,
            "has_differences": self.has_differences,
            "stats": self.stats.to_dict(),
        }


# Errors
class DiffError(Exception):
    """Base error for sqldiff operations."""
    pass


class ParseError(DiffError):
    """Error parsing a comparisons file."""
    pass
