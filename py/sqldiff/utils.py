"""Utility functions for the sqldiff library."""

import re
from typing import Iterable, List
from .types import DiffSegment, DiffStats


# U+FEFF counts as whitespace, as a byte-order mark left in pasted text
_WHITESPACE_RUN = re.compile(r"[\s\ufeff]+")


def split_lines(content: str) -> List[str]:
    """Split content into lines on "\\n", without line endings.

    A single trailing newline does not start a new line, so "a\\n" and "a"
    both give ["a"]. The empty string has no lines; "\\n" is one blank line.
    """
    if not content:
        return []

    if content.endswith("\n"):
        content = content[:-1]

    return content.split("\n")


def normalize_whitespace(content: str) -> str:
    """Trim content and collapse every whitespace run into a single space."""
    return _WHITESPACE_RUN.sub(" ", content).strip(" ")


def is_equivalent(a: str, b: str) -> bool:
    """Check whether two texts are equal once formatting whitespace is ignored.

    This is deliberately coarser than compute_diff: it answers whether the
    texts differ at all, not where.
    """
    return normalize_whitespace(a) == normalize_whitespace(b)


def get_stats(segments: Iterable[DiffSegment]) -> DiffStats:
    """Count added and removed lines in a segment sequence."""
    additions = 0
    deletions = 0

    for segment in segments:
        if segment.kind == "added":
            additions += len(segment.lines)
        elif segment.kind == "removed":
            deletions += len(segment.lines)

    return DiffStats(additions=additions, deletions=deletions, changes=min(additions, deletions))


def original_lines(segments: Iterable[DiffSegment]) -> List[str]:
    """Lines of the original text, rebuilt from unchanged and removed segments."""
    return [line for s in segments if s.kind != "added" for line in s.lines]


def modified_lines(segments: Iterable[DiffSegment]) -> List[str]:
    """Lines of the modified text, rebuilt from unchanged and added segments."""
    return [line for s in segments if s.kind != "removed" for line in s.lines]
