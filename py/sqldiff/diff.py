"""Line diff engine for the sqldiff library."""

from typing import Any, Dict, List, Optional, Tuple, Union
from .types import ALGORITHMS, DiffError, DiffOptions, DiffSegment, SegmentKind
from .utils import split_lines


Match = Tuple[int, int]


def _compute_lcs(old_lines: List[str], new_lines: List[str]) -> List[Match]:
    """Compute the Longest Common Subsequence using dynamic programming.

    Returns list of (old_index, new_index) pairs for matching lines.
    """
    m, n = len(old_lines), len(new_lines)

    if m == 0 or n == 0:
        return []

    # dp[i][j] = length of LCS of old_lines[:i] and new_lines[:j]
    dp = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        old_line = old_lines[i - 1]
        row, prev = dp[i], dp[i - 1]
        for j in range(1, n + 1):
            if old_line == new_lines[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])

    # Backtrack to find the LCS
    lcs = []
    i, j = m, n
    while i > 0 and j > 0:
        if old_lines[i - 1] == new_lines[j - 1]:
            lcs.append((i - 1, j - 1))
            i -= 1
            j -= 1
        elif dp[i - 1][j] > dp[i][j - 1]:
            i -= 1
        else:
            j -= 1

    lcs.reverse()
    return lcs


def _shortest_edit(old_lines: List[str], new_lines: List[str]) -> List[Dict[int, int]]:
    """Run the forward pass of Myers' O(ND) algorithm.

    Returns a snapshot of the furthest-reaching x per diagonal k for every
    edit distance d, which the backtrack walks in reverse.
    """
    n, m = len(old_lines), len(new_lines)
    v: Dict[int, int] = {1: 0}
    trace: List[Dict[int, int]] = []

    for d in range(n + m + 1):
        trace.append(v.copy())

        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and v.get(k - 1, 0) < v.get(k + 1, 0)):
                x = v.get(k + 1, 0)
            else:
                x = v.get(k - 1, 0) + 1

            y = x - k

            while x < n and y < m and old_lines[x] == new_lines[y]:
                x += 1
                y += 1

            v[k] = x

            if x >= n and y >= m:
                return trace

    return trace


def _compute_myers(old_lines: List[str], new_lines: List[str]) -> List[Match]:
    """Compute matching line pairs along a Myers shortest edit script."""
    if not old_lines or not new_lines:
        return []

    trace = _shortest_edit(old_lines, new_lines)
    matches = []
    x, y = len(old_lines), len(new_lines)

    for d in range(len(trace) - 1, -1, -1):
        v = trace[d]
        k = x - y

        if k == -d or (k != d and v.get(k - 1, 0) < v.get(k + 1, 0)):
            prev_k = k + 1
        else:
            prev_k = k - 1

        prev_x = v.get(prev_k, 0)
        prev_y = prev_x - prev_k

        # Diagonal moves are matches
        while x > prev_x and y > prev_y:
            matches.append((x - 1, y - 1))
            x -= 1
            y -= 1

        x, y = prev_x, prev_y

    matches.reverse()
    return matches


def _match_lines(old_lines: List[str], new_lines: List[str], algorithm: str) -> List[Match]:
    """Match common prefix and suffix directly, then align the middle."""
    prefix = 0
    limit = min(len(old_lines), len(new_lines))
    while prefix < limit and old_lines[prefix] == new_lines[prefix]:
        prefix += 1

    suffix = 0
    limit -= prefix
    while suffix < limit and old_lines[-1 - suffix] == new_lines[-1 - suffix]:
        suffix += 1

    old_mid = old_lines[prefix:len(old_lines) - suffix]
    new_mid = new_lines[prefix:len(new_lines) - suffix]

    if algorithm == "myers":
        middle = _compute_myers(old_mid, new_mid)
    else:
        middle = _compute_lcs(old_mid, new_mid)

    matches = [(i, i) for i in range(prefix)]
    matches.extend((i + prefix, j + prefix) for i, j in middle)
    old_tail = len(old_lines) - suffix
    new_tail = len(new_lines) - suffix
    matches.extend((old_tail + i, new_tail + i) for i in range(suffix))
    return matches


def _build_segments(old_lines: List[str], new_lines: List[str],
                    matches: List[Match]) -> List[DiffSegment]:
    """Build maximal segments from matched line pairs.

    Unmatched original lines before a match are emitted before unmatched
    modified lines, so a changed region always reads removed-then-added.
    """
    runs: List[Tuple[SegmentKind, List[str]]] = []

    def emit(kind: SegmentKind, line: str) -> None:
        if runs and runs[-1][0] == kind:
            runs[-1][1].append(line)
        else:
            runs.append((kind, [line]))

    old_idx = 0
    new_idx = 0

    for match_old, match_new in matches:
        while old_idx < match_old:
            emit("removed", old_lines[old_idx])
            old_idx += 1

        while new_idx < match_new:
            emit("added", new_lines[new_idx])
            new_idx += 1

        emit("unchanged", old_lines[old_idx])
        old_idx += 1
        new_idx += 1

    # Remaining deletions, then remaining insertions
    while old_idx < len(old_lines):
        emit("removed", old_lines[old_idx])
        old_idx += 1

    while new_idx < len(new_lines):
        emit("added", new_lines[new_idx])
        new_idx += 1

    return [DiffSegment(kind=kind, lines=tuple(lines)) for kind, lines in runs]


def compute_diff(original: str, modified: str,
                 options: Optional[Union[DiffOptions, Dict[str, Any]]] = None) -> List[DiffSegment]:
    """Compute a line-by-line diff as a list of maximal segments.

    Args:
        original: Original text (left column)
        modified: Modified text (right column)
        options: DiffOptions, or a dict with:
            - algorithm: "lcs" (default) or "myers"

    Returns:
        Segments tagged "unchanged", "added" or "removed", in edit order.
        Empty only when both texts are empty.

    Raises:
        DiffError: if the algorithm name is unknown
    """
    if isinstance(options, DiffOptions):
        opts = options
    else:
        opts = DiffOptions.from_dict(options)

    if opts.algorithm not in ALGORITHMS:
        raise DiffError(f"Unknown diff algorithm: {opts.algorithm!r}")

    old_lines = split_lines(original)
    new_lines = split_lines(modified)

    matches = _match_lines(old_lines, new_lines, opts.algorithm)
    return _build_segments(old_lines, new_lines, matches)


def has_differences(original: str, modified: str) -> bool:
    """Check whether the line diff contains any added or removed lines."""
    return any(s.kind != "unchanged" for s in compute_diff(original, modified))
