"""Run compression for ascending position lists."""
from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import numpy as np

Run = Tuple[int, int]


def compress_runs(positions: Sequence[int]) -> List[Run]:
    """Collapse ascending, duplicate-free positions into maximal runs.

    Args:
        positions: strictly increasing integer positions.

    Returns:
        list of inclusive ``(start, end)`` pairs covering exactly ``positions``.
    """
    if len(positions) == 0:
        return []
    arr = np.asarray(positions, dtype=np.int64)
    # a run ends wherever the next position is not the successor
    breaks = np.flatnonzero(np.diff(arr) != 1)
    starts = np.concatenate(([0], breaks + 1))
    ends = np.concatenate((breaks, [len(arr) - 1]))
    return [(int(arr[s]), int(arr[e])) for s, e in zip(starts, ends)]


def format_run(run: Run) -> str:
    start, end = run
    if start == end:
        return f"{start}"
    return f"{start}-{end}"


def format_runs(runs: Iterable[Run]) -> str:
    """Render runs as a comma separated run list, e.g. ``0-1,3-4``."""
    return ",".join(format_run(r) for r in runs)
