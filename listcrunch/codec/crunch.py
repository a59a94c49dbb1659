"""Encode a sequence into the crunched ``value:runs;value:runs`` format."""
from __future__ import annotations

import logging
from typing import Callable, Hashable, Iterable, List

from listcrunch.codec.escaping import escape_value
from listcrunch.codec.indexer import build_index
from listcrunch.codec.runs import compress_runs, format_runs

logger = logging.getLogger(__name__)


def crunch(
    items: Iterable[Hashable],
    render: Callable[[Hashable], str] = str,
    escape: bool = False,
) -> str:
    """Compress ``items`` into a crunched string.

    Args:
        items: ordered, hashable items. Equal items share one segment.
        render: turns an item into the text stored in its segment.
        escape: backslash-escape delimiter characters inside values.

    Returns:
        ``""`` for empty input, otherwise segments ordered by the first
        occurrence of their value, e.g. ``crunch([1, 2, 1]) == "1:0,2;2:1"``.
    """
    groups = build_index(items)
    if not groups:
        return ""

    parts: List[str] = []
    for group in groups:
        text = render(group.value)
        if escape:
            text = escape_value(text)
        parts.append(f"{text}:{format_runs(compress_runs(group.positions))}")

    logger.debug("crunched %d distinct values into %d segments", len(groups), len(parts))
    return ";".join(parts)
