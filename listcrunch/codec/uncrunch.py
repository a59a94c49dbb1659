"""Decode crunched strings back into the rendered sequence."""
from __future__ import annotations

import logging
import re
from typing import List, Tuple

from listcrunch.codec.errors import UncrunchError
from listcrunch.codec.escaping import split_unescaped, unescape_value

logger = logging.getLogger(__name__)

# optional sign, ASCII digits only; int() alone would also accept
# whitespace, underscores and non-ASCII digits
_INTEGER = re.compile(r"[+-]?[0-9]+")

SEGMENT_ERROR = "Each ';'-delimited region must have exactly one ':'"
RANGE_ERROR = "Each page range (e.g. 3-5) must have exactly one '-'"
PARSE_ERROR = "Couldn't parse range"


def _parse_int(token: str) -> int:
    if _INTEGER.fullmatch(token) is None:
        raise UncrunchError(f"{PARSE_ERROR}: {token!r}")
    return int(token)


def _split(text: str, sep: str, escape: bool) -> List[str]:
    if escape:
        return split_unescaped(text, sep)
    return text.split(sep)


def _expand_runlist(runlist: str) -> List[int]:
    """Expand a run list such as ``0-1,3`` into ``[0, 1, 3]``."""
    positions: List[int] = []
    for token in runlist.split(","):
        if "-" in token:
            bounds = token.split("-")
            if len(bounds) != 2:
                raise UncrunchError(f"{RANGE_ERROR}: {token!r}")
            start, end = (_parse_int(b) for b in bounds)
            positions.extend(range(start, end + 1))
        else:
            positions.append(_parse_int(token))
    return positions


def _check_coverage(results: List[Tuple[int, str]]) -> None:
    for expected, (position, _) in enumerate(results):
        if position != expected:
            raise UncrunchError(
                f"Positions must cover 0..{len(results) - 1} exactly once, "
                f"found {position} at slot {expected}"
            )


def uncrunch(text: str, escape: bool = False, validate: bool = False) -> List[str]:
    """Turn a crunched string back into the list of rendered items.

    Args:
        text: crunched string, e.g. ``"50:0-1,3-4;3:2,5"``.
        escape: honour backslash escapes written by ``crunch(..., escape=True)``.
        validate: require the positions to be exactly ``0..n-1``. Off by
            default, in which case overlapping or sparse positions are
            returned as they sort.

    Returns:
        values ordered by position. Blank input gives ``[]``.

    Raises:
        UncrunchError: if a segment or run token is malformed. Nothing is
            returned on error.
    """
    if not text.strip():
        return []

    results: List[Tuple[int, str]] = []
    for part in _split(text, ";", escape):
        subparts = _split(part, ":", escape)
        if len(subparts) != 2:
            raise UncrunchError(f"{SEGMENT_ERROR}: {part!r}")
        value, runlist = subparts
        if escape:
            value = unescape_value(value)
        results.extend((position, value) for position in _expand_runlist(runlist))

    # sorted() is stable, so duplicate positions keep segment order
    results = sorted(results, key=lambda pair: pair[0])
    if validate:
        _check_coverage(results)
    logger.debug("uncrunched %d values", len(results))
    return [value for _, value in results]
