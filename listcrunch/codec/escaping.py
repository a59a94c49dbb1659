r"""Backslash escaping for values that contain format delimiters.

The plain format has no escaping, so a value such as ``"a:b"`` produces a
string that cannot be parsed back. With escaping enabled on both sides,
``\``, ``:``, ``;`` and ``,`` inside values are written as ``\\``,
``\:``, ``\;`` and ``\,``.
"""
from __future__ import annotations

from typing import List

from listcrunch.codec.errors import UncrunchError

ESCAPE = "\\"
SPECIAL = frozenset(ESCAPE + ":;,")


def escape_value(text: str) -> str:
    return "".join(ESCAPE + ch if ch in SPECIAL else ch for ch in text)


def unescape_value(text: str) -> str:
    out: List[str] = []
    chars = iter(text)
    for ch in chars:
        if ch != ESCAPE:
            out.append(ch)
            continue
        nxt = next(chars, None)
        if nxt is None:
            raise UncrunchError(f"Dangling escape at end of value: {text!r}")
        if nxt not in SPECIAL:
            raise UncrunchError(f"Unknown escape '\\{nxt}' in value: {text!r}")
        out.append(nxt)
    return "".join(out)


def split_unescaped(text: str, sep: str) -> List[str]:
    """Split ``text`` on ``sep`` wherever it is not escaped.

    Escape sequences are kept in the pieces; run :func:`unescape_value` on
    them afterwards.
    """
    pieces: List[str] = []
    current: List[str] = []
    escaped = False
    for ch in text:
        if escaped:
            current.append(ch)
            escaped = False
        elif ch == ESCAPE:
            current.append(ch)
            escaped = True
        elif ch == sep:
            pieces.append("".join(current))
            current = []
        else:
            current.append(ch)
    pieces.append("".join(current))
    return pieces
