from __future__ import annotations


class UncrunchError(ValueError):
    """Raised when a crunched string does not follow the segment grammar."""
