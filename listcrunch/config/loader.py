from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

_THIS_FILE = Path(__file__).resolve()
CONFIG_DIR = _THIS_FILE.parents[1] / "configs"
DEFAULT_CONFIG = CONFIG_DIR / "default.yaml"


@dataclass(frozen=True)
class CodecConfig:
    """Options shared by ``crunch`` and ``uncrunch``.

    Parameters
    ----------
    escape: bool
        Backslash-escape ``\\``, ``:``, ``;`` and ``,`` inside values.
    validate: bool
        Reject decoded positions that are not exactly ``0..n-1``.
    """
    escape: bool = False
    validate: bool = False

    @classmethod
    def from_dict(cls, cfg: Optional[Dict[str, Any]]) -> "CodecConfig":
        section = (cfg or {}).get("codec") or {}
        known = {f.name for f in fields(cls)}
        unknown = set(section) - known
        if unknown:
            raise KeyError(f"unknown codec option(s): {', '.join(sorted(unknown))}")
        for name, value in section.items():
            if not isinstance(value, bool):
                raise TypeError(f"codec option '{name}' must be true or false, got {value!r}")
        return cls(**section)


def load_config(path: str | Path) -> dict:
    p = Path(path)
    candidates = [p]
    if not p.is_absolute():
        # try relative to current working directory
        candidates.append(Path.cwd() / p)
        # try the packaged configs directory
        candidates.append(CONFIG_DIR / p.name)
    for c in candidates:
        if c.exists():
            logger.debug("loading config from %s", c)
            with open(c, "r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
    raise FileNotFoundError(
        f"Config file not found. Tried: {', '.join(str(c) for c in candidates)}"
    )
