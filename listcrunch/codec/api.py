"""Public entry points of the codec."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Hashable, Iterable, List, Optional

from listcrunch.codec.crunch import crunch
from listcrunch.codec.errors import UncrunchError
from listcrunch.codec.uncrunch import uncrunch
from listcrunch.config.loader import DEFAULT_CONFIG, CodecConfig, load_config

__all__ = ["Codec", "UncrunchError", "crunch", "decode", "encode", "uncrunch"]

encode = crunch
decode = uncrunch


@dataclass
class Codec:
    """``crunch``/``uncrunch`` bound to one :class:`CodecConfig`."""
    config: CodecConfig = field(default_factory=CodecConfig)

    @classmethod
    def from_config(cls, path: Optional[str | Path] = None) -> "Codec":
        """Build a codec from a YAML file.

        Falls back to ``$LISTCRUNCH_CONFIG`` and then the packaged default.
        """
        if path is None:
            path = os.getenv("LISTCRUNCH_CONFIG", str(DEFAULT_CONFIG))
        return cls(CodecConfig.from_dict(load_config(path)))

    def crunch(self, items: Iterable[Hashable], render: Callable[[Hashable], str] = str) -> str:
        return crunch(items, render=render, escape=self.config.escape)

    def uncrunch(self, text: str) -> List[str]:
        return uncrunch(text, escape=self.config.escape, validate=self.config.validate)
