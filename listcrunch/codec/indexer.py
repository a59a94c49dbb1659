"""Group input positions by distinct value."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Generic, Hashable, Iterable, List, Tuple, TypeVar

T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True)
class ValueGroup(Generic[T]):
    """A distinct value and the ascending positions where it occurs."""
    value: T
    positions: Tuple[int, ...]

    @property
    def first(self) -> int:
        return self.positions[0]


def build_index(items: Iterable[T]) -> List[ValueGroup[T]]:
    """Index every appearance of each item.

    Groups come back ordered by the position of their first occurrence, so
    the segment order of a crunched string never depends on hashing.
    """
    index: Dict[T, List[int]] = {}
    for i, item in enumerate(items):
        index.setdefault(item, []).append(i)
    # dicts keep insertion order, which is first-occurrence order here
    return [ValueGroup(value, tuple(nums)) for value, nums in index.items()]
