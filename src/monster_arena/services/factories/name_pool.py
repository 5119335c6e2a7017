"""Shuffled pool of unique creature names drawn without replacement."""
from __future__ import annotations

from typing import Iterable, List

from monster_arena.core.rng import RNG
from monster_arena.services.errors import NamePoolExhaustedError


class NamePool:
    """Shuffles the given names once, then hands them out from the end."""

    def __init__(self, names: Iterable[str], rng: RNG) -> None:
        self._names: List[str] = list(names)
        rng.shuffle(self._names)

    @property
    def remaining(self) -> int:
        return len(self._names)

    def draw(self) -> str:
        if not self._names:
            raise NamePoolExhaustedError("Name pool is exhausted.")
        return self._names.pop()

    def __len__(self) -> int:
        return len(self._names)
