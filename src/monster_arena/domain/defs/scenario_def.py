"""Scenario definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class LineupDef:
    """One side of a scenario.

    A lineup lists explicit creature kinds, or asks for ``random_count`` kinds
    drawn uniformly from every known creature definition.
    """

    team_name: str
    kinds: Tuple[str, ...] = ()
    random_count: int = 0

    @property
    def size(self) -> int:
        return len(self.kinds) if self.kinds else self.random_count


@dataclass(frozen=True, slots=True)
class ScenarioDef:
    """A scripted battle between two lineups."""

    id: str
    name: str
    first: LineupDef
    second: LineupDef
