"""Battle domain models."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from monster_arena.core.types import MatchOutcome
from monster_arena.domain.roster import Roster


@dataclass(slots=True)
class MatchState:
    """Tracks the state of an ongoing match between two rosters."""

    match_id: str
    first: Roster
    second: Roster
    turn: int = 0
    is_over: bool = False
    outcome: MatchOutcome | None = None

    @property
    def winner(self) -> str | None:
        if self.outcome == "first":
            return self.first.name
        if self.outcome == "second":
            return self.second.name
        return None


@dataclass(slots=True)
class CombatantView:
    """Read-only snapshot of a combatant for rendering."""

    instance_id: str
    name: str
    kind: str
    team: str
    hp: int
    max_hp: int
    is_alive: bool
    is_active: bool


@dataclass(slots=True)
class RosterView:
    team: str
    members: List[CombatantView]
    is_defeated: bool


@dataclass(slots=True)
class MatchView:
    """Presentation view for the current match state."""

    match_id: str
    turn: int
    first: RosterView
    second: RosterView
    is_over: bool
    outcome: MatchOutcome | None
    winner: str | None
