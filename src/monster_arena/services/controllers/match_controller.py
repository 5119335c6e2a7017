"""UI-agnostic match controller that separates state progression from rendering."""
from __future__ import annotations

from typing import List

from monster_arena.core.rng import RNG
from monster_arena.domain.battle_models import MatchState, MatchView
from monster_arena.domain.events import BattleEvent
from monster_arena.domain.roster import Roster
from monster_arena.services.battle_service import BattleService


class MatchController:
    """
    UI-agnostic controller for turn-by-turn match progression.

    This controller wraps BattleService and exposes only structured state and events.
    It does NOT handle rendering, formatting, or input prompts.

    Responsibilities:
    - Start a match from two rosters
    - Advance exactly one turn per call and return the events
    - Expose views for lineup and status panels

    Non-responsibilities (handled by presentation layer):
    - Rendering events or lineups
    - Pausing between turns
    """

    def __init__(self, battle_service: BattleService, rng: RNG) -> None:
        self._service = battle_service
        self._rng = rng
        self._state: MatchState | None = None

    @property
    def state(self) -> MatchState:
        if self._state is None:
            raise ValueError("No match has been started.")
        return self._state

    def start(self, first: Roster, second: Roster) -> List[BattleEvent]:
        self._state, events = self._service.start_match(first, second, self._rng)
        return events

    def is_over(self) -> bool:
        return self.state.is_over

    def advance(self) -> List[BattleEvent]:
        """Play the next turn; an already finished match yields no events."""
        if self.state.is_over:
            return []
        return self._service.play_turn(self.state, self._rng)

    def get_match_view(self) -> MatchView:
        """Return structured view of the current match state for rendering."""
        return self._service.get_match_view(self.state)
