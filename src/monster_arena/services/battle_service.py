"""Battle service: turn resolution and the match loop."""
from __future__ import annotations

import logging
from typing import List, Tuple

from monster_arena.core.rng import RNG
from monster_arena.domain.battle_models import CombatantView, MatchState, MatchView, RosterView
from monster_arena.domain.combatant import Combatant
from monster_arena.domain.events import (
    BattleEvent,
    MatchResolvedEvent,
    MatchStartedEvent,
    TurnOrderDecidedEvent,
    TurnStartedEvent,
)
from monster_arena.domain.roster import Roster
from monster_arena.services.factories import make_instance_id

DEFAULT_MAX_TURNS = 100

logger = logging.getLogger(__name__)


class BattleService:
    """Deterministic (given its RNG) orchestrator for one-on-one roster matches."""

    def __init__(self, *, max_turns: int = DEFAULT_MAX_TURNS) -> None:
        if max_turns < 1:
            raise ValueError("max_turns must be at least 1.")
        self._max_turns = max_turns

    @property
    def max_turns(self) -> int:
        return self._max_turns

    # -----------------------
    # Match Lifecycle
    # -----------------------
    def start_match(self, first: Roster, second: Roster, rng: RNG) -> tuple[MatchState, List[BattleEvent]]:
        """Pair two rosters into a new match."""
        if first is second:
            raise ValueError("A roster cannot fight itself.")
        match_state = MatchState(match_id=make_instance_id("match", rng), first=first, second=second)
        events: List[BattleEvent] = [
            MatchStartedEvent(match_id=match_state.match_id, first_team=first.name, second_team=second.name)
        ]
        maybe_resolved = self._update_outcome(match_state)
        if maybe_resolved:
            events.append(maybe_resolved)
        return match_state, events

    def play_turn(self, match_state: MatchState, rng: RNG) -> List[BattleEvent]:
        """Play one turn between the active combatants and refresh both rosters."""
        if match_state.is_over:
            raise ValueError("Match is already over.")

        match_state.turn += 1
        first = match_state.first.get_active()
        second = match_state.second.get_active()
        events: List[BattleEvent] = [
            TurnStartedEvent(
                turn=match_state.turn,
                first_team=match_state.first.name,
                first_id=first.instance_id,
                first_name=first.name,
                first_kind=first.kind,
                first_hp=first.stats.hp,
                second_team=match_state.second.name,
                second_id=second.instance_id,
                second_name=second.name,
                second_kind=second.kind,
                second_hp=second.stats.hp,
            )
        ]
        events.extend(self.resolve_turn(first, second, rng))
        # Both sides refresh: reflected damage can fell the side that did not swing last.
        events.extend(match_state.first.update_active())
        events.extend(match_state.second.update_active())

        maybe_resolved = self._update_outcome(match_state)
        if maybe_resolved:
            events.append(maybe_resolved)
        return events

    def run_match(self, first: Roster, second: Roster, rng: RNG) -> tuple[MatchState, List[BattleEvent]]:
        """Play turns until a roster falls or the turn cap is reached."""
        match_state, events = self.start_match(first, second, rng)
        while not match_state.is_over:
            events.extend(self.play_turn(match_state, rng))
        return match_state, events

    def get_match_view(self, match_state: MatchState) -> MatchView:
        """Return structured information for rendering."""
        return MatchView(
            match_id=match_state.match_id,
            turn=match_state.turn,
            first=self._to_roster_view(match_state.first),
            second=self._to_roster_view(match_state.second),
            is_over=match_state.is_over,
            outcome=match_state.outcome,
            winner=match_state.winner,
        )

    # -----------------------
    # Turn Resolution
    # -----------------------
    def decide_order(self, first: Combatant, second: Combatant, rng: RNG) -> Tuple[Combatant, Combatant, bool]:
        """Return (leader, follower, randomized); speed ties are a fair coin flip."""
        if first.stats.speed > second.stats.speed:
            return first, second, False
        if second.stats.speed > first.stats.speed:
            return second, first, False
        if rng.coin_flip():
            return first, second, True
        return second, first, True

    def resolve_turn(self, first: Combatant, second: Combatant, rng: RNG) -> List[BattleEvent]:
        """Leader attacks and ends its turn; the follower does the same only if still alive."""
        leader, follower, randomized = self.decide_order(first, second, rng)
        events: List[BattleEvent] = [
            TurnOrderDecidedEvent(
                leader_id=leader.instance_id,
                leader_name=leader.name,
                follower_id=follower.instance_id,
                follower_name=follower.name,
                randomized=randomized,
            )
        ]
        events.extend(leader.attack(follower))
        events.extend(leader.on_end_turn())
        if follower.is_alive:
            events.extend(follower.attack(leader))
            events.extend(follower.on_end_turn())
        logger.debug(
            "Turn resolved: %s (%d hp) vs %s (%d hp)",
            leader.name,
            leader.stats.hp,
            follower.name,
            follower.stats.hp,
        )
        return events

    # -----------------------
    # Helpers
    # -----------------------
    def _update_outcome(self, match_state: MatchState) -> MatchResolvedEvent | None:
        first_down = match_state.first.is_defeated
        second_down = match_state.second.is_defeated
        if first_down and second_down:
            match_state.outcome = "tie"
        elif second_down:
            match_state.outcome = "first"
        elif first_down:
            match_state.outcome = "second"
        elif match_state.turn >= self._max_turns:
            match_state.outcome = "timeout"
        else:
            return None

        match_state.is_over = True
        logger.info(
            "Match %s over after %d turns: %s (winner: %s)",
            match_state.match_id,
            match_state.turn,
            match_state.outcome,
            match_state.winner,
        )
        return MatchResolvedEvent(outcome=match_state.outcome, winner=match_state.winner, turns=match_state.turn)

    def _to_roster_view(self, roster: Roster) -> RosterView:
        active_id = None if roster.is_defeated else roster.get_active().instance_id
        return RosterView(
            team=roster.name,
            members=[
                CombatantView(
                    instance_id=member.instance_id,
                    name=member.name,
                    kind=member.kind,
                    team=roster.name,
                    hp=member.stats.hp,
                    max_hp=member.stats.max_hp,
                    is_alive=member.is_alive,
                    is_active=member.instance_id == active_id,
                )
                for member in roster.members
            ],
            is_defeated=roster.is_defeated,
        )
