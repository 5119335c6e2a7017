"""Structured battle facts handed to renderers."""
from __future__ import annotations

from dataclasses import dataclass

from monster_arena.core.types import MatchOutcome


@dataclass(slots=True)
class BattleEvent:
    """Base battle event."""


@dataclass(slots=True)
class MatchStartedEvent(BattleEvent):
    match_id: str
    first_team: str
    second_team: str


@dataclass(slots=True)
class TurnStartedEvent(BattleEvent):
    turn: int
    first_team: str
    first_id: str
    first_name: str
    first_kind: str
    first_hp: int
    second_team: str
    second_id: str
    second_name: str
    second_kind: str
    second_hp: int


@dataclass(slots=True)
class TurnOrderDecidedEvent(BattleEvent):
    """Who acts first this turn; ``randomized`` is set for speed ties."""

    leader_id: str
    leader_name: str
    follower_id: str
    follower_name: str
    randomized: bool


@dataclass(slots=True)
class AttackResolvedEvent(BattleEvent):
    """One strike. ``reflected`` is None unless the defender retaliated."""

    attacker_id: str
    attacker_name: str
    attacker_kind: str
    attacker_team: str | None
    target_id: str
    target_name: str
    target_kind: str
    target_team: str | None
    attempted: int
    actual: int
    reflected: int | None
    target_hp: int
    attacker_hp: int


@dataclass(slots=True)
class RegeneratedEvent(BattleEvent):
    combatant_id: str
    combatant_name: str
    combatant_kind: str
    team: str | None
    amount: int
    hp: int
    capped: bool


@dataclass(slots=True)
class CombatantDefeatedEvent(BattleEvent):
    combatant_id: str
    combatant_name: str
    combatant_kind: str
    team: str | None


@dataclass(slots=True)
class ActiveCombatantChangedEvent(BattleEvent):
    team: str
    combatant_id: str
    combatant_name: str
    combatant_kind: str


@dataclass(slots=True)
class RosterDefeatedEvent(BattleEvent):
    team: str


@dataclass(slots=True)
class MatchResolvedEvent(BattleEvent):
    """Terminal outcome. ``winner`` is the winning team name, if any."""

    outcome: MatchOutcome
    winner: str | None
    turns: int
