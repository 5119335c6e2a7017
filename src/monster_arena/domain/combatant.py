"""Combatants and their per-kind combat behaviors.

Every hook returns (or appends to) a list of :class:`BattleEvent` records;
nothing here formats or prints text.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List

from monster_arena.core.types import Behavior
from monster_arena.domain.entities import Stats
from monster_arena.domain.errors import TeamAssignmentError
from monster_arena.domain.events import (
    AttackResolvedEvent,
    BattleEvent,
    CombatantDefeatedEvent,
    RegeneratedEvent,
)


@dataclass(slots=True)
class ActionOutcome:
    """Damage figures for a single strike; ``None`` means the field was not set."""

    attempted: int | None = None
    actual: int | None = None
    reflected: int | None = None


@dataclass(slots=True, eq=False)
class Combatant:
    """A creature with one plain attack per turn and no reactions."""

    behavior: ClassVar[Behavior] = "basic"

    instance_id: str
    kind: str
    name: str
    stats: Stats
    team: str | None = None
    is_alive: bool = True

    def __post_init__(self) -> None:
        if self.stats.hp <= 0:
            self.stats.hp = 0
            self.is_alive = False

    def join_team(self, team: str) -> None:
        """Record roster affiliation; a combatant joins exactly one roster."""
        if self.team is not None:
            raise TeamAssignmentError(f"{self.name} already belongs to team '{self.team}'.")
        self.team = team

    # -----------------------
    # Hooks
    # -----------------------
    def attack(self, defender: Combatant) -> List[BattleEvent]:
        events: List[BattleEvent] = []
        self._strike(defender, events)
        return events

    def on_enemy_attack(self, amount: int, attacker: Combatant, outcome: ActionOutcome) -> None:
        outcome.actual = self.reduce_health(amount)

    def on_end_turn(self) -> List[BattleEvent]:
        return []

    # -----------------------
    # Vitals
    # -----------------------
    def reduce_health(self, amount: int) -> int:
        """Lower hp by at most the remaining hp and return the amount applied."""
        applied = min(max(amount, 0), self.stats.hp)
        self.stats.hp -= applied
        return applied

    def check_death(self, events: List[BattleEvent] | None = None) -> bool:
        """Flip to dead once hp is exhausted and report whether the combatant is dead.

        The defeat event is appended to ``events`` only on the transition.
        """
        if not self.is_alive:
            return True
        if self.stats.hp > 0:
            return False
        self.stats.hp = 0
        self.is_alive = False
        if events is not None:
            events.append(
                CombatantDefeatedEvent(
                    combatant_id=self.instance_id,
                    combatant_name=self.name,
                    combatant_kind=self.kind,
                    team=self.team,
                )
            )
        return True

    def _strike(self, defender: Combatant, events: List[BattleEvent]) -> None:
        if not (self.is_alive and defender.is_alive):
            return
        outcome = ActionOutcome(attempted=self.stats.attack)
        defender.on_enemy_attack(self.stats.attack, self, outcome)
        events.append(
            AttackResolvedEvent(
                attacker_id=self.instance_id,
                attacker_name=self.name,
                attacker_kind=self.kind,
                attacker_team=self.team,
                target_id=defender.instance_id,
                target_name=defender.name,
                target_kind=defender.kind,
                target_team=defender.team,
                attempted=self.stats.attack,
                actual=outcome.actual or 0,
                reflected=outcome.reflected,
                target_hp=defender.stats.hp,
                attacker_hp=self.stats.hp,
            )
        )
        defender.check_death(events)
        self.check_death(events)


@dataclass(slots=True, eq=False)
class MultiStrikeCombatant(Combatant):
    """Strikes several times per turn, stopping as soon as either side falls."""

    behavior: ClassVar[Behavior] = "multi_strike"

    strikes: int = 2

    def attack(self, defender: Combatant) -> List[BattleEvent]:
        events: List[BattleEvent] = []
        for _ in range(self.strikes):
            if not (self.is_alive and defender.is_alive):
                break
            self._strike(defender, events)
        return events


@dataclass(slots=True, eq=False)
class RegeneratingCombatant(Combatant):
    """Heals a fixed amount at the end of its own turn, never above max hp."""

    behavior: ClassVar[Behavior] = "regenerate"

    regen: int = 20

    def on_end_turn(self) -> List[BattleEvent]:
        if not self.is_alive or self.stats.hp >= self.stats.max_hp:
            return []
        missing = self.stats.max_hp - self.stats.hp
        healed = min(self.regen, missing)
        self.stats.hp += healed
        return [
            RegeneratedEvent(
                combatant_id=self.instance_id,
                combatant_name=self.name,
                combatant_kind=self.kind,
                team=self.team,
                amount=healed,
                hp=self.stats.hp,
                capped=self.regen > missing,
            )
        ]


@dataclass(slots=True, eq=False)
class RetaliatingCombatant(Combatant):
    """Blocks a flat slice of every hit and reflects a flat amount back.

    The reflect is applied straight to the attacker's hp, so it ignores the
    attacker's own mitigation, and it is charged on every hit regardless of size.
    """

    behavior: ClassVar[Behavior] = "retaliate"

    block: int = 10
    reflect: int = 10

    def on_enemy_attack(self, amount: int, attacker: Combatant, outcome: ActionOutcome) -> None:
        taken = amount - self.block if amount > self.block else 0
        outcome.actual = self.reduce_health(taken)
        attacker.reduce_health(self.reflect)
        outcome.reflected = self.reflect


COMBATANT_TYPES: dict[Behavior, type[Combatant]] = {
    cls.behavior: cls
    for cls in (Combatant, MultiStrikeCombatant, RegeneratingCombatant, RetaliatingCombatant)
}

__all__ = [
    "COMBATANT_TYPES",
    "ActionOutcome",
    "Combatant",
    "MultiStrikeCombatant",
    "RegeneratingCombatant",
    "RetaliatingCombatant",
]
