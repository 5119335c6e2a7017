"""Roster: one side's ordered combatants and its active-member tracking."""
from __future__ import annotations

from typing import List, Sequence, Tuple

from monster_arena.domain.combatant import Combatant
from monster_arena.domain.errors import EmptyRosterError, RosterDefeatedError, TeamAssignmentError
from monster_arena.domain.events import (
    ActiveCombatantChangedEvent,
    BattleEvent,
    RosterDefeatedEvent,
)


class Roster:
    """Owns a fixed lineup; the active member is always the earliest living one."""

    def __init__(self, name: str, members: Sequence[Combatant]) -> None:
        if not members:
            raise EmptyRosterError(f"Roster '{name}' needs at least one combatant.")
        self.name = name
        self._members: Tuple[Combatant, ...] = tuple(members)
        # A rejected lineup leaves every member untagged.
        seen: set[int] = set()
        for member in self._members:
            if id(member) in seen:
                raise TeamAssignmentError(f"{member.name} is listed twice in roster '{name}'.")
            if member.team is not None:
                raise TeamAssignmentError(f"{member.name} already belongs to team '{member.team}'.")
            seen.add(id(member))
        for member in self._members:
            member.join_team(name)
        self._active_index: int | None = self._first_living_index()
        self.is_defeated = self._active_index is None

    @property
    def members(self) -> Tuple[Combatant, ...]:
        return self._members

    def living_members(self) -> List[Combatant]:
        return [member for member in self._members if member.is_alive]

    def get_active(self) -> Combatant:
        """Return the active member; defeated rosters have none."""
        if self.is_defeated or self._active_index is None:
            raise RosterDefeatedError(f"Roster '{self.name}' is defeated and has no active combatant.")
        return self._members[self._active_index]

    def update_active(self) -> List[BattleEvent]:
        """Re-pick the active member after combat; flag defeat when nobody is left."""
        if self.is_defeated:
            return []
        if self._active_index is not None and self._members[self._active_index].is_alive:
            return []

        next_index = self._first_living_index()
        if next_index is None:
            self._active_index = None
            self.is_defeated = True
            return [RosterDefeatedEvent(team=self.name)]

        self._active_index = next_index
        active = self._members[next_index]
        return [
            ActiveCombatantChangedEvent(
                team=self.name,
                combatant_id=active.instance_id,
                combatant_name=active.name,
                combatant_kind=active.kind,
            )
        ]

    def _first_living_index(self) -> int | None:
        for index, member in enumerate(self._members):
            if member.is_alive:
                return index
        return None

    def __len__(self) -> int:
        return len(self._members)

    def __repr__(self) -> str:
        return f"Roster(name={self.name!r}, members={len(self._members)}, is_defeated={self.is_defeated})"
