from __future__ import annotations

import pytest

from monster_arena.domain.errors import EmptyRosterError, RosterDefeatedError, TeamAssignmentError
from monster_arena.domain.events import ActiveCombatantChangedEvent, RosterDefeatedEvent
from monster_arena.domain.roster import Roster
from tests.helpers.arena_builders import make_basic


def _kill(combatant) -> None:
    combatant.reduce_health(combatant.stats.hp)
    combatant.check_death()


def test_empty_roster_is_rejected() -> None:
    with pytest.raises(EmptyRosterError):
        Roster("Red", [])


def test_members_join_the_roster_team() -> None:
    first = make_basic("A")
    second = make_basic("B")

    roster = Roster("Red", [first, second])

    assert [member.team for member in roster.members] == ["Red", "Red"]
    assert len(roster) == 2


def test_combatant_cannot_join_a_second_roster() -> None:
    shared = make_basic("Shared")
    Roster("Red", [shared])

    with pytest.raises(TeamAssignmentError):
        Roster("Blue", [shared])


def test_rejected_roster_leaves_members_untagged() -> None:
    veteran = make_basic("Veteran")
    rookie = make_basic("Rookie")
    Roster("Red", [veteran])

    with pytest.raises(TeamAssignmentError):
        Roster("Blue", [rookie, veteran])

    assert rookie.team is None
    assert Roster("Green", [rookie]).members == (rookie,)
    assert rookie.team == "Green"


def test_combatant_listed_twice_is_rejected_without_tagging() -> None:
    twin = make_basic("Twin")

    with pytest.raises(TeamAssignmentError):
        Roster("Red", [twin, twin])

    assert twin.team is None


def test_active_is_first_member_at_start() -> None:
    first = make_basic("A")
    roster = Roster("Red", [first, make_basic("B")])

    assert roster.get_active() is first
    assert roster.is_defeated is False


def test_update_active_is_quiet_while_active_lives() -> None:
    roster = Roster("Red", [make_basic("A"), make_basic("B")])

    assert roster.update_active() == []


def test_update_active_picks_lowest_index_living_member() -> None:
    a, b, c = make_basic("A"), make_basic("B"), make_basic("C")
    roster = Roster("Red", [a, b, c])
    _kill(a)
    _kill(b)

    events = roster.update_active()

    assert roster.get_active() is c
    assert len(events) == 1
    assert isinstance(events[0], ActiveCombatantChangedEvent)
    assert events[0].combatant_id == c.instance_id
    assert events[0].team == "Red"


def test_roster_defeat_is_flagged_once_and_stays() -> None:
    a = make_basic("A")
    roster = Roster("Blue", [a])
    _kill(a)

    events = roster.update_active()

    assert roster.is_defeated is True
    assert len(events) == 1
    assert isinstance(events[0], RosterDefeatedEvent)
    assert events[0].team == "Blue"
    assert roster.update_active() == []
    assert roster.is_defeated is True


def test_get_active_on_defeated_roster_raises() -> None:
    a = make_basic("A")
    roster = Roster("Blue", [a])
    _kill(a)
    roster.update_active()

    with pytest.raises(RosterDefeatedError):
        roster.get_active()


def test_roster_built_from_dead_members_starts_defeated() -> None:
    a = make_basic("A")
    _kill(a)

    roster = Roster("Red", [a])

    assert roster.is_defeated is True
    assert roster.living_members() == []


def test_living_members_preserves_order() -> None:
    a, b, c = make_basic("A"), make_basic("B"), make_basic("C")
    roster = Roster("Red", [a, b, c])
    _kill(b)

    assert roster.living_members() == [a, c]
