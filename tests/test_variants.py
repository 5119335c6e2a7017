from __future__ import annotations

import pytest

from monster_arena.domain.events import CombatantDefeatedEvent, RegeneratedEvent
from tests.helpers.arena_builders import attacks_in, make_basic, make_goblin, make_orc, make_troll


# -----------------------
# Multi-strike
# -----------------------
def test_multi_strike_hits_each_time_with_fresh_outcomes() -> None:
    goblin = make_goblin(attack=30, strikes=2)
    target = make_basic("Target", hp=100)

    attacks = attacks_in(goblin.attack(target))

    assert len(attacks) == 2
    assert [attack.actual for attack in attacks] == [30, 30]
    assert [attack.target_hp for attack in attacks] == [70, 40]
    assert target.stats.hp == 40


def test_multi_strike_stops_after_killing_the_defender() -> None:
    goblin = make_goblin(attack=30, strikes=3)
    target = make_basic("Target", hp=25)

    events = goblin.attack(target)

    assert len(attacks_in(events)) == 1
    assert target.is_alive is False
    assert sum(isinstance(event, CombatantDefeatedEvent) for event in events) == 1


def test_multi_strike_aborts_when_reflect_kills_the_attacker() -> None:
    goblin = make_goblin(hp=10, attack=30, strikes=2)
    orc = make_orc(hp=70, block=10, reflect=10)

    events = goblin.attack(orc)

    attacks = attacks_in(events)
    assert len(attacks) == 1
    assert attacks[0].actual == 20
    assert attacks[0].reflected == 10
    assert goblin.is_alive is False
    assert orc.stats.hp == 50
    defeated = [event.combatant_id for event in events if isinstance(event, CombatantDefeatedEvent)]
    assert defeated == [goblin.instance_id]


# -----------------------
# Self-healer
# -----------------------
@pytest.mark.parametrize(
    ("start_hp", "expected_hp", "expected_amount", "expected_capped"),
    [
        (40, 60, 20, False),
        (80, 100, 20, False),
        (90, 100, 10, True),
        (99, 100, 1, True),
    ],
)
def test_regeneration_is_clamped_to_max_health(
    start_hp: int, expected_hp: int, expected_amount: int, expected_capped: bool
) -> None:
    troll = make_troll(hp=100, regen=20)
    troll.reduce_health(100 - start_hp)

    events = troll.on_end_turn()

    assert troll.stats.hp == expected_hp == min(100, start_hp + 20)
    assert len(events) == 1
    event = events[0]
    assert isinstance(event, RegeneratedEvent)
    assert event.amount == expected_amount
    assert event.hp == expected_hp
    assert event.capped is expected_capped


def test_regeneration_skipped_at_full_health() -> None:
    troll = make_troll(hp=100)

    assert troll.on_end_turn() == []
    assert troll.stats.hp == 100


def test_regeneration_skipped_when_dead() -> None:
    troll = make_troll(hp=100)
    troll.reduce_health(100)
    troll.check_death()

    assert troll.on_end_turn() == []
    assert troll.stats.hp == 0
    assert troll.is_alive is False


# -----------------------
# Mitigator / retaliator
# -----------------------
@pytest.mark.parametrize(
    ("attempted", "expected_actual"),
    [(0, 0), (5, 0), (10, 0), (11, 1), (30, 20), (40, 30)],
)
def test_block_threshold_and_flat_reflect(attempted: int, expected_actual: int) -> None:
    attacker = make_basic("Hitter", hp=100, attack=attempted)
    orc = make_orc(hp=70, block=10, reflect=10)

    attack = attacks_in(attacker.attack(orc))[0]

    assert attack.attempted == attempted
    assert attack.actual == expected_actual
    assert attack.reflected == 10
    assert orc.stats.hp == 70 - expected_actual
    assert attacker.stats.hp == 90


def test_reflect_bypasses_attacker_mitigation() -> None:
    attacker = make_orc("Attacker", hp=70, attack=30, block=10, reflect=10)
    defender = make_orc("Defender", hp=70, block=10, reflect=10)

    attacker.attack(defender)

    assert defender.stats.hp == 50
    # A blocked reflect would have left the attacker untouched.
    assert attacker.stats.hp == 60


def test_reflect_is_clamped_on_a_nearly_dead_attacker() -> None:
    attacker = make_basic("Hitter", hp=4, attack=30)
    orc = make_orc(hp=70)

    events = attacker.attack(orc)

    assert attacker.stats.hp == 0
    assert attacker.is_alive is False
    assert attacks_in(events)[0].reflected == 10


def test_retaliator_still_reflects_on_the_blow_that_kills_it() -> None:
    attacker = make_basic("Hitter", hp=50, attack=40)
    orc = make_orc(hp=20)

    events = attacker.attack(orc)

    assert orc.is_alive is False
    assert attacker.stats.hp == 40
    assert attacks_in(events)[0].actual == 20
