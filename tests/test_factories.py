from __future__ import annotations

import pytest

from monster_arena.core.rng import RNG
from monster_arena.data.repositories import CreaturesRepository
from monster_arena.domain.combatant import (
    Combatant,
    MultiStrikeCombatant,
    RegeneratingCombatant,
    RetaliatingCombatant,
)
from monster_arena.domain.defs import CreatureDef
from monster_arena.services import FactoryError, NamePoolExhaustedError
from monster_arena.services.factories import (
    NamePool,
    combatant_from_def,
    create_combatant,
    create_lineup,
    create_random_lineup,
    make_instance_id,
    pick_random_kinds,
)


def test_make_instance_id_is_deterministic_per_seed() -> None:
    assert make_instance_id("goblin", RNG(5)) == make_instance_id("goblin", RNG(5))
    assert make_instance_id("goblin", RNG(5)).startswith("goblin_")


def test_create_combatant_uses_base_stats_for_each_kind() -> None:
    repo = CreaturesRepository()
    rng = RNG(1)

    goblin = create_combatant("goblin", "RX-78", creatures_repo=repo, rng=rng)
    troll = create_combatant("troll", "Zaku", creatures_repo=repo, rng=rng)
    orc = create_combatant("orc", "Wing", creatures_repo=repo, rng=rng)

    assert isinstance(goblin, MultiStrikeCombatant)
    assert (goblin.stats.hp, goblin.stats.attack, goblin.stats.speed, goblin.strikes) == (50, 30, 50, 2)
    assert isinstance(troll, RegeneratingCombatant)
    assert (troll.stats.hp, troll.stats.attack, troll.stats.speed, troll.regen) == (100, 40, 20, 20)
    assert isinstance(orc, RetaliatingCombatant)
    assert (orc.stats.hp, orc.stats.attack, orc.stats.speed) == (70, 30, 30)
    assert (orc.block, orc.reflect) == (10, 10)
    assert goblin.kind == "goblin"
    assert goblin.name == "RX-78"
    assert goblin.is_alive is True
    assert goblin.team is None


def test_create_combatant_rejects_unknown_kind() -> None:
    with pytest.raises(FactoryError):
        create_combatant("dragon", "Nu", creatures_repo=CreaturesRepository(), rng=RNG(1))


def test_combatant_from_def_requires_a_name() -> None:
    creature_def = CreatureDef(id="blob", name="Blob", behavior="basic", max_hp=10, attack=1, speed=1)

    with pytest.raises(FactoryError):
        combatant_from_def(creature_def, "", instance_id="blob_1")


def test_combatant_from_def_builds_basic_combatants() -> None:
    creature_def = CreatureDef(id="blob", name="Blob", behavior="basic", max_hp=10, attack=1, speed=1)

    combatant = combatant_from_def(creature_def, "Gelgoog", instance_id="blob_1")

    assert type(combatant) is Combatant
    assert combatant.stats.max_hp == 10


def test_name_pool_hands_out_unique_names_until_exhausted() -> None:
    pool = NamePool(["A", "B", "C"], RNG(3))

    drawn = [pool.draw() for _ in range(3)]

    assert sorted(drawn) == ["A", "B", "C"]
    assert pool.remaining == 0
    with pytest.raises(NamePoolExhaustedError):
        pool.draw()


def test_name_pool_order_depends_only_on_seed() -> None:
    names = [f"Name{i}" for i in range(20)]

    first = NamePool(names, RNG(99))
    second = NamePool(names, RNG(99))

    assert [first.draw() for _ in range(20)] == [second.draw() for _ in range(20)]


def test_name_pool_exhaustion_is_a_factory_error() -> None:
    assert issubclass(NamePoolExhaustedError, FactoryError)


def test_create_lineup_keeps_kind_order_and_draws_names() -> None:
    repo = CreaturesRepository()
    rng = RNG(4)
    pool = NamePool(["A", "B", "C"], rng)

    lineup = create_lineup(["troll", "orc", "goblin"], creatures_repo=repo, name_pool=pool, rng=rng)

    assert [member.kind for member in lineup] == ["troll", "orc", "goblin"]
    assert len({member.name for member in lineup}) == 3
    assert pool.remaining == 0


def test_create_lineup_fails_when_names_run_out() -> None:
    repo = CreaturesRepository()
    rng = RNG(4)
    pool = NamePool(["Only"], rng)

    with pytest.raises(NamePoolExhaustedError):
        create_lineup(["goblin", "goblin"], creatures_repo=repo, name_pool=pool, rng=rng)


def test_pick_random_kinds_draws_known_kinds() -> None:
    repo = CreaturesRepository()

    kinds = pick_random_kinds(50, creatures_repo=repo, rng=RNG(6))

    assert len(kinds) == 50
    assert set(kinds) <= set(repo.ids())
    assert set(kinds) == {"goblin", "orc", "troll"}


def test_pick_random_kinds_requires_positive_count() -> None:
    with pytest.raises(FactoryError):
        pick_random_kinds(0, creatures_repo=CreaturesRepository(), rng=RNG(6))


def test_random_lineup_is_reproducible_from_seed() -> None:
    repo = CreaturesRepository()
    names = [f"Name{i}" for i in range(10)]

    def build(seed: int) -> list[tuple[str, str]]:
        rng = RNG(seed)
        pool = NamePool(names, rng)
        lineup = create_random_lineup(4, creatures_repo=repo, name_pool=pool, rng=rng)
        return [(member.kind, member.name) for member in lineup]

    assert build(21) == build(21)
    assert len(build(21)) == 4
