"""Factory helpers for building whole lineups of combatants."""
from __future__ import annotations

from typing import List, Sequence

from monster_arena.core.rng import RNG
from monster_arena.data.repositories import CreaturesRepository
from monster_arena.domain.combatant import Combatant
from monster_arena.services.errors import FactoryError

from .creature_factory import create_combatant
from .name_pool import NamePool


def create_lineup(
    kinds: Sequence[str],
    *,
    creatures_repo: CreaturesRepository,
    name_pool: NamePool,
    rng: RNG,
) -> List[Combatant]:
    """Create one combatant per kind, in order, each with a fresh name."""
    return [
        create_combatant(kind, name_pool.draw(), creatures_repo=creatures_repo, rng=rng)
        for kind in kinds
    ]


def pick_random_kinds(count: int, *, creatures_repo: CreaturesRepository, rng: RNG) -> List[str]:
    """Pick ``count`` creature kinds uniformly from every known definition."""
    if count < 1:
        raise FactoryError("A random lineup needs at least one combatant.")
    kinds = creatures_repo.ids()
    if not kinds:
        raise FactoryError("No creature definitions available.")
    return [rng.choice(kinds) for _ in range(count)]


def create_random_lineup(
    count: int,
    *,
    creatures_repo: CreaturesRepository,
    name_pool: NamePool,
    rng: RNG,
) -> List[Combatant]:
    kinds = pick_random_kinds(count, creatures_repo=creatures_repo, rng=rng)
    return create_lineup(kinds, creatures_repo=creatures_repo, name_pool=name_pool, rng=rng)
