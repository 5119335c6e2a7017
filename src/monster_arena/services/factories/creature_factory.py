"""Factory for creating combatants from creature definitions."""
from __future__ import annotations

import logging
from typing import Dict

from monster_arena.core.rng import RNG
from monster_arena.data.repositories import CreaturesRepository
from monster_arena.domain.combatant import COMBATANT_TYPES, Combatant
from monster_arena.domain.defs import CreatureDef
from monster_arena.domain.entities import Stats
from monster_arena.services.errors import FactoryError

from .id_factory import make_instance_id

logger = logging.getLogger(__name__)


def create_combatant(
    kind: str,
    name: str,
    *,
    creatures_repo: CreaturesRepository,
    rng: RNG,
) -> Combatant:
    """Instantiate a combatant of ``kind`` with that kind's base stats."""
    try:
        creature_def = creatures_repo.get(kind)
    except KeyError as exc:
        raise FactoryError(f"Creature '{kind}' not found.") from exc
    return combatant_from_def(creature_def, name, instance_id=make_instance_id(kind, rng))


def combatant_from_def(creature_def: CreatureDef, name: str, *, instance_id: str) -> Combatant:
    """Build the behavior-specific combatant class for a definition."""
    if not name:
        raise FactoryError("Combatants need a non-empty name.")
    try:
        combatant_type = COMBATANT_TYPES[creature_def.behavior]
    except KeyError as exc:
        raise FactoryError(f"Unknown behavior '{creature_def.behavior}' for '{creature_def.id}'.") from exc

    combatant = combatant_type(
        instance_id=instance_id,
        kind=creature_def.id,
        name=name,
        stats=Stats.full(max_hp=creature_def.max_hp, attack=creature_def.attack, speed=creature_def.speed),
        **_behavior_params(creature_def),
    )
    logger.debug("Created %s %s (%s)", creature_def.name, name, instance_id)
    return combatant


def _behavior_params(creature_def: CreatureDef) -> Dict[str, int]:
    if creature_def.behavior == "multi_strike":
        return {"strikes": creature_def.strikes}
    if creature_def.behavior == "regenerate":
        return {"regen": creature_def.regen}
    if creature_def.behavior == "retaliate":
        return {"block": creature_def.block, "reflect": creature_def.reflect}
    return {}
