"""Factory helpers for runtime entities."""

from .creature_factory import combatant_from_def, create_combatant
from .id_factory import make_instance_id
from .lineup_factory import create_lineup, create_random_lineup, pick_random_kinds
from .name_pool import NamePool

__all__ = [
    "NamePool",
    "combatant_from_def",
    "create_combatant",
    "create_lineup",
    "create_random_lineup",
    "make_instance_id",
    "pick_random_kinds",
]
