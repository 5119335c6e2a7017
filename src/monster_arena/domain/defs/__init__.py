"""Domain definition exports."""

from .creature_def import CreatureDef
from .name_pool_def import NamePoolDef
from .scenario_def import LineupDef, ScenarioDef

__all__ = [
    "CreatureDef",
    "LineupDef",
    "NamePoolDef",
    "ScenarioDef",
]
