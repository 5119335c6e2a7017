"""Service layer exports."""

from .battle_service import DEFAULT_MAX_TURNS, BattleService
from .controllers import MatchController
from .errors import FactoryError, NamePoolExhaustedError, ScenarioError
from .scenario_service import ScenarioService

__all__ = [
    "DEFAULT_MAX_TURNS",
    "BattleService",
    "FactoryError",
    "MatchController",
    "NamePoolExhaustedError",
    "ScenarioError",
    "ScenarioService",
]
