"""Repository exports."""

from .creatures_repo import CreaturesRepository
from .names_repo import NamesRepository
from .scenarios_repo import ScenariosRepository

__all__ = [
    "CreaturesRepository",
    "NamesRepository",
    "ScenariosRepository",
]
