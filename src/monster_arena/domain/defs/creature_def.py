"""Creature kind definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from monster_arena.core.types import Behavior


@dataclass(frozen=True, slots=True)
class CreatureDef:
    """Base stats and behavior parameters shared by every creature of one kind."""

    id: str
    name: str
    behavior: Behavior
    max_hp: int
    attack: int
    speed: int
    strikes: int = 1
    regen: int = 0
    block: int = 0
    reflect: int = 0
