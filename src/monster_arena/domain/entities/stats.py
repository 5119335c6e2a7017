"""Stat models for runtime entities."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Stats:
    """Stores vitals and combat stats for one combatant."""

    max_hp: int
    hp: int
    attack: int
    speed: int

    @classmethod
    def full(cls, max_hp: int, attack: int, speed: int) -> "Stats":
        """Build stats at full health."""
        return cls(max_hp=max_hp, hp=max_hp, attack=attack, speed=speed)
