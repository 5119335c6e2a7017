"""Creature kinds repository."""
from __future__ import annotations

from typing import Dict

from monster_arena.core.types import BEHAVIORS, Behavior
from monster_arena.data.errors import DataValidationError
from monster_arena.data.repositories.base import RepositoryBase
from monster_arena.domain.defs import CreatureDef

# Parameters each behavior must declare on top of the shared stat block.
_BEHAVIOR_FIELDS: dict[str, set[str]] = {
    "basic": set(),
    "multi_strike": {"strikes"},
    "regenerate": {"regen"},
    "retaliate": {"block", "reflect"},
}
_STAT_FIELDS = {"name", "behavior", "hp", "attack", "speed"}


class CreaturesRepository(RepositoryBase[CreatureDef]):
    """Loads and validates creature kind definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("creatures.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, CreatureDef]:
        creatures: Dict[str, CreatureDef] = {}
        for raw_id, payload in raw.items():
            context = f"creature '{raw_id}'"
            data = self._require_mapping(payload, context)
            behavior = self._require_behavior(data.get("behavior"), f"{context} behavior")
            self._assert_exact_fields(data, _STAT_FIELDS | _BEHAVIOR_FIELDS[behavior], context)

            params = {
                field: self._require_int(data[field], f"{context} {field}", minimum=0)
                for field in _BEHAVIOR_FIELDS[behavior]
            }
            if behavior == "multi_strike" and params["strikes"] < 1:
                raise DataValidationError(f"{context} strikes must be >= 1.")

            creatures[raw_id] = CreatureDef(
                id=raw_id,
                name=self._require_str(data["name"], f"{context} name"),
                behavior=behavior,
                max_hp=self._require_int(data["hp"], f"{context} hp", minimum=1),
                attack=self._require_int(data["attack"], f"{context} attack", minimum=0),
                speed=self._require_int(data["speed"], f"{context} speed"),
                **params,
            )
        return creatures

    @staticmethod
    def _require_behavior(value: object, context: str) -> Behavior:
        if value not in BEHAVIORS:
            raise DataValidationError(f"{context} must be one of {list(BEHAVIORS)}.")
        return value  # type: ignore[return-value]
