"""Scenarios repository with reference validation."""
from __future__ import annotations

from typing import Dict

from monster_arena.data.errors import DataReferenceError, DataValidationError
from monster_arena.data.repositories.base import RepositoryBase
from monster_arena.data.repositories.creatures_repo import CreaturesRepository
from monster_arena.domain.defs import LineupDef, ScenarioDef


class ScenariosRepository(RepositoryBase[ScenarioDef]):
    """Loads scripted battles and ensures every referenced creature kind exists."""

    def __init__(self, creatures_repo: CreaturesRepository | None = None, base_path=None) -> None:
        super().__init__("scenarios.json", base_path)
        self._creatures_repo = creatures_repo or CreaturesRepository(base_path=base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ScenarioDef]:
        known_kinds = set(self._creatures_repo.ids())
        scenarios: Dict[str, ScenarioDef] = {}
        for raw_id, payload in raw.items():
            context = f"scenario '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_exact_fields(data, {"name", "first", "second"}, context)
            scenarios[raw_id] = ScenarioDef(
                id=raw_id,
                name=self._require_str(data["name"], f"{context} name"),
                first=self._parse_lineup(data["first"], f"{context} first", known_kinds),
                second=self._parse_lineup(data["second"], f"{context} second", known_kinds),
            )
        return scenarios

    def _parse_lineup(self, raw_value: object, context: str, known_kinds: set[str]) -> LineupDef:
        data = self._require_mapping(raw_value, context)
        self._assert_exact_fields(data, {"team"}, context, optional_fields={"kinds", "random"})
        team = self._require_str(data["team"], f"{context} team")

        has_kinds = "kinds" in data
        has_random = "random" in data
        if has_kinds == has_random:
            raise DataValidationError(f"{context} must define exactly one of 'kinds' or 'random'.")

        if has_random:
            count = self._require_int(data["random"], f"{context} random", minimum=1)
            return LineupDef(team_name=team, random_count=count)

        kinds = self._require_str_list(data["kinds"], f"{context} kinds")
        if not kinds:
            raise DataValidationError(f"{context} kinds must not be empty.")
        for kind in kinds:
            if kind not in known_kinds:
                raise DataReferenceError(f"{context} references unknown creature '{kind}'.")
        return LineupDef(team_name=team, kinds=tuple(kinds))
