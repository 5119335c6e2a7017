"""Assembles rosters for scripted battles and runs them."""
from __future__ import annotations

import logging
from typing import List

from monster_arena.core.rng import RNG
from monster_arena.data.repositories import CreaturesRepository, NamesRepository, ScenariosRepository
from monster_arena.domain.battle_models import MatchState
from monster_arena.domain.defs import LineupDef, ScenarioDef
from monster_arena.domain.events import BattleEvent
from monster_arena.domain.roster import Roster
from monster_arena.services.battle_service import BattleService
from monster_arena.services.errors import ScenarioError
from monster_arena.services.factories import NamePool, create_lineup, pick_random_kinds

DEFAULT_NAME_POOL_ID = "gundam"

logger = logging.getLogger(__name__)


class ScenarioService:
    """Turns scenario definitions into rosters ready for the battle service."""

    def __init__(
        self,
        creatures_repo: CreaturesRepository,
        scenarios_repo: ScenariosRepository,
        names_repo: NamesRepository,
        battle_service: BattleService,
        *,
        name_pool_id: str = DEFAULT_NAME_POOL_ID,
    ) -> None:
        self._creatures_repo = creatures_repo
        self._scenarios_repo = scenarios_repo
        self._names_repo = names_repo
        self._battle_service = battle_service
        self._name_pool_id = name_pool_id

    @property
    def battle_service(self) -> BattleService:
        return self._battle_service

    def list_scenarios(self) -> List[ScenarioDef]:
        return self._scenarios_repo.all()

    def get_scenario(self, scenario_id: str) -> ScenarioDef:
        try:
            return self._scenarios_repo.get(scenario_id)
        except KeyError as exc:
            raise ScenarioError(f"Scenario '{scenario_id}' not found.") from exc

    def new_name_pool(self, rng: RNG) -> NamePool:
        """Shuffle a fresh copy of the configured name pool."""
        try:
            pool_def = self._names_repo.get(self._name_pool_id)
        except KeyError as exc:
            raise ScenarioError(f"Name pool '{self._name_pool_id}' not found.") from exc
        return NamePool(pool_def.names, rng)

    def build_rosters(self, scenario_id: str, *, name_pool: NamePool, rng: RNG) -> tuple[Roster, Roster]:
        scenario = self.get_scenario(scenario_id)
        first = self._build_roster(scenario.first, name_pool=name_pool, rng=rng)
        second = self._build_roster(scenario.second, name_pool=name_pool, rng=rng)
        return first, second

    def run_scenario(
        self, scenario_id: str, *, name_pool: NamePool, rng: RNG
    ) -> tuple[MatchState, List[BattleEvent]]:
        """Build the scenario's rosters and play the match to the end."""
        first, second = self.build_rosters(scenario_id, name_pool=name_pool, rng=rng)
        logger.info("Running scenario %s: %s vs %s", scenario_id, first.name, second.name)
        return self._battle_service.run_match(first, second, rng)

    def _build_roster(self, lineup: LineupDef, *, name_pool: NamePool, rng: RNG) -> Roster:
        if lineup.kinds:
            kinds = list(lineup.kinds)
        else:
            kinds = pick_random_kinds(lineup.random_count, creatures_repo=self._creatures_repo, rng=rng)
        members = create_lineup(kinds, creatures_repo=self._creatures_repo, name_pool=name_pool, rng=rng)
        return Roster(lineup.team_name, members)
