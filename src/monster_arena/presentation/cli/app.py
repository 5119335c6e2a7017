"""Console driver that runs scripted battles and renders them."""
from __future__ import annotations

import argparse
import logging
import secrets
import sys
from pathlib import Path
from typing import List, Sequence

from monster_arena.core.rng import RNG
from monster_arena.core.types import ColorMode, TextDisplayMode
from monster_arena.data import DataError
from monster_arena.data.repositories import CreaturesRepository, NamesRepository, ScenariosRepository
from monster_arena.services import (
    BattleService,
    FactoryError,
    MatchController,
    ScenarioError,
    ScenarioService,
)
from monster_arena.services.factories import NamePool

from .config import get_default_config_path, load_config, save_config
from .render import (
    BattleRenderer,
    color_enabled,
    debug_enabled,
    render_scenario_list,
    render_separator,
)

_MAX_RANDOM_SEED = 2**31 - 1

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run turn-based monster battles between two teams")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible battles")
    parser.add_argument("--scenario", action="append", default=None, help="scenario id to run (repeatable)")
    parser.add_argument("--list", action="store_true", help="list available scenarios and exit")
    pacing = parser.add_mutually_exclusive_group()
    pacing.add_argument("--step", action="store_true", help="pause for Enter after every turn")
    pacing.add_argument("--instant", action="store_true", help="print every turn without pausing")
    parser.add_argument("--no-color", action="store_true", help="disable team colors (same as --color never)")
    parser.add_argument("--color", choices=("auto", "always", "never"), default=None, help="team color mode")
    parser.add_argument("--max-turns", type=int, default=None, help="turn cap before a match times out")
    parser.add_argument("--definitions", type=Path, default=None, help="directory with definition JSON files")
    parser.add_argument("--config", type=Path, default=None, help="path to the CLI config file")
    parser.add_argument(
        "--save-config", action="store_true", help="store the effective display options in the config file and exit"
    )
    parser.add_argument("--debug", action="store_true", help="verbose logging (same as ARENA_DEBUG=1)")
    return parser.parse_args(argv)


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the requested scenarios and return a process exit code."""
    args = parse_args(argv)
    configure_logging(args.debug or debug_enabled())

    config = load_config(args.config)
    text_mode = _resolve_text_mode(args, config["text_display_mode"])  # type: ignore[arg-type]
    color_mode = _resolve_color_mode(args, config["color"])  # type: ignore[arg-type]
    if args.save_config:
        return _save_options(text_mode, color_mode, args.config)
    seed = args.seed if args.seed is not None else secrets.randbelow(_MAX_RANDOM_SEED)

    try:
        scenario_service, creatures_repo = _build_services(args.definitions, args.max_turns)
        if args.list:
            render_scenario_list([(scenario.id, scenario.name) for scenario in scenario_service.list_scenarios()])
            return 0

        scenario_ids: List[str] = args.scenario or [scenario.id for scenario in scenario_service.list_scenarios()]
        renderer = BattleRenderer(
            {creature.id: creature.name for creature in creatures_repo.all()},
            use_color=color_enabled(color_mode),
        )
        rng = RNG(seed)
        name_pool = scenario_service.new_name_pool(rng)
        print(f"Seed: {seed}")
        render_separator("=")
        for index, scenario_id in enumerate(scenario_ids, start=1):
            text_mode = _run_scenario(
                index, scenario_id, scenario_service, renderer, name_pool, rng, text_mode
            )
    except (DataError, FactoryError, ScenarioError) as exc:
        logger.debug("Battle run aborted", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    return 0


def _resolve_text_mode(args: argparse.Namespace, configured: TextDisplayMode) -> TextDisplayMode:
    if args.step:
        return "step"
    if args.instant:
        return "instant"
    return configured


def _resolve_color_mode(args: argparse.Namespace, configured: ColorMode) -> ColorMode:
    if args.no_color:
        return "never"
    return args.color or configured


def _save_options(text_mode: TextDisplayMode, color_mode: ColorMode, path: Path | None) -> int:
    """Persist the effective display options."""
    config_path = path or get_default_config_path()
    try:
        save_config({"text_display_mode": text_mode, "color": color_mode}, config_path)
    except OSError as exc:
        print(f"Error: could not save config to {config_path}: {exc}", file=sys.stderr)
        return 1
    logger.info("Saved display options to %s", config_path)
    print(f"Saved options to {config_path}: text_display_mode={text_mode}, color={color_mode}")
    return 0


def _build_services(
    definitions: Path | None, max_turns: int | None
) -> tuple[ScenarioService, CreaturesRepository]:
    """Construct the ScenarioService with concrete repositories."""
    creatures_repo = CreaturesRepository(base_path=definitions)
    scenarios_repo = ScenariosRepository(creatures_repo=creatures_repo, base_path=definitions)
    names_repo = NamesRepository(base_path=definitions)
    battle_service = BattleService() if max_turns is None else BattleService(max_turns=max_turns)
    service = ScenarioService(
        creatures_repo=creatures_repo,
        scenarios_repo=scenarios_repo,
        names_repo=names_repo,
        battle_service=battle_service,
    )
    return service, creatures_repo


def _run_scenario(
    index: int,
    scenario_id: str,
    scenario_service: ScenarioService,
    renderer: BattleRenderer,
    name_pool: NamePool,
    rng: RNG,
    text_mode: TextDisplayMode,
) -> TextDisplayMode:
    scenario = scenario_service.get_scenario(scenario_id)
    print(f"\nBattle #{index}: {scenario.name}")
    first, second = scenario_service.build_rosters(scenario_id, name_pool=name_pool, rng=rng)

    controller = MatchController(scenario_service.battle_service, rng)
    start_events = controller.start(first, second)
    renderer.render_lineup(controller.get_match_view())
    renderer.render_events(start_events)
    while not controller.is_over():
        if text_mode == "step":
            text_mode = _wait_for_enter()
        renderer.render_events(controller.advance())
    render_separator()
    return text_mode


def _wait_for_enter() -> TextDisplayMode:
    """Pause between turns; closed stdin switches to instant output."""
    try:
        input("[Enter] next turn")
    except EOFError:
        print()
        return "instant"
    return "step"


__all__ = ["configure_logging", "main", "parse_args"]
