"""Text rendering for battle events, lineups and status lines."""
from __future__ import annotations

import os
import re
from typing import Iterable, List, Mapping, Sequence

from monster_arena.core.types import ColorMode
from monster_arena.domain.battle_models import CombatantView, MatchView
from monster_arena.domain.events import (
    ActiveCombatantChangedEvent,
    AttackResolvedEvent,
    BattleEvent,
    CombatantDefeatedEvent,
    MatchResolvedEvent,
    RegeneratedEvent,
    RosterDefeatedEvent,
    TurnOrderDecidedEvent,
    TurnStartedEvent,
)

RESET = "\033[0m"
TEAM_COLORS: dict[str, str] = {
    "Red": "\033[31m",
    "Blue": "\033[34m",
}
SEPARATOR_WIDTH = 119

_ANSI_PATTERN = re.compile(r"\033\[[0-9;]*m")


def debug_enabled() -> bool:
    """Return True only when ARENA_DEBUG is explicitly set to '1'."""
    return os.getenv("ARENA_DEBUG") == "1"


def color_enabled(mode: ColorMode = "auto") -> bool:
    """Resolve a color mode; ``auto`` is off on Windows consoles and under NO_COLOR."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    return os.name != "nt" and "NO_COLOR" not in os.environ


def visible_length(text: str) -> int:
    """Length of ``text`` without ANSI color sequences."""
    return len(_ANSI_PATTERN.sub("", text))


def colorize(text: str, team: str | None, *, use_color: bool) -> str:
    if not use_color or team is None:
        return text
    color = TEAM_COLORS.get(team)
    if color is None:
        return text
    return f"{color}{text}{RESET}"


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_separator(char: str = "-") -> None:
    print("\n" + char * SEPARATOR_WIDTH)


class BattleRenderer:
    """Turns battle events and match views into console text."""

    def __init__(self, kind_names: Mapping[str, str] | None = None, *, use_color: bool = True) -> None:
        self._kind_names = dict(kind_names or {})
        self._use_color = use_color

    # -----------------------
    # Formatting
    # -----------------------
    def kind_name(self, kind: str) -> str:
        return self._kind_names.get(kind) or kind.replace("_", " ").title()

    def display_name(self, team: str | None, kind: str, name: str, *, with_team: bool = True) -> str:
        parts = [team] if with_team and team else []
        parts.extend([self.kind_name(kind), name])
        return colorize(" ".join(parts), team, use_color=self._use_color)

    def member_text(self, view: CombatantView, *, mirrored: bool = False) -> str:
        """Bracketed ``[ team | Kind name (hp) ]`` tag, team on the outside edge."""
        label = f"{self.kind_name(view.kind)} {view.name} ({view.hp})"
        text = f"[ {label} | {view.team} ]" if mirrored else f"[ {view.team} | {label} ]"
        return colorize(text, view.team, use_color=self._use_color)

    def format_lineup(self, view: MatchView) -> List[str]:
        """Side-by-side lineup rows; the second roster is aligned after the widest first entry."""
        left = [self.member_text(member) for member in view.first.members]
        right = [self.member_text(member, mirrored=True) for member in view.second.members]
        width = max((visible_length(text) for text in left), default=0)
        gap = "   "
        lines: List[str] = []
        for index in range(max(len(left), len(right))):
            if index < len(left):
                left_text = left[index] + " " * (width - visible_length(left[index]))
            else:
                left_text = " " * width
            right_text = right[index] if index < len(right) else ""
            lines.append((left_text + gap + right_text).rstrip() if right_text else left[index])
        return lines

    def format_event(self, event: BattleEvent) -> str | None:
        """Return the text for one event, or None for events with no console output."""
        if isinstance(event, TurnStartedEvent):
            first = colorize(
                f"[ {event.first_team} | {self.kind_name(event.first_kind)} {event.first_name} ({event.first_hp}) ]",
                event.first_team,
                use_color=self._use_color,
            )
            second = colorize(
                f"[ {self.kind_name(event.second_kind)} {event.second_name} ({event.second_hp}) | {event.second_team} ]",
                event.second_team,
                use_color=self._use_color,
            )
            return f"\nTurn {event.turn}\n{first} ... {second}"
        if isinstance(event, TurnOrderDecidedEvent):
            return "Randomly deciding order" if event.randomized else None
        if isinstance(event, AttackResolvedEvent):
            attacker = self.display_name(event.attacker_team, event.attacker_kind, event.attacker_name)
            target = self.display_name(event.target_team, event.target_kind, event.target_name)
            text = (
                f"{attacker} attacks {target} for {event.attempted} damage; "
                f"{event.actual} dealt; remain: {event.target_hp};"
            )
            if event.reflected is not None:
                text += f" {event.reflected} reflected;"
            return text
        if isinstance(event, RegeneratedEvent):
            name = self.display_name(event.team, event.combatant_kind, event.combatant_name)
            suffix = " (max)" if event.capped else ""
            return f"{name} regenerates {event.amount} health to {event.hp}{suffix}"
        if isinstance(event, CombatantDefeatedEvent):
            return f"{self.display_name(event.team, event.combatant_kind, event.combatant_name)} has died!"
        if isinstance(event, ActiveCombatantChangedEvent):
            name = self.display_name(event.team, event.combatant_kind, event.combatant_name, with_team=False)
            return f"{colorize(event.team, event.team, use_color=self._use_color)} sends out {name}"
        if isinstance(event, RosterDefeatedEvent):
            return f"{event.team} Team is defeated!"
        if isinstance(event, MatchResolvedEvent):
            return f"Battle Over! {self.format_outcome(event)}"
        return None

    @staticmethod
    def format_outcome(event: MatchResolvedEvent) -> str:
        turns = f"{event.turns} turn{'s' if event.turns != 1 else ''}"
        if event.outcome == "tie":
            return f"Both teams fell together after {turns}: it's a tie."
        if event.outcome == "timeout":
            return f"No winner after {turns} (turn limit reached)."
        return f"{event.winner} Team wins after {turns}."

    # -----------------------
    # Output
    # -----------------------
    def render_events(self, events: Iterable[BattleEvent]) -> None:
        for event in events:
            text = self.format_event(event)
            if text is not None:
                print(text)

    def render_lineup(self, view: MatchView) -> None:
        for line in self.format_lineup(view):
            print(line)


def render_scenario_list(rows: Sequence[tuple[str, str]]) -> None:
    """Display scenario ids with their names."""
    render_heading("Scenarios")
    for scenario_id, name in rows:
        print(f"{scenario_id}: {name}")
