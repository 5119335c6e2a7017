"""Shared type aliases for the core and domain layers."""
from typing import Literal

Behavior = Literal["basic", "multi_strike", "regenerate", "retaliate"]
MatchOutcome = Literal["first", "second", "tie", "timeout"]
TextDisplayMode = Literal["instant", "step"]
ColorMode = Literal["auto", "always", "never"]

BEHAVIORS: tuple[Behavior, ...] = ("basic", "multi_strike", "regenerate", "retaliate")

__all__ = ["BEHAVIORS", "Behavior", "ColorMode", "MatchOutcome", "TextDisplayMode"]
