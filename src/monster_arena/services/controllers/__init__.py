"""UI-agnostic controllers for match flow orchestration."""
from __future__ import annotations

from .match_controller import MatchController

__all__ = [
    "MatchController",
]
