"""CLI configuration helpers for options persistence."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict

from monster_arena.core.types import ColorMode, TextDisplayMode

_DEFAULT_TEXT_MODE: TextDisplayMode = "instant"
_DEFAULT_COLOR_MODE: ColorMode = "auto"
_COLOR_MODES = ("auto", "always", "never")

logger = logging.getLogger(__name__)


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "MonsterArena"
        return Path.home() / "MonsterArena"
    return Path.home() / ".config" / "monster_arena"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def default_config() -> Dict[str, str]:
    return {"text_display_mode": _DEFAULT_TEXT_MODE, "color": _DEFAULT_COLOR_MODE}


def _normalize_text_mode(value: object) -> TextDisplayMode:
    return "step" if value == "step" else _DEFAULT_TEXT_MODE


def _normalize_color_mode(value: object) -> ColorMode:
    if value in _COLOR_MODES:
        return value  # type: ignore[return-value]
    return _DEFAULT_COLOR_MODE


def _normalize(raw: Dict[str, object]) -> Dict[str, str]:
    return {
        "text_display_mode": _normalize_text_mode(raw.get("text_display_mode")),
        "color": _normalize_color_mode(raw.get("color")),
    }


def load_config(path: Path | None = None) -> Dict[str, str]:
    """Load config from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return default_config()
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return default_config()
    if not isinstance(raw, dict):
        logger.warning("Ignoring config %s: expected a JSON object", config_path)
        return default_config()
    return _normalize(raw)


def save_config(config: Dict[str, str], path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = _normalize(dict(config))
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
