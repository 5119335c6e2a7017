"""Name pool definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class NamePoolDef:
    """An ordered set of unique creature names."""

    id: str
    names: Tuple[str, ...]
