"""Name pools repository."""
from __future__ import annotations

from typing import Dict

from monster_arena.data.errors import DataValidationError
from monster_arena.data.repositories.base import RepositoryBase
from monster_arena.domain.defs import NamePoolDef


class NamesRepository(RepositoryBase[NamePoolDef]):
    """Loads name pools and rejects empty or duplicated entries."""

    def __init__(self, base_path=None) -> None:
        super().__init__("names.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, NamePoolDef]:
        pools: Dict[str, NamePoolDef] = {}
        for raw_id, payload in raw.items():
            context = f"name pool '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_exact_fields(data, {"names"}, context)
            names = self._require_str_list(data["names"], f"{context} names")
            if not names:
                raise DataValidationError(f"{context} must list at least one name.")
            duplicates = sorted({name for name in names if names.count(name) > 1})
            if duplicates:
                raise DataValidationError(f"{context} has duplicate names: {duplicates}")
            pools[raw_id] = NamePoolDef(id=raw_id, names=tuple(names))
        return pools
