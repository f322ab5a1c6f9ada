"""
Family Names - Known font families and name validation
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from config import FAMILY_NAMES_FILE
from utils.error_handler import FamilyNameValidationError, FamilyNamesLoadError
from utils.logger import get_logger

logger = get_logger()


class FamilyNameRegistry:
    """
    Read-only set of family names offered by the font provider.

    WHY: The name field validates on every keystroke and again on submit; both
         paths call is_valid() on the same frozen set.
    """

    def __init__(self, names: Iterable[str]):
        ordered: List[str] = []
        seen = set()
        for name in names:
            if name not in seen:
                seen.add(name)
                ordered.append(name)

        self._names: frozenset = frozenset(seen)
        self._ordered: Tuple[str, ...] = tuple(ordered)

    def is_valid(self, family_name: Optional[str]) -> bool:
        """Exact, case-sensitive membership test"""
        return family_name is not None and family_name in self._names

    @property
    def names(self) -> Tuple[str, ...]:
        """Names in resource order (used by the autocomplete list)"""
        return self._ordered

    def __contains__(self, family_name: object) -> bool:
        return family_name in self._names

    def __len__(self) -> int:
        return len(self._names)


def load_family_names(path: Path = FAMILY_NAMES_FILE) -> FamilyNameRegistry:
    """
    Load the family names resource (JSON array of strings).

    Raises:
        FamilyNamesLoadError: If the file is missing or not a list of strings
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise FamilyNamesLoadError(
            f"Could not load family names from {path}: {e}",
            context={"path": str(path)},
        ) from e

    if not isinstance(data, list) or not all(isinstance(name, str) for name in data):
        raise FamilyNamesLoadError(
            f"Family names file must contain a JSON list of strings: {path}",
            context={"path": str(path)},
        )

    registry = FamilyNameRegistry(data)
    logger.info(f"Loaded {len(registry)} family names from {path.name}")
    return registry


# Global instance
_registry: Optional[FamilyNameRegistry] = None


def get_family_name_registry() -> FamilyNameRegistry:
    """Get global family name registry, loading it on first use"""
    global _registry
    if _registry is None:
        _registry = load_family_names()
    return _registry


def is_valid_family_name(family_name: Optional[str]) -> bool:
    """
    Check a user-typed family name against the known family names.

    Used both for live validation while typing and as the gate before a
    request is submitted.
    """
    return get_family_name_registry().is_valid(family_name)


def validate_family_name(family_name: Optional[str]) -> str:
    """
    Return the family name unchanged if it is known.

    Raises:
        FamilyNameValidationError: If the name is not in the known family names
    """
    if not is_valid_family_name(family_name):
        raise FamilyNameValidationError(family_name)
    return family_name
