"""Helpers for reading Specific Character Set from pydicom datasets."""

from __future__ import annotations

from typing import Any, List, Optional

from pydicom.dataset import Dataset

from .coding_system import CodingSystem, parse_specific_character_set
from .config import ResolverOptions


def _as_text(value: Any) -> str:
    # Undecodable bytes survive as U+FFFD and fail the table lookup.
    if isinstance(value, bytes):
        return value.decode("ascii", errors="replace")
    return str(value)


def declared_character_sets(dataset: Dataset) -> List[str]:
    """Return the values of (0008,0005) in declared order, or ``[]`` when absent."""

    value = dataset.get("SpecificCharacterSet")
    if value is None:
        return []
    if isinstance(value, (str, bytes)):
        text = _as_text(value)
        return [text] if text else []
    return [_as_text(item) for item in value]


def coding_system_for_dataset(
    dataset: Dataset,
    options: Optional[ResolverOptions] = None,
) -> CodingSystem:
    return parse_specific_character_set(declared_character_sets(dataset), options)
