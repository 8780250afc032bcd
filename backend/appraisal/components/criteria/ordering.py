"""Canonical ordering and display codes (C1..Cn) for an editable criteria set.

The reference list is descriptive metadata only: criteria outside it are valid,
they sort after the known ones and are shown with the ``C?`` code.
"""

from __future__ import annotations

from collections import OrderedDict
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from ...platform.config import settings

UNKNOWN_CODE = "C?"


class CanonicalOrderIndex:
    """Position lookup over a fixed list of criterion names (exact match)."""

    def __init__(self, names: Sequence[str]):
        self._names: Tuple[str, ...] = tuple(names)
        self._positions: Dict[str, int] = {}
        for position, name in enumerate(self._names):
            # First occurrence wins if a configured list repeats a name.
            self._positions.setdefault(name, position)

    def __len__(self) -> int:
        return len(self._names)

    def position_of(self, name: str) -> Optional[int]:
        return self._positions.get(name)

    def code_of(self, name: str) -> str:
        position = self.position_of(name)
        return f"C{position + 1}" if position is not None else UNKNOWN_CODE

    def sort_key(self, name: str) -> Tuple[int, int, str]:
        position = self.position_of(name)
        if position is None:
            return (1, 0, name)
        return (0, position, "")


def default_order_index() -> CanonicalOrderIndex:
    return CanonicalOrderIndex(settings.CANONICAL_CRITERIA_ORDER)


def sort_criteria(criteria: Iterable[Any], index: Optional[CanonicalOrderIndex] = None) -> List[Any]:
    """Known criteria by canonical position, then unknown ones by name.

    Works on anything exposing ``.name`` (ORM rows, schemas, namespaces).
    """
    index = index or default_order_index()
    return sorted(criteria, key=lambda c: index.sort_key(c.name))


def group_by_category(criteria: Iterable[Any]) -> "OrderedDict[str, List[Any]]":
    """Group in first-seen category order, keeping the incoming order inside each group."""
    grouped: "OrderedDict[str, List[Any]]" = OrderedDict()
    for criterion in criteria:
        grouped.setdefault(criterion.category, []).append(criterion)
    return grouped


def category_weight_totals(criteria: Iterable[Any]) -> Dict[str, float]:
    """Sum of weights per criterion type (Benefit/Cost) for one category."""
    totals: Dict[str, float] = {}
    for criterion in criteria:
        type_key = getattr(criterion.type, "value", criterion.type)
        totals[type_key] = round(totals.get(type_key, 0.0) + float(criterion.weight or 0.0), 4)
    return totals
