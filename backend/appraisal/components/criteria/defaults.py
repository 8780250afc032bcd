"""Default score for a criterion that has no value yet.

One policy serves form initialization, plan construction and projection:

- Benefit on a 1-5 scale -> 1
- Benefit on a binary scale (0-1 or 0/1) -> 0
- any other Benefit scale -> 1
- Cost -> 0
"""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, Optional, Tuple

from ...models.criterion import CriterionType

_RANGE_RE = re.compile(r"(-?\d+(?:[.,]\d+)?)\s*[-/–]\s*(-?\d+(?:[.,]\d+)?)")


def parse_scale_range(scale: Optional[str]) -> Optional[Tuple[float, float]]:
    """Extract ``(low, high)`` from descriptors like ``"1-5"``, ``"0/1"`` or ``"0 - 10 hari"``.

    Open ranges (``"0+"``, ``"hari"``) return None.
    """
    match = _RANGE_RE.search(scale or "")
    if not match:
        return None
    low, high = (float(part.replace(",", ".")) for part in match.groups())
    return (low, high)


def is_binary_scale(scale: Optional[str]) -> bool:
    return parse_scale_range(scale) == (0.0, 1.0)


def is_likert_scale(scale: Optional[str]) -> bool:
    return parse_scale_range(scale) == (1.0, 5.0)


def coerce_type(value: Any) -> CriterionType:
    if isinstance(value, CriterionType):
        return value
    return CriterionType(str(value))


def default_score(criterion_type: Any, scale: Optional[str]) -> float:
    if coerce_type(criterion_type) is CriterionType.COST:
        return 0.0
    if is_likert_scale(scale):
        return 1.0
    if is_binary_scale(scale):
        return 0.0
    return 1.0


def default_for(criterion: Any) -> float:
    return default_score(criterion.type, criterion.scale)


def initial_scores(criteria: Iterable[Any]) -> Dict[str, float]:
    """Form initialization: criterion id -> default score."""
    return {criterion.id: default_for(criterion) for criterion in criteria}
