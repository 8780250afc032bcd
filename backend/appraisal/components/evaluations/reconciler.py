"""Turn a submitted evaluation into an upsert plan that never duplicates scores.

Two phases: the caller reads the identities already stored for the employee,
then ``reconcile`` attaches those identities to the matching submitted entries.
Entries without identity are new (employee, criterion) pairs; the store inserts
them with ``SCORE_CONFLICT_KEY`` as the conflict target.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ...models.evaluation_score import SCORE_CONFLICT_KEY
from ..criteria.defaults import default_for
from .errors import NotFound


@dataclass(frozen=True)
class ExistingScore:
    id: str
    criteria_id: str


@dataclass(frozen=True)
class PlannedScore:
    employee_id: str
    criteria_id: str
    score: float
    id: Optional[str] = None

    @property
    def is_update(self) -> bool:
        return self.id is not None

    def as_row(self) -> Dict[str, Any]:
        row: Dict[str, Any] = {
            "employee_id": self.employee_id,
            "criteria_id": self.criteria_id,
            "score": self.score,
        }
        if self.id is not None:
            row["id"] = self.id
        return row


@dataclass(frozen=True)
class ReconciliationPlan:
    employee_id: str
    entries: Tuple[PlannedScore, ...]
    conflict_key: Tuple[str, ...] = field(default=SCORE_CONFLICT_KEY)

    def __iter__(self):
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def updates(self) -> List[PlannedScore]:
        return [entry for entry in self.entries if entry.is_update]

    @property
    def inserts(self) -> List[PlannedScore]:
        return [entry for entry in self.entries if not entry.is_update]


def _existing_id_map(existing: Iterable[Any]) -> Dict[str, str]:
    mapping: Dict[str, str] = {}
    for row in existing:
        if isinstance(row, Mapping):
            row_id, criteria_id = row["id"], row["criteria_id"]
        else:
            row_id, criteria_id = row.id, row.criteria_id
        # Keep the first identity; the unique constraint means there is only one.
        mapping.setdefault(criteria_id, row_id)
    return mapping


def reconcile(
    employee_id: str,
    submitted: Mapping[str, float],
    existing: Iterable[Any],
) -> ReconciliationPlan:
    """One plan entry per submitted criterion, in submission order.

    Entries for criteria already scored for this employee carry the stored id
    (update in place); the rest carry none (insert).
    """
    existing_ids = _existing_id_map(existing)
    entries = tuple(
        PlannedScore(
            employee_id=employee_id,
            criteria_id=criteria_id,
            score=float(value),
            id=existing_ids.get(criteria_id),
        )
        for criteria_id, value in submitted.items()
    )
    return ReconciliationPlan(employee_id=employee_id, entries=entries)


def complete_submission(
    submitted: Mapping[str, Optional[float]],
    criteria: Sequence[Any],
) -> Dict[str, float]:
    """Expand a submission to the full current criteria set.

    Missing or null values take the criterion's default score. Ids that are not
    in the criteria set raise ``NotFound``.
    """
    by_id = {criterion.id: criterion for criterion in criteria}
    unknown = [criteria_id for criteria_id in submitted if criteria_id not in by_id]
    if unknown:
        raise NotFound(f"Unknown criterion id(s): {', '.join(sorted(unknown))}")

    completed: Dict[str, float] = {}
    for criterion in criteria:
        value = submitted.get(criterion.id)
        completed[criterion.id] = default_for(criterion) if value is None else float(value)
    return completed


def build_plan(
    employee_id: str,
    submitted: Mapping[str, Optional[float]],
    criteria: Sequence[Any],
    existing: Iterable[Any],
) -> ReconciliationPlan:
    return reconcile(employee_id, complete_submission(submitted, criteria), existing)
