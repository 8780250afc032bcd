"""Evaluation submission flow.

Each call runs as one ordered sequence on a single session:
criteria fetch -> existing-score fetch -> reconcile -> upsert -> projection refresh.
Any failure before the upsert leaves stored scores untouched; the upsert itself
commits or rolls back as a whole.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy.orm import Session

from ...models.employee import Employee
from ..criteria.defaults import initial_scores
from ..criteria.ordering import CanonicalOrderIndex, default_order_index, sort_criteria
from .errors import NotFound
from .projector import EvaluationRecord, empty_record, project
from .reconciler import ReconciliationPlan, build_plan
from .repository import CriteriaStore, EmployeeDirectory, ScoreStore

logger = logging.getLogger("appraisal.evaluations")


@dataclass(frozen=True)
class SubmissionResult:
    plan: ReconciliationPlan
    record: EvaluationRecord


class EvaluationService:
    def __init__(
        self,
        db: Session,
        order_index: Optional[CanonicalOrderIndex] = None,
        criteria_store: Optional[CriteriaStore] = None,
        score_store: Optional[ScoreStore] = None,
        directory: Optional[EmployeeDirectory] = None,
    ):
        self.order_index = order_index or default_order_index()
        self.criteria_store = criteria_store or CriteriaStore(db)
        self.score_store = score_store or ScoreStore(db)
        self.directory = directory or EmployeeDirectory(db)

    # ------------------------------------------------------------------
    # Criteria
    # ------------------------------------------------------------------

    def list_criteria(self) -> List[Any]:
        return sort_criteria(self.criteria_store.fetch_all(), self.order_index)

    def form_defaults(self) -> Dict[str, float]:
        return initial_scores(self.list_criteria())

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    def submit(self, employee_id: str, scores: Mapping[str, Optional[float]]) -> SubmissionResult:
        """Create or update the employee's evaluation without duplicating score rows."""
        employee = self._require_employee(employee_id)
        criteria = self.list_criteria()
        existing = self.score_store.fetch_existing(employee_id)
        plan = build_plan(employee_id, scores, criteria, existing)

        logger.info(
            "Saving evaluation employee_id=%s updates=%d inserts=%d",
            employee_id,
            len(plan.updates),
            len(plan.inserts),
        )
        self.score_store.upsert_batch(plan)

        record = self._project_one(employee, criteria)
        return SubmissionResult(plan=plan, record=record)

    def update(self, employee_id: str, scores: Mapping[str, Optional[float]]) -> SubmissionResult:
        """Edit an existing evaluation. Criteria not in ``scores`` keep their stored value."""
        self._require_employee(employee_id)
        stored = self.score_store.fetch_all_joined(employee_id=employee_id)
        if not stored:
            raise NotFound(f"No evaluation found for employee {employee_id}")
        # Keyed by criterion id: distinct names may share a record slot.
        merged: Dict[str, Optional[float]] = {row.criteria_id: row.score for row in stored}
        merged.update(scores)
        return self.submit(employee_id, merged)

    def delete(self, employee_id: str) -> int:
        self._require_employee(employee_id)
        deleted = self.score_store.delete_all_for(employee_id)
        if not deleted:
            raise NotFound(f"No evaluation found for employee {employee_id}")
        logger.info("Deleted evaluation employee_id=%s rows=%d", employee_id, deleted)
        return deleted

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------

    def list_records(self) -> List[EvaluationRecord]:
        criteria = self.list_criteria()
        return project(self.score_store.fetch_all_joined(), criteria)

    def get_record(self, employee_id: str) -> EvaluationRecord:
        criteria = self.list_criteria()
        records = project(self.score_store.fetch_all_joined(employee_id=employee_id), criteria)
        if not records:
            raise NotFound(f"No evaluation found for employee {employee_id}")
        return records[0]

    def available_employees(self) -> List[Employee]:
        """Directory entries with no stored scores yet."""
        evaluated = self.score_store.evaluated_employee_ids()
        return [employee for employee in self.directory.fetch_all() if employee.id not in evaluated]

    # ------------------------------------------------------------------

    def _require_employee(self, employee_id: str) -> Employee:
        employee = self.directory.get(employee_id)
        if employee is None:
            raise NotFound(f"Employee {employee_id} not found")
        return employee

    def _project_one(self, employee: Employee, criteria: List[Any]) -> EvaluationRecord:
        records = project(self.score_store.fetch_all_joined(employee_id=employee.id), criteria)
        if records:
            return records[0]
        # Empty criteria set: nothing stored, still a fully defaulted record.
        return empty_record(employee.id, employee.name, criteria)
