"""SQLAlchemy implementations of the criteria store, score store and employee directory."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Set

from sqlalchemy import delete, func, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ...models._ids import new_id
from ...models.criterion import Criterion
from ...models.employee import Employee
from ...models.evaluation_score import EvaluationScore
from .errors import ConflictResolutionFailure, EvaluationError, LookupFailure
from .projector import JoinedScore
from .reconciler import ExistingScore, PlannedScore, ReconciliationPlan

logger = logging.getLogger("appraisal.evaluations.repository")

_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class CriteriaStore:
    def __init__(self, db: Session):
        self.db = db

    def fetch_all(self) -> List[Criterion]:
        try:
            return list(self.db.scalars(select(Criterion)))
        except SQLAlchemyError as exc:
            logger.exception("Criteria fetch failed")
            raise LookupFailure("Failed to load evaluation criteria", cause=exc) from exc


class EmployeeDirectory:
    def __init__(self, db: Session):
        self.db = db

    def fetch_all(self) -> List[Employee]:
        try:
            return list(self.db.scalars(select(Employee).order_by(Employee.name.asc(), Employee.id.asc())))
        except SQLAlchemyError as exc:
            logger.exception("Employee directory fetch failed")
            raise LookupFailure("Failed to load employees", cause=exc) from exc

    def get(self, employee_id: str) -> Optional[Employee]:
        try:
            return self.db.get(Employee, employee_id)
        except SQLAlchemyError as exc:
            logger.exception("Employee lookup failed employee_id=%s", employee_id)
            raise LookupFailure("Failed to load employee", cause=exc) from exc


class ScoreStore:
    def __init__(self, db: Session):
        self.db = db

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def fetch_existing(self, employee_id: str) -> List[ExistingScore]:
        try:
            rows = self.db.execute(
                select(EvaluationScore.id, EvaluationScore.criteria_id).where(
                    EvaluationScore.employee_id == employee_id
                )
            ).all()
        except SQLAlchemyError as exc:
            logger.exception("Existing score lookup failed employee_id=%s", employee_id)
            raise LookupFailure("Failed to load existing evaluation scores", cause=exc) from exc
        return [ExistingScore(id=row.id, criteria_id=row.criteria_id) for row in rows]

    def fetch_all_joined(self, employee_id: Optional[str] = None) -> List[JoinedScore]:
        stmt = (
            select(
                EvaluationScore.employee_id,
                Employee.name.label("employee_name"),
                EvaluationScore.criteria_id,
                Criterion.name.label("criteria_name"),
                EvaluationScore.score,
            )
            .join(Employee, Employee.id == EvaluationScore.employee_id)
            .join(Criterion, Criterion.id == EvaluationScore.criteria_id)
            .order_by(Employee.name.asc(), Employee.id.asc(), Criterion.name.asc())
        )
        if employee_id is not None:
            stmt = stmt.where(EvaluationScore.employee_id == employee_id)
        try:
            rows = self.db.execute(stmt).all()
        except SQLAlchemyError as exc:
            logger.exception("Joined score fetch failed")
            raise LookupFailure("Failed to load evaluation scores", cause=exc) from exc
        return [
            JoinedScore(
                employee_id=row.employee_id,
                employee_name=row.employee_name,
                criteria_id=row.criteria_id,
                criteria_name=row.criteria_name,
                score=row.score,
            )
            for row in rows
        ]

    def evaluated_employee_ids(self) -> Set[str]:
        try:
            return set(self.db.scalars(select(EvaluationScore.employee_id).distinct()))
        except SQLAlchemyError as exc:
            logger.exception("Evaluated employee lookup failed")
            raise LookupFailure("Failed to load evaluated employees", cause=exc) from exc

    def count_for(self, employee_id: str) -> int:
        try:
            return int(
                self.db.scalar(
                    select(func.count(EvaluationScore.id)).where(EvaluationScore.employee_id == employee_id)
                )
                or 0
            )
        except SQLAlchemyError as exc:
            logger.exception("Score count failed employee_id=%s", employee_id)
            raise LookupFailure("Failed to count evaluation scores", cause=exc) from exc

    # ------------------------------------------------------------------
    # Writes (all-or-nothing per call)
    # ------------------------------------------------------------------

    def upsert_batch(self, plan: ReconciliationPlan) -> int:
        """Apply the plan atomically. Returns the number of entries written.

        Entries with identity update their row in place; if that row no longer
        exists they fall through to the conflict-keyed insert with the rest.
        """
        try:
            inserts: List[PlannedScore] = list(plan.inserts)
            for entry in plan.updates:
                result = self.db.execute(
                    update(EvaluationScore)
                    .where(
                        EvaluationScore.id == entry.id,
                        EvaluationScore.employee_id == entry.employee_id,
                        EvaluationScore.criteria_id == entry.criteria_id,
                    )
                    .values(score=entry.score, updated_at=func.now())
                    .execution_options(synchronize_session=False)
                )
                if result.rowcount == 0:
                    logger.warning(
                        "Score row vanished before update id=%s employee_id=%s criteria_id=%s",
                        entry.id,
                        entry.employee_id,
                        entry.criteria_id,
                    )
                    inserts.append(entry)
            if inserts:
                self._insert_on_conflict(inserts, plan.conflict_key)
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.error("Upsert batch rejected employee_id=%s: %s", plan.employee_id, exc.orig)
            raise ConflictResolutionFailure(
                "Evaluation scores could not be saved: the store rejected the batch",
                cause=exc,
            ) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Upsert batch failed employee_id=%s", plan.employee_id)
            raise ConflictResolutionFailure("Evaluation scores could not be saved", cause=exc) from exc
        return len(plan)

    def _insert_on_conflict(self, entries: Sequence[PlannedScore], conflict_key: Sequence[str]) -> None:
        # New pairs get a fresh id; a vanished row is re-created under its old id.
        rows = [{"id": new_id(), **entry.as_row()} for entry in entries]
        dialect_insert = _UPSERT_INSERTS.get(self.db.get_bind().dialect.name)
        if dialect_insert is None:
            self._insert_or_update_rows(rows)
            return
        stmt = dialect_insert(EvaluationScore).values(rows)
        stmt = stmt.on_conflict_do_update(
            index_elements=list(conflict_key),
            set_={"score": stmt.excluded.score, "updated_at": func.now()},
        )
        self.db.execute(stmt)

    def _insert_or_update_rows(self, rows: Sequence[dict]) -> None:
        # Dialects without ON CONFLICT: resolve the pair inside the same transaction.
        for row in rows:
            existing = self.db.scalar(
                select(EvaluationScore).where(
                    EvaluationScore.employee_id == row["employee_id"],
                    EvaluationScore.criteria_id == row["criteria_id"],
                )
            )
            if existing is None:
                self.db.add(EvaluationScore(**row))
            else:
                existing.score = row["score"]
        self.db.flush()

    def delete_all_for(self, employee_id: str) -> int:
        try:
            result = self.db.execute(
                delete(EvaluationScore)
                .where(EvaluationScore.employee_id == employee_id)
                .execution_options(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Score deletion failed employee_id=%s", employee_id)
            raise EvaluationError("Evaluation could not be deleted", cause=exc) from exc
        return int(result.rowcount or 0)
