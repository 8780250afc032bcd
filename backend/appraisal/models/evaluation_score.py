from sqlalchemy import Column, String, DateTime, Float, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..platform.database import Base
from ._ids import new_id

SCORE_CONFLICT_KEY = ("employee_id", "criteria_id")


class EvaluationScore(Base):
    """One score per (employee, criterion). The unique constraint is the upsert conflict target."""

    __tablename__ = "evaluation_scores"
    __table_args__ = (
        UniqueConstraint(*SCORE_CONFLICT_KEY, name="uq_evaluation_scores_employee_criteria"),
    )

    id = Column(String, primary_key=True, default=new_id)
    employee_id = Column(String, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False, index=True)
    criteria_id = Column(String, ForeignKey("criteria.id", ondelete="CASCADE"), nullable=False, index=True)
    score = Column(Float, nullable=False, default=0.0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    employee = relationship("Employee", back_populates="evaluation_scores")
    criterion = relationship("Criterion", back_populates="evaluation_scores")
