from sqlalchemy import Column, String, DateTime, Float, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..platform.database import Base
from ._ids import new_id
import enum


class CriterionType(str, enum.Enum):
    BENEFIT = "Benefit"
    COST = "Cost"


class Criterion(Base):
    __tablename__ = "criteria"

    id = Column(String, primary_key=True, default=new_id)
    name = Column(String, nullable=False, unique=True)
    category = Column(String, nullable=False)
    type = Column(
        Enum(CriterionType, values_callable=lambda members: [m.value for m in members], name="criterion_type"),
        nullable=False,
    )
    weight = Column(Float, nullable=False)    # percent, > 0
    scale = Column(String, nullable=False)    # e.g. "1-5", "0-1", "0/1", "0-10"
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    evaluation_scores = relationship(
        "EvaluationScore",
        back_populates="criterion",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
