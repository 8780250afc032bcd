from sqlalchemy import Column, String, DateTime, Date
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..platform.database import Base
from ._ids import new_id


class Employee(Base):
    """Directory entry. Owned by HR master data; the evaluation core only reads it."""

    __tablename__ = "employees"

    id = Column(String, primary_key=True, default=new_id)
    name = Column(String, nullable=False, index=True)
    position = Column(String, nullable=True)
    department = Column(String, nullable=True)
    email = Column(String, nullable=True)
    hire_date = Column(Date, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    evaluation_scores = relationship(
        "EvaluationScore",
        back_populates="employee",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
