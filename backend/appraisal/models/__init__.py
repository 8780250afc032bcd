from .employee import Employee
from .criterion import Criterion, CriterionType
from .evaluation_score import EvaluationScore, SCORE_CONFLICT_KEY

__all__ = [
    "Employee",
    "Criterion",
    "CriterionType",
    "EvaluationScore",
    "SCORE_CONFLICT_KEY",
]
