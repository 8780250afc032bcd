from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class EvaluationSubmit(BaseModel):
    employee_id: str = Field(min_length=1)
    # criterion id -> score; omitted or null values fall back to the criterion default
    scores: Dict[str, Optional[float]] = Field(default_factory=dict)


class EvaluationUpdate(BaseModel):
    scores: Dict[str, Optional[float]] = Field(default_factory=dict)


class PlannedScoreResponse(BaseModel):
    id: Optional[str] = None
    employee_id: str
    criteria_id: str
    score: float


class SubmissionResponse(BaseModel):
    employee_id: str
    updated: int
    created: int
    plan: List[PlannedScoreResponse]
    evaluation: Dict[str, Any]


class EvaluationListResponse(BaseModel):
    items: List[Dict[str, Any]]
    total: int
