from typing import Dict, List
from pydantic import BaseModel


class CriterionResponse(BaseModel):
    id: str
    code: str
    name: str
    category: str
    type: str
    weight: float
    scale: str


class CriteriaCategory(BaseModel):
    category: str
    weight_totals: Dict[str, float]
    over_limit: bool = False
    criteria: List[CriterionResponse]


class CriteriaOverview(BaseModel):
    total: int
    criteria: List[CriterionResponse]
    categories: List[CriteriaCategory]
