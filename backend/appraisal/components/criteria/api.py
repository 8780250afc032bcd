from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...platform.database import get_db
from ...schemas.criterion import CriteriaCategory, CriteriaOverview, CriterionResponse
from ..evaluations.repository import CriteriaStore
from .ordering import (
    CanonicalOrderIndex,
    category_weight_totals,
    default_order_index,
    group_by_category,
    sort_criteria,
)

router = APIRouter(prefix="/criteria", tags=["Criteria"])

WEIGHT_LIMIT_PERCENT = 100.0


def _criterion_response(criterion, index: CanonicalOrderIndex) -> CriterionResponse:
    return CriterionResponse(
        id=criterion.id,
        code=index.code_of(criterion.name),
        name=criterion.name,
        category=criterion.category,
        type=getattr(criterion.type, "value", criterion.type),
        weight=criterion.weight,
        scale=criterion.scale,
    )


@router.get("/", response_model=CriteriaOverview)
def list_criteria(db: Session = Depends(get_db)):
    index = default_order_index()
    criteria = sort_criteria(CriteriaStore(db).fetch_all(), index)
    categories = []
    for category, members in group_by_category(criteria).items():
        totals = category_weight_totals(members)
        categories.append(
            CriteriaCategory(
                category=category,
                weight_totals=totals,
                over_limit=any(total > WEIGHT_LIMIT_PERCENT for total in totals.values()),
                criteria=[_criterion_response(c, index) for c in members],
            )
        )
    return CriteriaOverview(
        total=len(criteria),
        criteria=[_criterion_response(c, index) for c in criteria],
        categories=categories,
    )
