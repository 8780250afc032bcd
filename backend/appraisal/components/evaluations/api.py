from fastapi import APIRouter, Depends, status
from fastapi.responses import Response
from sqlalchemy.orm import Session

from ...platform.database import get_db
from ...schemas.employee import EmployeeResponse
from ...schemas.evaluation import (
    EvaluationListResponse,
    EvaluationSubmit,
    EvaluationUpdate,
    PlannedScoreResponse,
    SubmissionResponse,
)
from .service import EvaluationService, SubmissionResult

router = APIRouter(prefix="/evaluations", tags=["Evaluations"])


def get_evaluation_service(db: Session = Depends(get_db)) -> EvaluationService:
    return EvaluationService(db)


def _submission_response(result: SubmissionResult) -> SubmissionResponse:
    plan = result.plan
    return SubmissionResponse(
        employee_id=plan.employee_id,
        updated=len(plan.updates),
        created=len(plan.inserts),
        plan=[PlannedScoreResponse(**entry.as_row()) for entry in plan],
        evaluation=result.record.as_legacy_dict(),
    )


@router.get("/", response_model=EvaluationListResponse)
def list_evaluations(service: EvaluationService = Depends(get_evaluation_service)):
    records = service.list_records()
    return EvaluationListResponse(
        items=[record.as_legacy_dict() for record in records],
        total=len(records),
    )


@router.get("/available-employees", response_model=list[EmployeeResponse])
def list_available_employees(service: EvaluationService = Depends(get_evaluation_service)):
    return service.available_employees()


@router.get("/form-defaults")
def get_form_defaults(service: EvaluationService = Depends(get_evaluation_service)):
    return {"scores": service.form_defaults()}


@router.get("/{employee_id}")
def get_evaluation(employee_id: str, service: EvaluationService = Depends(get_evaluation_service)):
    return service.get_record(employee_id).as_legacy_dict()


@router.post("/", response_model=SubmissionResponse, status_code=status.HTTP_201_CREATED)
def submit_evaluation(
    data: EvaluationSubmit,
    service: EvaluationService = Depends(get_evaluation_service),
):
    return _submission_response(service.submit(data.employee_id, data.scores))


@router.put("/{employee_id}", response_model=SubmissionResponse)
def update_evaluation(
    employee_id: str,
    data: EvaluationUpdate,
    service: EvaluationService = Depends(get_evaluation_service),
):
    return _submission_response(service.update(employee_id, data.scores))


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_evaluation(employee_id: str, service: EvaluationService = Depends(get_evaluation_service)):
    service.delete(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
