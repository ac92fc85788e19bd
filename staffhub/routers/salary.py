from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from staffhub.core.schemas import ApiResponse
from staffhub.database import get_db
from staffhub.models.user import User
from staffhub.routers.auth_deps import require_admin
from staffhub.schemas.salary import SalaryCreate, SalaryResponse, SalaryUpdate
from staffhub.services import salary_service

router = APIRouter(
    prefix="/admin/salary",
    tags=["salary"],
    dependencies=[Depends(require_admin)]
)


@router.get("", response_model=ApiResponse[List[SalaryResponse]])
def list_salaries(db: Session = Depends(get_db)):
    salaries = salary_service.list_salaries(db)
    return ApiResponse.listing([SalaryResponse.model_validate(s) for s in salaries])


@router.post("", response_model=ApiResponse[SalaryResponse], status_code=status.HTTP_201_CREATED)
def process_salary(
    payload: SalaryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    record = salary_service.issue_salary(
        db,
        employee_id=payload.employee,
        month=payload.month,
        year=payload.year,
        bonus=payload.bonus,
        issued_by=current_user,
    )
    return ApiResponse.ok(SalaryResponse.model_validate(record))


@router.put("/{salary_id}", response_model=ApiResponse[SalaryResponse])
def update_salary(
    salary_id: int,
    payload: SalaryUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    # Unknown keys such as baseAmount or totalAmount are ignored by the schema
    bonus = payload.bonus
    if bonus is None and "bonus" in payload.model_fields_set:
        # An explicit null clears the bonus
        bonus = 0
    record = salary_service.update_salary(
        db,
        salary_id,
        bonus=bonus,
        month=payload.month,
        year=payload.year,
        updated_by=current_user,
    )
    return ApiResponse.ok(SalaryResponse.model_validate(record))


@router.delete("/{salary_id}", response_model=ApiResponse[dict])
def delete_salary(
    salary_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    salary_service.delete_salary(db, salary_id, deleted_by=current_user)
    return ApiResponse.ok({})
