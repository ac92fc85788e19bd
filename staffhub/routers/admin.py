from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from staffhub.core.schemas import ApiResponse
from staffhub.database import get_db
from staffhub.models.user import User
from staffhub.routers.auth_deps import require_admin
from staffhub.schemas.dashboard import DashboardStats
from staffhub.schemas.employee import EmployeeAdminUpdate, EmployeeResponse
from staffhub.schemas.leave import LeaveDecision, LeaveResponse
from staffhub.schemas.salary import SalaryResponse
from staffhub.schemas.task import ProgressReport
from staffhub.services import employee_service, leave_service, salary_service
from staffhub.services.dashboard_service import get_dashboard_stats
from staffhub.services.task_service import TaskService

router = APIRouter(
    prefix="/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin)]
)


@router.get("/dashboard", response_model=ApiResponse[DashboardStats])
def dashboard(db: Session = Depends(get_db)):
    return ApiResponse.ok(DashboardStats(**get_dashboard_stats(db)))


# --- Employees ---

@router.get("/employees", response_model=ApiResponse[List[EmployeeResponse]])
def list_employees(db: Session = Depends(get_db)):
    employees = employee_service.list_employees(db)
    return ApiResponse.listing([EmployeeResponse.model_validate(e) for e in employees])


@router.get("/employees/{employee_id}", response_model=ApiResponse[EmployeeResponse])
def get_employee(employee_id: int, db: Session = Depends(get_db)):
    return ApiResponse.ok(EmployeeResponse.model_validate(employee_service.get_employee(db, employee_id)))


@router.put("/employees/{employee_id}", response_model=ApiResponse[EmployeeResponse])
def update_employee(
    employee_id: int,
    payload: EmployeeAdminUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    employee = employee_service.update_employee_details(
        db, employee_id, payload.model_dump(exclude_unset=True), updated_by=current_user
    )
    return ApiResponse.ok(EmployeeResponse.model_validate(employee))


@router.get("/employees/{employee_id}/progress", response_model=ApiResponse[ProgressReport])
def employee_progress(employee_id: int, db: Session = Depends(get_db)):
    report = TaskService(db).progress_report(employee_id)
    return ApiResponse.ok(ProgressReport.from_report(report))


@router.get("/employees/{employee_id}/salary-history", response_model=ApiResponse[List[SalaryResponse]])
def employee_salary_history(employee_id: int, db: Session = Depends(get_db)):
    salaries = salary_service.get_salary_history(db, employee_id)
    return ApiResponse.listing([SalaryResponse.model_validate(s) for s in salaries])


# --- Leave ---

@router.get("/leaves", response_model=ApiResponse[List[LeaveResponse]])
def list_leaves(db: Session = Depends(get_db)):
    leaves = leave_service.list_leaves(db)
    return ApiResponse.listing([LeaveResponse.model_validate(leave) for leave in leaves])


@router.put("/leaves/{leave_id}", response_model=ApiResponse[LeaveResponse])
def decide_leave(
    leave_id: int,
    decision: LeaveDecision,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin)
):
    leave = leave_service.decide_leave(db, leave_id, decision.status, decided_by=current_user)
    return ApiResponse.ok(LeaveResponse.model_validate(leave))
