"""
Employee self-service endpoints. Every handler acts on the authenticated
employee only.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from staffhub.core.schemas import ApiResponse
from staffhub.database import get_db
from staffhub.models.user import User
from staffhub.routers.auth_deps import require_employee
from staffhub.schemas.employee import EmployeeResponse, ProfileUpdate
from staffhub.schemas.leave import LeaveCreate, LeaveResponse
from staffhub.schemas.salary import SalaryResponse
from staffhub.schemas.task import ProgressReport, TaskResponse, TaskStatusUpdate
from staffhub.services import employee_service, leave_service, salary_service
from staffhub.services.task_service import TaskService

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("/profile", response_model=ApiResponse[EmployeeResponse])
def get_profile(current_user: User = Depends(require_employee)):
    return ApiResponse.ok(EmployeeResponse.model_validate(current_user))


@router.put("/profile", response_model=ApiResponse[EmployeeResponse])
def update_profile(
    payload: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_employee)
):
    user = employee_service.update_own_profile(db, current_user, payload.model_dump(exclude_unset=True))
    return ApiResponse.ok(EmployeeResponse.model_validate(user))


@router.get("/leaves", response_model=ApiResponse[List[LeaveResponse]])
def my_leaves(db: Session = Depends(get_db), current_user: User = Depends(require_employee)):
    leaves = leave_service.list_employee_leaves(db, current_user.id)
    return ApiResponse.listing([LeaveResponse.model_validate(leave) for leave in leaves])


@router.post("/leaves", response_model=ApiResponse[LeaveResponse], status_code=status.HTTP_201_CREATED)
def apply_for_leave(
    payload: LeaveCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_employee)
):
    leave = leave_service.submit_leave(
        db, current_user, payload.start_date, payload.end_date, payload.reason
    )
    return ApiResponse.ok(LeaveResponse.model_validate(leave))


@router.get("/tasks", response_model=ApiResponse[List[TaskResponse]])
def my_tasks(db: Session = Depends(get_db), current_user: User = Depends(require_employee)):
    tasks = TaskService(db).list_employee_tasks(current_user.id)
    return ApiResponse.listing([TaskResponse.model_validate(t) for t in tasks])


@router.put("/tasks/{task_id}", response_model=ApiResponse[TaskResponse])
def update_task_status(
    task_id: int,
    payload: TaskStatusUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_employee)
):
    task = TaskService(db).update_own_task_status(current_user, task_id, payload.status)
    return ApiResponse.ok(TaskResponse.model_validate(task))


@router.get("/progress", response_model=ApiResponse[ProgressReport])
def my_progress(db: Session = Depends(get_db), current_user: User = Depends(require_employee)):
    report = TaskService(db).progress_report(current_user.id)
    return ApiResponse.ok(ProgressReport.from_report(report))


@router.get("/salary-history", response_model=ApiResponse[List[SalaryResponse]])
def my_salary_history(db: Session = Depends(get_db), current_user: User = Depends(require_employee)):
    salaries = salary_service.get_salary_history(db, current_user.id)
    return ApiResponse.listing([SalaryResponse.model_validate(s) for s in salaries])
