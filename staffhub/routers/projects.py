from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from staffhub.core.schemas import ApiResponse
from staffhub.database import get_db
from staffhub.routers.auth_deps import require_admin
from staffhub.schemas.project import ProjectCreate, ProjectResponse
from staffhub.schemas.task import TaskCreate, TaskResponse
from staffhub.services.task_service import ProjectService, TaskService

router = APIRouter(
    prefix="/admin",
    tags=["projects"],
    dependencies=[Depends(require_admin)]
)


@router.get("/projects", response_model=ApiResponse[List[ProjectResponse]])
def list_projects(db: Session = Depends(get_db)):
    projects = ProjectService(db).list_projects()
    return ApiResponse.listing([ProjectResponse.model_validate(p) for p in projects])


@router.post("/projects", response_model=ApiResponse[ProjectResponse], status_code=status.HTTP_201_CREATED)
def create_project(payload: ProjectCreate, db: Session = Depends(get_db)):
    project = ProjectService(db).create_project(payload.name, payload.description)
    return ApiResponse.ok(ProjectResponse.model_validate(project))


@router.get("/tasks", response_model=ApiResponse[List[TaskResponse]])
def list_tasks(db: Session = Depends(get_db)):
    tasks = TaskService(db).list_tasks()
    return ApiResponse.listing([TaskResponse.model_validate(t) for t in tasks])


@router.post("/tasks", response_model=ApiResponse[TaskResponse], status_code=status.HTTP_201_CREATED)
def create_task(payload: TaskCreate, db: Session = Depends(get_db)):
    task = TaskService(db).create_task(
        project_id=payload.project,
        employee_id=payload.employee,
        title=payload.title,
        description=payload.description,
        status=payload.status,
    )
    return ApiResponse.ok(TaskResponse.model_validate(task))
