import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session, joinedload

from staffhub.common.validators import CENTS
from staffhub.core.exceptions import NotFoundError
from staffhub.models.project import Project
from staffhub.models.task import Task, TaskStatus
from staffhub.models.user import User
from staffhub.services.base import BaseService
from staffhub.services.employee_service import get_employee
from staffhub.services.notification import NotificationService

logger = logging.getLogger(__name__)

NO_TASKS_MESSAGE = "No tasks assigned to this employee."


def format_progress(completed: int, total: int) -> str:
    """Completion ratio as a percentage string with two decimals, e.g. '66.67%'.

    Halves round up: 1 of 32 is '3.13%'.
    """
    if total <= 0:
        return "0.00%"
    percentage = Decimal(completed) * 100 / Decimal(total)
    return f"{percentage.quantize(CENTS, rounding=ROUND_HALF_UP)}%"


class ProjectService(BaseService):
    def list_projects(self) -> List[Project]:
        return self.db.query(Project).order_by(Project.created_at.desc(), Project.id.desc()).all()

    def create_project(self, name: str, description: str) -> Project:
        project = Project(name=name, description=description)
        self.db.add(project)
        self.commit(project)
        self._logger.info(f"Created project {project.id}")
        return project


class TaskService(BaseService):
    """Task assignment, status updates and progress reporting."""

    def _with_refs(self):
        return self.db.query(Task).options(joinedload(Task.project), joinedload(Task.employee))

    def list_tasks(self) -> List[Task]:
        return self._with_refs().order_by(Task.id.desc()).all()

    def list_employee_tasks(self, employee_id: int) -> List[Task]:
        return self._with_refs().filter(Task.employee_id == employee_id).order_by(Task.id).all()

    def create_task(
        self,
        project_id: int,
        employee_id: int,
        title: str,
        description: Optional[str] = None,
        status: TaskStatus = TaskStatus.TODO,
    ) -> Task:
        project = self.db.query(Project).filter(Project.id == project_id).first()
        if not project:
            raise NotFoundError("Project not found")
        employee = get_employee(self.db, employee_id)

        task = Task(
            project_id=project.id,
            employee_id=employee.id,
            title=title,
            description=description,
            status=TaskStatus(status).value,
        )
        self.db.add(task)
        NotificationService.notify_user(
            self.db, employee.id, f"You have been assigned a new task: {title} ({project.name})"
        )
        self.commit(task)
        self._logger.info(f"Assigned task {task.id} to employee {employee.id}")
        return task

    def update_own_task_status(self, user: User, task_id: int, status: TaskStatus) -> Task:
        """An employee may only move their own tasks; others resolve as not found."""
        task = self.db.query(Task).filter(Task.id == task_id, Task.employee_id == user.id).first()
        if not task:
            raise NotFoundError("Task not found")
        task.status = TaskStatus(status).value
        self.commit(task)
        return task

    def progress_report(self, employee_id: int) -> Dict[str, Any]:
        """
        Flat count-based progress: completed / total * 100.

        With no tasks assigned the result carries a message and progress 0
        instead of a percentage string.
        """
        tasks = self.list_employee_tasks(employee_id)
        if not tasks:
            return {"message": NO_TASKS_MESSAGE, "progress": 0}

        completed = sum(1 for t in tasks if t.status == TaskStatus.COMPLETED.value)
        return {
            "total_tasks": len(tasks),
            "completed_tasks": completed,
            "progress": format_progress(completed, len(tasks)),
            "tasks": tasks,
        }
