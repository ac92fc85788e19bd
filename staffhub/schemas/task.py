from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import Field, model_serializer

from staffhub.core.schemas import CamelModel
from staffhub.models.task import TaskStatus
from staffhub.schemas.project import ProjectRef


class TaskCreate(CamelModel):
    project: int = Field(description="Project id")
    employee: int = Field(description="Assignee user id")
    title: str = Field(min_length=1)
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.TODO


class TaskStatusUpdate(CamelModel):
    status: TaskStatus


class TaskAssignee(CamelModel):
    id: int
    name: str


class TaskResponse(CamelModel):
    id: int
    project_id: int
    employee_id: int
    project: Optional[ProjectRef] = None
    employee: Optional[TaskAssignee] = None
    title: str
    description: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None


class ProgressReport(CamelModel):
    """
    Either a message (no tasks assigned, progress is 0) or the completion
    ratio as a percentage string with the task list.
    """
    message: Optional[str] = None
    total_tasks: Optional[int] = None
    completed_tasks: Optional[int] = None
    progress: Union[str, int] = 0
    tasks: Optional[List[TaskResponse]] = None

    @model_serializer(mode="wrap")
    def _one_shape(self, handler) -> Dict[str, Any]:
        payload = handler(self)
        return {key: value for key, value in payload.items() if value is not None}

    @classmethod
    def from_report(cls, report: dict) -> "ProgressReport":
        if "tasks" not in report:
            return cls.model_validate(report)
        tasks = [TaskResponse.model_validate(t) for t in report["tasks"]]
        return cls.model_validate({**report, "tasks": tasks})
