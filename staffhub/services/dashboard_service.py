from typing import Dict

from sqlalchemy.orm import Session

from staffhub.models.leave import Leave, LeaveStatus
from staffhub.models.project import Project
from staffhub.models.task import Task, TaskStatus
from staffhub.models.user import User, UserRole


def get_dashboard_stats(db: Session) -> Dict[str, int]:
    """Four independent counts, recomputed on every call."""
    return {
        "total_employees": db.query(User).filter(
            User.role == UserRole.EMPLOYEE,
            User.is_active.is_(True)
        ).count(),
        "pending_leaves": db.query(Leave).filter(Leave.status == LeaveStatus.PENDING.value).count(),
        "total_projects": db.query(Project).count(),
        "completed_tasks": db.query(Task).filter(Task.status == TaskStatus.COMPLETED.value).count(),
    }
