# Models package
# Importing modules here ensures they are registered with SQLAlchemy Base
from . import user, leave, project, task, salary, notification, audit_log  # noqa: F401

# Explicit class exports for cleaner imports
from .user import User, UserRole
from .leave import Leave, LeaveStatus
from .project import Project
from .task import Task, TaskStatus
from .salary import Salary
from .notification import Notification
from .audit_log import AuditLog

__all__ = [
    "User",
    "UserRole",
    "Leave",
    "LeaveStatus",
    "Project",
    "Task",
    "TaskStatus",
    "Salary",
    "Notification",
    "AuditLog",
]
