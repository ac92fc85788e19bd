"""
Leave request workflow.

Employees submit requests in the pending state; an admin decides them as
approved or rejected. A decision never moves a request back to pending.
"""
import logging
from datetime import date, datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from staffhub.core.config import settings
from staffhub.core.exceptions import NotFoundError, ValidationError
from staffhub.models.leave import DECISION_STATUSES, Leave, LeaveStatus
from staffhub.models.user import User
from staffhub.services.audit import AuditService
from staffhub.services.notification import NotificationService

logger = logging.getLogger(__name__)


def list_leaves(db: Session) -> List[Leave]:
    return db.query(Leave).options(joinedload(Leave.employee)).order_by(
        Leave.created_at.desc(), Leave.id.desc()
    ).all()


def list_employee_leaves(db: Session, employee_id: int) -> List[Leave]:
    return db.query(Leave).filter(Leave.employee_id == employee_id).order_by(
        Leave.created_at.desc(), Leave.id.desc()
    ).all()


def submit_leave(db: Session, employee: User, start_date: date, end_date: date, reason: str) -> Leave:
    if end_date < start_date:
        raise ValidationError("End date cannot be before start date")
    if not reason or not reason.strip():
        raise ValidationError("Reason is required")

    leave = Leave(
        employee_id=employee.id,
        start_date=start_date,
        end_date=end_date,
        reason=reason.strip(),
        status=LeaveStatus.PENDING.value
    )
    db.add(leave)
    try:
        db.commit()
        db.refresh(leave)
    except Exception:
        db.rollback()
        raise
    logger.info(f"Leave request {leave.id} submitted by employee {employee.id}")
    return leave


def decide_leave(db: Session, leave_id: int, status: str, decided_by: Optional[User] = None) -> Leave:
    """
    Move a leave request to approved or rejected.

    Any other target status is a ValidationError and the record is left as is.
    Re-deciding an already decided request overwrites the earlier decision
    unless ALLOW_LEAVE_REDECISION is turned off.
    """
    try:
        target = LeaveStatus(status)
    except ValueError:
        raise ValidationError("Invalid status")
    if target not in DECISION_STATUSES:
        raise ValidationError("Invalid status")

    leave = db.query(Leave).filter(Leave.id == leave_id).first()
    if not leave:
        raise NotFoundError("Leave request not found")

    previous = leave.status
    if previous != LeaveStatus.PENDING.value and not settings.allow_leave_redecision:
        raise ValidationError("Leave request already processed")

    leave.status = target.value
    leave.decided_at = datetime.now(timezone.utc)

    AuditService.log(
        db,
        action=f"{target.value}_leave",
        entity_type="leave",
        entity_id=leave.id,
        user_id=decided_by.id if decided_by else None,
        details={"before": previous, "after": target.value},
    )
    NotificationService.notify_user(
        db,
        leave.employee_id,
        f"Your leave request from {leave.start_date.isoformat()} to "
        f"{leave.end_date.isoformat()} has been {target.value}.",
    )
    try:
        db.commit()
        db.refresh(leave)
    except Exception:
        db.rollback()
        raise

    if previous != LeaveStatus.PENDING.value:
        logger.warning(f"Leave {leave.id} re-decided: {previous} -> {target.value}")
    else:
        logger.info(f"Leave {leave.id} {target.value}")
    return leave
