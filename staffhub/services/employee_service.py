import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from staffhub.common.validators import parse_amount
from staffhub.core.exceptions import NotFoundError, ValidationError
from staffhub.models.user import User, UserRole
from staffhub.services.audit import AuditService

logger = logging.getLogger(__name__)

# Profile fields an employee may edit on their own record
SELF_EDITABLE_FIELDS = ("name", "phone", "address", "department", "position")


def list_employees(db: Session) -> List[User]:
    return db.query(User).filter(User.role == UserRole.EMPLOYEE).order_by(User.id).all()


def get_employee(db: Session, employee_id: int) -> User:
    """Resolve a user id that must belong to an employee."""
    employee = db.query(User).filter(User.id == employee_id).first()
    if not employee or employee.role != UserRole.EMPLOYEE:
        raise NotFoundError("Employee not found")
    return employee


def update_employee_details(
    db: Session,
    employee_id: int,
    changes: Dict[str, Any],
    updated_by: Optional[User] = None,
) -> User:
    """
    Admin edit of an employee profile. Only keys present in ``changes`` are
    applied; ``role`` is never accepted.
    """
    employee = get_employee(db, employee_id)
    changes = {k: v for k, v in changes.items() if k != "role"}

    if "salary" in changes and changes["salary"] is not None:
        changes["salary"] = parse_amount(changes["salary"], "Invalid salary value provided.")

    if changes.get("email") and changes["email"] != employee.email:
        taken = db.query(User).filter(User.email == changes["email"], User.id != employee.id).first()
        if taken:
            raise ValidationError("Email already in use")

    for field in ("name", "email"):
        if field in changes and not changes[field]:
            raise ValidationError(f"{field.capitalize()} cannot be empty")

    for field, value in changes.items():
        setattr(employee, field, value)

    AuditService.log(
        db,
        action="update_employee",
        entity_type="user",
        entity_id=employee.id,
        user_id=updated_by.id if updated_by else None,
        details={"fields": sorted(changes)},
    )
    try:
        db.commit()
        db.refresh(employee)
    except Exception:
        db.rollback()
        raise
    return employee


def update_own_profile(db: Session, user: User, changes: Dict[str, Any]) -> User:
    changes = {k: v for k, v in changes.items() if k in SELF_EDITABLE_FIELDS}
    if "name" in changes and not changes["name"]:
        raise ValidationError("Name cannot be empty")

    for field, value in changes.items():
        setattr(user, field, value)
    try:
        db.commit()
        db.refresh(user)
    except Exception:
        db.rollback()
        raise
    return user
