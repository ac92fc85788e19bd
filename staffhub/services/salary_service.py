"""
Salary Service Layer

Business logic for issuing, editing and deleting salary records.

Rules:
- base_amount is a snapshot of the employee's base salary taken at issuance and
  is never recomputed from the live profile afterwards.
- total_amount == base_amount + bonus after creation and after every edit.
- Deletion is a hard delete.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, List, Optional
import logging

from sqlalchemy.orm import Session, joinedload

from staffhub.common.validators import CENTS, parse_amount, require_month, require_year
from staffhub.core.config import settings
from staffhub.core.exceptions import NotFoundError, ValidationError
from staffhub.models.salary import Salary
from staffhub.models.user import User
from staffhub.services.audit import AuditService
from staffhub.services.employee_service import get_employee
from staffhub.services.notification import NotificationService

logger = logging.getLogger(__name__)


def _snapshot_base_salary(employee: User) -> Decimal:
    """
    Read the employee's current base salary as a Decimal.

    Raises:
        ValidationError: the salary is unset or does not hold a finite number
    """
    if employee.salary is None:
        raise ValidationError(
            "Employee base salary not set. Please set it in employee details first."
        )
    try:
        base = Decimal(str(employee.salary))
    except (InvalidOperation, ValueError):
        raise ValidationError("Employee base salary is not a valid number.")
    if not base.is_finite():
        raise ValidationError("Employee base salary is not a valid number.")
    return base.quantize(CENTS)


def _parse_bonus(bonus: Any) -> Decimal:
    if bonus is None:
        return Decimal("0.00")
    return parse_amount(bonus, "Bonus must be a non-negative number")


def _period_taken(db: Session, employee_id: int, month: int, year: int,
                  exclude_id: Optional[int] = None) -> bool:
    query = db.query(Salary.id).filter(
        Salary.employee_id == employee_id,
        Salary.month == month,
        Salary.year == year
    )
    if exclude_id is not None:
        query = query.filter(Salary.id != exclude_id)
    return query.first() is not None


def _guard_period(db: Session, employee_id: int, month: int, year: int,
                  exclude_id: Optional[int] = None) -> None:
    """Duplicate periods are a warning by default and an error when enforced."""
    if not _period_taken(db, employee_id, month, year, exclude_id):
        return
    if settings.enforce_unique_salary_period:
        raise ValidationError(f"Salary already issued for {month}/{year}")
    logger.warning(
        f"Salary already exists for employee {employee_id} in {month}/{year}; issuing another record",
        extra={"employee_id": employee_id, "month": month, "year": year},
    )


def get_salary(db: Session, salary_id: int) -> Salary:
    salary = db.query(Salary).options(joinedload(Salary.employee)).filter(
        Salary.id == salary_id
    ).first()
    if not salary:
        raise NotFoundError("Salary record not found")
    return salary


def list_salaries(db: Session) -> List[Salary]:
    return db.query(Salary).options(joinedload(Salary.employee)).order_by(
        Salary.year.desc(), Salary.month.desc(), Salary.id.desc()
    ).all()


def get_salary_history(db: Session, employee_id: int) -> List[Salary]:
    """
    Salary records for one employee, most recent period first.

    Args:
        db: Database session
        employee_id: ID of the employee

    Returns:
        List of Salary records (possibly empty)
    """
    return db.query(Salary).options(joinedload(Salary.employee)).filter(
        Salary.employee_id == employee_id
    ).order_by(Salary.year.desc(), Salary.month.desc(), Salary.id.desc()).all()


def issue_salary(
    db: Session,
    employee_id: int,
    month: int,
    year: int,
    bonus: Any = None,
    issued_by: Optional[User] = None
) -> Salary:
    """
    Issue a salary record for one employee and pay period.

    Args:
        db: Database session
        employee_id: ID of the employee being paid
        month: Pay period month (1-12)
        year: Pay period year
        bonus: Optional bonus amount, defaults to 0
        issued_by: The acting admin, recorded in the audit trail

    Returns:
        The created Salary record

    Raises:
        NotFoundError: the employee does not exist
        ValidationError: no usable base salary, bad period or bad bonus
    """
    employee = get_employee(db, employee_id)
    base_amount = _snapshot_base_salary(employee)
    parsed_bonus = _parse_bonus(bonus)
    month = require_month(month)
    year = require_year(year)
    _guard_period(db, employee.id, month, year)

    record = Salary(
        employee_id=employee.id,
        base_amount=base_amount,
        bonus=parsed_bonus,
        total_amount=base_amount + parsed_bonus,
        month=month,
        year=year
    )
    db.add(record)
    try:
        db.flush()
        AuditService.log(
            db,
            action="issue_salary",
            entity_type="salary",
            entity_id=record.id,
            user_id=issued_by.id if issued_by else None,
            details={
                "employee_id": employee.id,
                "base_amount": base_amount,
                "bonus": parsed_bonus,
                "month": month,
                "year": year,
            },
        )
        NotificationService.notify_user(
            db,
            employee.id,
            f"Your salary for {month}/{year} has been processed: {record.total_amount:.2f}",
        )
        db.commit()
        db.refresh(record)
    except Exception:
        db.rollback()
        raise

    logger.info(f"Issued salary {record.id} for employee {employee.id} ({month}/{year})")
    return record


def update_salary(
    db: Session,
    salary_id: int,
    bonus: Any = None,
    month: Optional[int] = None,
    year: Optional[int] = None,
    updated_by: Optional[User] = None
) -> Salary:
    """
    Edit bonus and/or pay period of an existing record.

    Only the provided fields change. base_amount is never touched and
    total_amount is recomputed from base_amount and the resulting bonus.

    Raises:
        NotFoundError: the salary id does not resolve
        ValidationError: bad bonus or period
    """
    record = get_salary(db, salary_id)
    before = {
        "bonus": record.bonus,
        "month": record.month,
        "year": record.year,
        "total_amount": record.total_amount,
    }

    if bonus is not None:
        record.bonus = _parse_bonus(bonus)
    if month is not None:
        record.month = require_month(month)
    if year is not None:
        record.year = require_year(year)
    if month is not None or year is not None:
        _guard_period(db, record.employee_id, record.month, record.year, exclude_id=record.id)

    record.total_amount = Decimal(str(record.base_amount)) + Decimal(str(record.bonus))

    try:
        AuditService.log(
            db,
            action="update_salary",
            entity_type="salary",
            entity_id=record.id,
            user_id=updated_by.id if updated_by else None,
            details={
                "before": before,
                "after": {
                    "bonus": record.bonus,
                    "month": record.month,
                    "year": record.year,
                    "total_amount": record.total_amount,
                },
            },
        )
        db.commit()
        db.refresh(record)
    except Exception:
        db.rollback()
        raise
    return record


def delete_salary(db: Session, salary_id: int, deleted_by: Optional[User] = None) -> None:
    """
    Hard-delete a salary record.

    Raises:
        NotFoundError: the salary id does not resolve; nothing is deleted
    """
    record = db.query(Salary).filter(Salary.id == salary_id).first()
    if not record:
        raise NotFoundError("Salary record not found")

    AuditService.log(
        db,
        action="delete_salary",
        entity_type="salary",
        entity_id=record.id,
        user_id=deleted_by.id if deleted_by else None,
        details={
            "employee_id": record.employee_id,
            "month": record.month,
            "year": record.year,
            "total_amount": record.total_amount,
        },
    )
    db.delete(record)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info(f"Deleted salary {salary_id}")
