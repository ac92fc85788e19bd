from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import EmailStr

from staffhub.core.schemas import CamelModel, Money
from staffhub.models.user import UserRole


class EmployeeSummary(CamelModel):
    """Embedded employee reference on leave, task and salary records."""
    id: int
    name: str
    email: str
    position: Optional[str] = None
    address: Optional[str] = None


class EmployeeResponse(CamelModel):
    id: int
    name: str
    email: str
    role: UserRole
    phone: Optional[str] = None
    address: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    salary: Optional[Money] = None
    is_active: bool = True
    created_at: Optional[datetime] = None


class EmployeeAdminUpdate(CamelModel):
    """Fields an admin may change. Role is deliberately absent."""
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
    # Accepts numbers or numeric strings; parsed in the service
    salary: Optional[Decimal | str] = None


class ProfileUpdate(CamelModel):
    """Fields an employee may change on their own profile."""
    name: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None
