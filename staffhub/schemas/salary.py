from datetime import datetime
from decimal import Decimal
from typing import Optional

from staffhub.core.schemas import CamelModel, Money
from staffhub.schemas.employee import EmployeeSummary


class SalaryCreate(CamelModel):
    employee: int
    bonus: Optional[Decimal] = None
    month: int
    year: int


class SalaryUpdate(CamelModel):
    """Only bonus and period are editable; base and total are derived."""
    bonus: Optional[Decimal] = None
    month: Optional[int] = None
    year: Optional[int] = None


class SalaryResponse(CamelModel):
    id: int
    employee_id: int
    employee: Optional[EmployeeSummary] = None
    base_amount: Money
    bonus: Money
    total_amount: Money
    month: int
    year: int
    created_at: Optional[datetime] = None
