from datetime import date, datetime
from typing import Optional

from pydantic import Field

from staffhub.core.schemas import CamelModel
from staffhub.schemas.employee import EmployeeSummary


class LeaveCreate(CamelModel):
    start_date: date
    end_date: date
    reason: str = Field(min_length=1)


class LeaveDecision(CamelModel):
    # Left as a plain string so unknown values reach the service and fail there
    status: str


class LeaveResponse(CamelModel):
    id: int
    employee_id: int
    employee: Optional[EmployeeSummary] = None
    start_date: date
    end_date: date
    reason: str
    status: str
    decided_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
