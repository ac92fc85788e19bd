from datetime import datetime
from typing import Optional

from pydantic import Field

from staffhub.core.schemas import CamelModel


class ProjectCreate(CamelModel):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)


class ProjectResponse(CamelModel):
    id: int
    name: str
    description: str
    created_at: Optional[datetime] = None


class ProjectRef(CamelModel):
    id: int
    name: str
