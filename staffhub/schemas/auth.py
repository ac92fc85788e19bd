from pydantic import BaseModel, EmailStr, Field
from typing import Optional

from staffhub.core.schemas import CamelModel
from staffhub.schemas.employee import EmployeeResponse


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class RegisterRequest(CamelModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=6)
    phone: Optional[str] = None
    department: Optional[str] = None
    position: Optional[str] = None


class Token(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: EmployeeResponse
