import logging

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from staffhub.core.config import settings
from staffhub.core.limiter import limiter
from staffhub.core.schemas import ApiResponse
from staffhub.database import get_db
from staffhub.models.user import User
from staffhub.routers.auth_deps import get_current_user
from staffhub.schemas.auth import LoginRequest, RegisterRequest, Token
from staffhub.schemas.employee import EmployeeResponse
from staffhub.services import auth as auth_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["auth"]
)


@router.post("/register", response_model=ApiResponse[Token], status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    user = auth_service.register_employee(
        db,
        name=payload.name,
        email=payload.email,
        password=payload.password,
        phone=payload.phone,
        department=payload.department,
        position=payload.position,
    )
    token = Token(
        access_token=auth_service.create_token_for_user(user),
        user=EmployeeResponse.model_validate(user),
    )
    return ApiResponse.ok(token)


@router.post("/login", response_model=ApiResponse[Token])
@limiter.limit(settings.login_rate_limit)
def login(request: Request, login_data: LoginRequest, db: Session = Depends(get_db)):
    # JSON body rather than form-data for frontend compatibility
    user = auth_service.authenticate(db, login_data.email, login_data.password)
    logger.info(f"User {user.id} logged in")
    token = Token(
        access_token=auth_service.create_token_for_user(user),
        user=EmployeeResponse.model_validate(user),
    )
    return ApiResponse.ok(token)


@router.get("/me", response_model=ApiResponse[EmployeeResponse])
def get_me(current_user: User = Depends(get_current_user)):
    return ApiResponse.ok(EmployeeResponse.model_validate(current_user))
