"""
Authentication and role dependencies.

The bearer token is decoded per request and the resulting User is handed to
the handler explicitly; nothing reads credentials from ambient state.
"""
import logging
from typing import Callable, Iterable

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from staffhub.core.exceptions import AccessDeniedError, AuthenticationError
from staffhub.database import get_db
from staffhub.models.user import User, UserRole
from staffhub.services import auth as auth_service

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login")


def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> User:
    """
    Extracts and validates the current user from the JWT token.
    """
    payload = auth_service.decode_access_token(token)

    if payload is None:
        logger.warning("Authentication failed: Invalid token")
        raise AuthenticationError()

    if payload.get("error") == "TOKEN_EXPIRED":
        logger.info("Authentication failed: Token expired")
        raise AuthenticationError("TOKEN_EXPIRED")

    if payload.get("type") != "access":
        logger.warning("Authentication failed: Invalid token type")
        raise AuthenticationError("Invalid token type")

    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        logger.warning("Authentication failed: Missing subject in token")
        raise AuthenticationError("Missing subject in token")

    user = db.query(User).filter(User.id == int(subject)).first()
    if user is None:
        logger.warning(f"Authentication failed: User {subject} not found in database")
        raise AuthenticationError("User not found")
    if not user.is_active:
        logger.warning(f"Authentication failed: User {subject} is inactive")
        raise AccessDeniedError("User is inactive")
    return user


def require_role(allowed_roles: Iterable[UserRole]) -> Callable:
    """
    Dependency factory that checks if the user has one of the allowed roles.

    Usage:
        @router.get("/admin-only")
        def admin_endpoint(user: User = Depends(require_role([UserRole.ADMIN]))):
            ...
    """
    allowed = frozenset(UserRole(r) for r in allowed_roles)

    def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in allowed:
            raise AccessDeniedError(
                f"Access denied. Required roles: {sorted(r.value for r in allowed)}"
            )
        return current_user
    return role_checker


require_admin = require_role([UserRole.ADMIN])
require_employee = require_role([UserRole.EMPLOYEE])
