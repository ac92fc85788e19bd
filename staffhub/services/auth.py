"""
Password hashing and bearer token handling.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt
from sqlalchemy.orm import Session

from staffhub.core.config import settings
from staffhub.core.exceptions import AuthenticationError, ValidationError
from staffhub.models.user import User, UserRole

logger = logging.getLogger(__name__)

# bcrypt only considers the first 72 bytes of a secret
_BCRYPT_MAX_BYTES = 72


def _secret_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def get_password_hash(password: str) -> str:
    return bcrypt.hashpw(_secret_bytes(password), bcrypt.gensalt()).decode()


def verify_password(password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(_secret_bytes(password), hashed_password.encode())
    except ValueError:
        logger.warning("Stored password hash is malformed")
        return False


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    to_encode = dict(data)
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    to_encode.update({"exp": expire, "type": "access"})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def create_token_for_user(user: User) -> str:
    return create_access_token(data={"sub": str(user.id), "role": user.role.value})


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Returns the token payload, {"error": "TOKEN_EXPIRED"} for an expired token,
    or None when the token cannot be verified.
    """
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except ExpiredSignatureError:
        return {"error": "TOKEN_EXPIRED"}
    except JWTError as e:
        logger.info(f"Token rejected: {e}")
        return None


def authenticate(db: Session, email: str, password: str) -> User:
    user = db.query(User).filter(User.email == email).first()
    if not user or not verify_password(password, user.hashed_password):
        logger.info("Failed login attempt", extra={"email": email})
        raise AuthenticationError("Incorrect email or password")
    if not user.is_active:
        raise AuthenticationError("User is inactive")
    return user


def register_employee(
    db: Session,
    name: str,
    email: str,
    password: str,
    **profile: Optional[str],
) -> User:
    """Self-registration always yields an employee account."""
    if db.query(User).filter(User.email == email).first():
        raise ValidationError("Email already registered")

    user = User(
        name=name,
        email=email,
        hashed_password=get_password_hash(password),
        role=UserRole.EMPLOYEE,
        is_active=True,
        **{k: v for k, v in profile.items() if v is not None},
    )
    db.add(user)
    try:
        db.commit()
        db.refresh(user)
    except Exception:
        db.rollback()
        raise
    logger.info(f"Registered employee {user.id}")
    return user
