import logging
from staffhub.core.config import settings
from staffhub.database import SessionLocal
from staffhub.models.user import User, UserRole
from staffhub.services import auth as auth_service

logger = logging.getLogger(__name__)


def init_system_data():
    """
    Creates the initial admin from ADMIN_EMAIL / ADMIN_PASSWORD when both are
    configured and no admin account exists yet.
    """
    if not settings.admin_email or not settings.admin_password:
        logger.info("Admin bootstrap skipped: ADMIN_EMAIL/ADMIN_PASSWORD not set")
        return

    db = SessionLocal()
    try:
        admin_count = db.query(User).filter(User.role == UserRole.ADMIN).count()
        if admin_count:
            logger.info(f"System initialization check: {admin_count} admin(s) found.")
            return

        if db.query(User).filter(User.email == settings.admin_email).first():
            logger.warning(f"Admin bootstrap skipped: {settings.admin_email} already belongs to an employee")
            return

        admin_user = User(
            name=settings.admin_name,
            email=settings.admin_email,
            hashed_password=auth_service.get_password_hash(settings.admin_password),
            role=UserRole.ADMIN,
            is_active=True
        )
        db.add(admin_user)
        db.commit()
        logger.info(f"Created default admin: {settings.admin_email}")
    except Exception as e:
        db.rollback()
        logger.error(f"Error during system initialization check: {str(e)}", exc_info=True)
        raise
    finally:
        db.close()
