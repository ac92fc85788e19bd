from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from staffhub.core.config import settings

DATABASE_URL = settings.database_url

if DATABASE_URL.startswith("sqlite"):
    # TestClient and uvicorn workers hand the connection across threads
    engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})
else:
    engine = create_engine(DATABASE_URL, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """One session per request. Services commit; the session is always closed."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Create the StaffHub tables (users, leaves, projects, tasks, salaries, notifications, audit log)."""
    from staffhub.models import (  # noqa: F401
        user, leave, project, task, salary, notification, audit_log
    )
    Base.metadata.create_all(bind=engine)
