import pytest
import os
from decimal import Decimal
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set env before importing app components
os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["LOGIN_RATE_LIMIT"] = "1000/minute"
os.environ.pop("ADMIN_EMAIL", None)
os.environ.pop("ADMIN_PASSWORD", None)

from staffhub.database import Base, get_db
from staffhub.main import app
from fastapi.testclient import TestClient

# SQLite in-memory database configuration
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_database():
    """Create tables once for the whole test session."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Get a clean database session for each test function with rollback safety."""
    connection = engine.connect()
    transaction = connection.begin()
    session = TestingSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def admin_user(db_session):
    """Create a default admin user for tests."""
    from staffhub.models.user import User, UserRole
    from staffhub.services import auth as auth_service

    user = User(
        name="System Admin",
        email="admin@staffhub.io",
        hashed_password=auth_service.get_password_hash("AdminPassword123!"),
        role=UserRole.ADMIN,
        is_active=True,
    )
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture(scope="function")
def make_employee(db_session):
    """Factory for employee users; salary=None leaves the base salary unset."""
    from staffhub.models.user import User, UserRole
    from staffhub.services import auth as auth_service

    counter = {"n": 0}

    def _make_employee(name="Jane Doe", salary=Decimal("5000.00"), **fields):
        fields.setdefault("is_active", True)
        counter["n"] += 1
        user = User(
            name=name,
            email=f"employee{counter['n']}@staffhub.io",
            hashed_password=auth_service.get_password_hash("EmployeePass1!"),
            role=UserRole.EMPLOYEE,
            salary=salary,
            **fields,
        )
        db_session.add(user)
        db_session.commit()
        return user
    return _make_employee


@pytest.fixture(scope="function")
def employee(make_employee):
    return make_employee()


@pytest.fixture(scope="function")
def get_token():
    """Helper fixture to create access tokens for a user."""
    from staffhub.services.auth import create_token_for_user

    def _get_token(user):
        return create_token_for_user(user)
    return _get_token


@pytest.fixture(scope="function")
def auth_headers(get_token):
    def _auth_headers(user):
        return {"Authorization": f"Bearer {get_token(user)}"}
    return _auth_headers


@pytest.fixture(scope="function")
def client(db_session):
    """Get a TestClient that uses the test database session via dependency override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
