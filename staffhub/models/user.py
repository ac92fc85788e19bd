"""
User Model.
Admins and employees share one table; the role is fixed at creation.
"""
from sqlalchemy import Column, Integer, String, Enum, DateTime, Boolean, Numeric
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import enum
from staffhub.database import Base


class UserRole(str, enum.Enum):
    """
    User roles.

    - ADMIN: manages employees, leave, projects, tasks and salaries
    - EMPLOYEE: self-service access to own profile, leave, tasks and pay
    """
    ADMIN = "admin"
    EMPLOYEE = "employee"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)

    role = Column(
        Enum(UserRole, values_callable=lambda roles: [r.value for r in roles]),
        default=UserRole.EMPLOYEE,
        nullable=False,
    )

    phone = Column(String, nullable=True)
    address = Column(String, nullable=True)
    department = Column(String, nullable=True)
    position = Column(String, nullable=True)
    # Standing base salary, snapshotted into every issued Salary record
    salary = Column(Numeric(12, 2), nullable=True)

    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    leaves = relationship("Leave", back_populates="employee", cascade="all, delete-orphan")
    tasks = relationship("Task", back_populates="employee", cascade="all, delete-orphan")
    salaries = relationship("Salary", back_populates="employee", cascade="all, delete-orphan")
    notifications = relationship("Notification", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User {self.email} ({self.role.value})>"

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
