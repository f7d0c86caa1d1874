from datetime import datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel, Relationship

from learnhub.utils.utils import utcnow


class UserRole(str, Enum):
    student = "student"
    teacher = "teacher"
    admin = "admin"


class User(SQLModel, table=True):
    """User model represents a learner, a course author or an administrator."""
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    email: str = Field(unique=True, index=True)
    password: str = Field(exclude=True)
    role: UserRole = Field(default=UserRole.student)
    created_at: datetime = Field(default_factory=utcnow)

    courses: list['Course'] = Relationship(
        back_populates="teacher",
        sa_relationship_kwargs={"cascade": "all, delete"},
    )
    progress_records: list['Progress'] = Relationship(
        back_populates="user",
        sa_relationship_kwargs={"cascade": "all, delete"},
    )
