from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field, Relationship

from learnhub.utils.utils import utcnow


class Course(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: Optional[str] = None
    teacher_id: int = Field(foreign_key="user.id", ondelete="CASCADE", index=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    teacher: Optional['User'] = Relationship(back_populates="courses")
    lessons: list['Lesson'] = Relationship(
        back_populates="course",
        sa_relationship_kwargs={"cascade": "all, delete", "order_by": "Lesson.id"},
    )
