from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field, Relationship

from learnhub.utils.utils import utcnow


class Lesson(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    content: Optional[str] = None
    course_id: int = Field(foreign_key="course.id", ondelete="CASCADE", index=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    course: Optional['Course'] = Relationship(back_populates="lessons")
    progress_records: list['Progress'] = Relationship(
        back_populates="lesson",
        sa_relationship_kwargs={"cascade": "all, delete"},
    )
