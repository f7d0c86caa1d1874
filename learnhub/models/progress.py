from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field, Relationship

from learnhub.utils.utils import utcnow


class Progress(SQLModel, table=True):
    """One row per (user, lesson).

    ``completed`` is the completion flag every query filters on; ``completed_at``
    only records when that flag last turned true and is cleared with it.
    """
    __tablename__ = "progress"
    __table_args__ = (
        UniqueConstraint("user_id", "lesson_id", name="uq_progress_user_lesson"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", ondelete="CASCADE", index=True)
    lesson_id: int = Field(foreign_key="lesson.id", ondelete="CASCADE", index=True)
    completed: bool = Field(default=False)
    progress_percentage: float = Field(default=0.0)
    completed_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    user: Optional['User'] = Relationship(back_populates="progress_records")
    lesson: Optional['Lesson'] = Relationship(back_populates="progress_records")
