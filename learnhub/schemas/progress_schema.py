from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ProgressUpdateRequest(BaseModel):
    # Range is checked by the progress service so it surfaces as a 400
    progress_percentage: float


class LessonRef(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str


class ProgressResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    lesson_id: int
    completed: bool
    progress_percentage: float
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class CompletedLessonResponse(ProgressResponse):
    lesson: LessonRef


class ProgressUpdateResponse(BaseModel):
    message: str
    progress: ProgressResponse


class CourseProgressSummary(BaseModel):
    course_id: int
    user_id: int
    completed_lessons: int
    total_lessons: int
    progress_percentage: float
