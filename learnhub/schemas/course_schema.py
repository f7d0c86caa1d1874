from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TeacherSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class CourseCreateRequest(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None


class CourseUpdateRequest(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None


class CourseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str] = None
    teacher_id: int
    teacher: Optional[TeacherSummary] = None
    created_at: datetime
    updated_at: datetime


class LessonCreateRequest(BaseModel):
    title: str = Field(min_length=1)
    content: Optional[str] = None


class LessonUpdateRequest(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = None


class LessonResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: Optional[str] = None
    course_id: int
    created_at: datetime
    updated_at: datetime


class MessageResponse(BaseModel):
    message: str
