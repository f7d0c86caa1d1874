from typing import List

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from learnhub.auth.auth_handler import get_current_user
from learnhub.auth.permissions import require_staff
from learnhub.configs.database import get_db
from learnhub.models import User
from learnhub.schemas.course_schema import (
    CourseCreateRequest,
    CourseResponse,
    CourseUpdateRequest,
    LessonCreateRequest,
    LessonResponse,
    MessageResponse,
)
from learnhub.schemas.progress_schema import CourseProgressSummary
from learnhub.services import course_service, lesson_service, progress_service

router = APIRouter(prefix="/courses", tags=["Courses"])


@router.get("", response_model=List[CourseResponse])
def list_courses(db: Session = Depends(get_db)):
    return [CourseResponse.model_validate(course) for course in course_service.list_courses(db)]


@router.get("/{course_id}", response_model=CourseResponse)
def get_course(course_id: int, db: Session = Depends(get_db)):
    return CourseResponse.model_validate(course_service.get_course(db, course_id))


@router.post("", response_model=CourseResponse, status_code=status.HTTP_201_CREATED)
def create_course(
    course_req: CourseCreateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_staff),
):
    return CourseResponse.model_validate(course_service.create_course(db, course_req, current_user))


@router.put("/{course_id}", response_model=CourseResponse)
def update_course(
    course_id: int,
    course_req: CourseUpdateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_staff),
):
    course = course_service.update_course(db, course_id, course_req, current_user)
    return CourseResponse.model_validate(course)


@router.delete("/{course_id}", response_model=MessageResponse)
def delete_course(
    course_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_staff),
):
    course_service.delete_course(db, course_id, current_user)
    return MessageResponse(message="Course deleted successfully")


@router.get("/{course_id}/lessons", response_model=List[LessonResponse])
def list_lessons(
    course_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return [LessonResponse.model_validate(lesson) for lesson in lesson_service.list_lessons_by_course_id(db, course_id)]


@router.post("/{course_id}/lessons", response_model=LessonResponse, status_code=status.HTTP_201_CREATED)
def create_lesson(
    course_id: int,
    lesson_req: LessonCreateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_staff),
):
    return LessonResponse.model_validate(lesson_service.create_lesson(db, course_id, lesson_req, current_user))


@router.get("/{course_id}/progress", response_model=CourseProgressSummary)
def get_course_progress(
    course_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return progress_service.summarize_course(db, current_user.id, course_id)
