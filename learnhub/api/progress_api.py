from typing import List

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from learnhub.auth.auth_handler import get_current_user
from learnhub.auth.permissions import require_student
from learnhub.configs.database import get_db
from learnhub.models import User
from learnhub.schemas.course_schema import MessageResponse
from learnhub.schemas.progress_schema import (
    CompletedLessonResponse,
    CourseProgressSummary,
    ProgressResponse,
    ProgressUpdateRequest,
    ProgressUpdateResponse,
)
from learnhub.services import progress_service

router = APIRouter(prefix="/progress", tags=["Progress"])


@router.get("", response_model=List[CompletedLessonResponse])
def list_completed_lessons(db: Session = Depends(get_db), current_user: User = Depends(require_student)):
    return [CompletedLessonResponse.model_validate(p) for p in progress_service.list_completed(db, current_user.id)]


# declared before /{lesson_id} so "courses" is not read as a lesson id
@router.get("/courses", response_model=List[CourseProgressSummary])
def list_course_summaries(db: Session = Depends(get_db), current_user: User = Depends(require_student)):
    return progress_service.summarize_user_courses(db, current_user.id)


@router.get("/{course_id}/progress", response_model=CourseProgressSummary)
def get_course_progress(
    course_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return progress_service.summarize_course(db, current_user.id, course_id)


@router.get("/{lesson_id}", response_model=ProgressResponse)
def get_lesson_progress(lesson_id: int, db: Session = Depends(get_db), current_user: User = Depends(require_student)):
    return ProgressResponse.model_validate(progress_service.get_progress(db, current_user.id, lesson_id))


@router.post("/{lesson_id}", response_model=ProgressResponse, status_code=status.HTTP_201_CREATED)
def start_lesson(lesson_id: int, db: Session = Depends(get_db), current_user: User = Depends(require_student)):
    return ProgressResponse.model_validate(progress_service.start_tracking(db, current_user.id, lesson_id))


@router.put("/{lesson_id}", response_model=ProgressUpdateResponse)
def update_lesson_progress(
    lesson_id: int,
    update: ProgressUpdateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_student),
):
    progress = progress_service.set_percentage(db, current_user.id, lesson_id, update.progress_percentage)
    return ProgressUpdateResponse(message="Progress updated", progress=ProgressResponse.model_validate(progress))


@router.post("/{lesson_id}/complete", response_model=ProgressResponse)
def complete_lesson(lesson_id: int, db: Session = Depends(get_db), current_user: User = Depends(require_student)):
    return ProgressResponse.model_validate(progress_service.mark_complete(db, current_user.id, lesson_id))


@router.delete("/{lesson_id}", response_model=MessageResponse)
def unmark_lesson(lesson_id: int, db: Session = Depends(get_db), current_user: User = Depends(require_student)):
    progress_service.unmark_complete(db, current_user.id, lesson_id)
    return MessageResponse(message="Lesson unmarked as completed")
