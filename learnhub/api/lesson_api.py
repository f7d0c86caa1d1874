from fastapi import APIRouter, Depends
from sqlmodel import Session

from learnhub.auth.auth_handler import get_current_user
from learnhub.auth.permissions import require_staff
from learnhub.configs.database import get_db
from learnhub.models import User
from learnhub.schemas.course_schema import LessonResponse, LessonUpdateRequest, MessageResponse
from learnhub.services import lesson_service

router = APIRouter(prefix="/lessons", tags=["Lessons"])


@router.get("/{lesson_id}", response_model=LessonResponse)
def get_lesson(lesson_id: int, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return LessonResponse.model_validate(lesson_service.get_lesson(db, lesson_id))


@router.put("/{lesson_id}", response_model=LessonResponse)
def update_lesson(
    lesson_id: int,
    lesson_req: LessonUpdateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_staff),
):
    return LessonResponse.model_validate(lesson_service.update_lesson(db, lesson_id, lesson_req, current_user))


@router.delete("/{lesson_id}", response_model=MessageResponse)
def delete_lesson(lesson_id: int, db: Session = Depends(get_db), current_user: User = Depends(require_staff)):
    lesson_service.delete_lesson(db, lesson_id, current_user)
    return MessageResponse(message="Lesson deleted successfully")
