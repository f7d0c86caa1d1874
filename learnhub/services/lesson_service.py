import logging
from typing import List

from sqlmodel import Session, select

from learnhub.auth.permissions import ensure_owner
from learnhub.models import Lesson, User
from learnhub.schemas.course_schema import LessonCreateRequest, LessonUpdateRequest
from learnhub.services import course_service
from learnhub.utils.errors import NotFoundError
from learnhub.utils.utils import utcnow

logger = logging.getLogger(__name__)


def list_lessons_by_course_id(db: Session, course_id: int) -> List[Lesson]:
    course_service.get_course(db, course_id)
    statement = select(Lesson).where(Lesson.course_id == course_id).order_by(Lesson.created_at, Lesson.id)
    return db.exec(statement).all()


def get_lesson(db: Session, lesson_id: int) -> Lesson:
    lesson = db.get(Lesson, lesson_id)
    if not lesson:
        raise NotFoundError("Lesson not found")
    return lesson


def create_lesson(db: Session, course_id: int, lesson_req: LessonCreateRequest, acting_user: User) -> Lesson:
    course = course_service.get_course(db, course_id)
    ensure_owner(acting_user, course.teacher_id, "Unauthorized to add lessons")
    lesson = Lesson(title=lesson_req.title, content=lesson_req.content, course_id=course.id)
    db.add(lesson)
    db.commit()
    db.refresh(lesson)
    logger.info(f"User {acting_user.id} added lesson {lesson.id} to course {course_id}")
    return lesson


def update_lesson(db: Session, lesson_id: int, lesson_req: LessonUpdateRequest, acting_user: User) -> Lesson:
    lesson = get_lesson(db, lesson_id)
    ensure_owner(acting_user, lesson.course.teacher_id, "Unauthorized to edit this lesson")
    if lesson_req.title:
        lesson.title = lesson_req.title
    if lesson_req.content is not None:
        lesson.content = lesson_req.content
    lesson.updated_at = utcnow()
    db.add(lesson)
    db.commit()
    db.refresh(lesson)
    return lesson


def delete_lesson(db: Session, lesson_id: int, acting_user: User) -> None:
    lesson = get_lesson(db, lesson_id)
    ensure_owner(acting_user, lesson.course.teacher_id, "Unauthorized to delete this lesson")
    db.delete(lesson)
    db.commit()
    logger.info(f"User {acting_user.id} deleted lesson {lesson_id}")
