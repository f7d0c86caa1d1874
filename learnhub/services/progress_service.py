"""Per-lesson progress ledger and per-course aggregation.

Every function takes the request's session explicitly and the id of the
learner it acts for. A learner has at most one Progress row per lesson: the
service checks before inserting and the ``uq_progress_user_lesson`` constraint
catches whatever slips past that check under concurrent requests.
"""
import logging
from numbers import Real
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload
from sqlmodel import Session, select, col

from learnhub.models import Course, Lesson, Progress
from learnhub.schemas.progress_schema import CourseProgressSummary
from learnhub.utils.errors import ConflictError, InvalidArgumentError, NotFoundError
from learnhub.utils.utils import utcnow, completion_percentage

logger = logging.getLogger(__name__)

MIN_PERCENTAGE = 0.0
MAX_PERCENTAGE = 100.0


def validate_percentage(percentage) -> float:
    if isinstance(percentage, bool) or not isinstance(percentage, Real):
        raise InvalidArgumentError("Invalid progress value")
    # NaN fails both comparisons
    if not (MIN_PERCENTAGE <= percentage <= MAX_PERCENTAGE):
        raise InvalidArgumentError("Invalid progress value")
    return float(percentage)


def _get_lesson(db: Session, lesson_id: int) -> Lesson:
    lesson = db.get(Lesson, lesson_id)
    if not lesson:
        raise NotFoundError("Lesson not found")
    return lesson


def _set_completed(progress: Progress, completed: bool) -> None:
    if completed:
        if not progress.completed or progress.completed_at is None:
            progress.completed_at = utcnow()
        progress.completed = True
    else:
        progress.completed = False
        progress.completed_at = None


def _commit(db: Session, progress: Progress) -> Progress:
    db.add(progress)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Progress for this lesson already exists")
    db.refresh(progress)
    return progress


def get_by_user_lesson(db: Session, user_id: int, lesson_id: int) -> Optional[Progress]:
    statement = select(Progress).where(
        (Progress.user_id == user_id) & (Progress.lesson_id == lesson_id)
    )
    return db.exec(statement).first()


def list_completed(db: Session, user_id: int) -> List[Progress]:
    statement = (
        select(Progress)
        .where(Progress.user_id == user_id, col(Progress.completed).is_(True))
        .options(selectinload(Progress.lesson))
        .order_by(Progress.id)
    )
    return db.exec(statement).all()


def get_progress(db: Session, user_id: int, lesson_id: int) -> Progress:
    progress = get_by_user_lesson(db, user_id, lesson_id)
    if not progress:
        raise NotFoundError("No progress found for this lesson")
    return progress


def start_tracking(db: Session, user_id: int, lesson_id: int) -> Progress:
    _get_lesson(db, lesson_id)
    if get_by_user_lesson(db, user_id, lesson_id):
        raise ConflictError("Progress for this lesson already exists")
    progress = _commit(db, Progress(user_id=user_id, lesson_id=lesson_id))
    logger.info(f"User {user_id} started lesson {lesson_id}")
    return progress


def set_percentage(db: Session, user_id: int, lesson_id: int, percentage) -> Progress:
    percentage = validate_percentage(percentage)
    progress = get_by_user_lesson(db, user_id, lesson_id)
    if not progress:
        raise NotFoundError("Lesson progress not found")
    progress.progress_percentage = percentage
    _set_completed(progress, percentage >= MAX_PERCENTAGE)
    progress.updated_at = utcnow()
    progress = _commit(db, progress)
    logger.info(f"User {user_id} set lesson {lesson_id} to {percentage}%")
    return progress


def _complete(progress: Progress) -> Progress:
    progress.progress_percentage = MAX_PERCENTAGE
    _set_completed(progress, True)
    progress.updated_at = utcnow()
    return progress


def mark_complete(db: Session, user_id: int, lesson_id: int) -> Progress:
    _get_lesson(db, lesson_id)
    progress = get_by_user_lesson(db, user_id, lesson_id)
    if progress is not None:
        progress = _commit(db, _complete(progress))
    else:
        try:
            progress = _commit(db, _complete(Progress(user_id=user_id, lesson_id=lesson_id)))
        except ConflictError:
            # lost the insert race; complete the row the other request created
            progress = get_by_user_lesson(db, user_id, lesson_id)
            if progress is None:
                raise
            progress = _commit(db, _complete(progress))
    logger.info(f"User {user_id} completed lesson {lesson_id}")
    return progress


def unmark_complete(db: Session, user_id: int, lesson_id: int) -> None:
    statement = select(Progress).where(
        Progress.user_id == user_id,
        Progress.lesson_id == lesson_id,
        col(Progress.completed).is_(True),
    )
    progress = db.exec(statement).first()
    if not progress:
        raise NotFoundError("Lesson is not marked as completed")
    db.delete(progress)
    db.commit()
    logger.info(f"User {user_id} unmarked lesson {lesson_id}")


def summarize_course(db: Session, user_id: int, course_id: int) -> CourseProgressSummary:
    if not db.get(Course, course_id):
        raise NotFoundError("Course not found")

    total_lessons = db.exec(
        select(func.count(Lesson.id)).where(Lesson.course_id == course_id)
    ).one()
    completed_lessons = db.exec(
        select(func.count(Progress.id))
        .join(Lesson, Lesson.id == Progress.lesson_id)
        .where(
            Progress.user_id == user_id,
            Lesson.course_id == course_id,
            col(Progress.completed).is_(True),
        )
    ).one()

    return CourseProgressSummary(
        course_id=course_id,
        user_id=user_id,
        completed_lessons=completed_lessons,
        total_lessons=total_lessons,
        progress_percentage=completion_percentage(completed_lessons, total_lessons),
    )


def summarize_user_courses(db: Session, user_id: int) -> List[CourseProgressSummary]:
    """Summaries for every course the user has touched at least one lesson of."""
    statement = (
        select(Lesson.course_id)
        .join(Progress, Progress.lesson_id == Lesson.id)
        .where(Progress.user_id == user_id)
        .distinct()
        .order_by(Lesson.course_id)
    )
    course_ids = db.exec(statement).all()
    return [summarize_course(db, user_id, course_id) for course_id in course_ids]
