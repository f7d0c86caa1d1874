import logging
from typing import List

from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from learnhub.auth.permissions import ensure_owner
from learnhub.models import Course, User
from learnhub.schemas.course_schema import CourseCreateRequest, CourseUpdateRequest
from learnhub.utils.errors import NotFoundError
from learnhub.utils.utils import utcnow

logger = logging.getLogger(__name__)


def list_courses(db: Session) -> List[Course]:
    statement = select(Course).options(selectinload(Course.teacher)).order_by(Course.id)
    return db.exec(statement).all()


def get_course(db: Session, course_id: int) -> Course:
    course = db.get(Course, course_id)
    if not course:
        raise NotFoundError("Course not found")
    return course


def create_course(db: Session, course_req: CourseCreateRequest, teacher: User) -> Course:
    course = Course(title=course_req.title, description=course_req.description, teacher_id=teacher.id)
    db.add(course)
    db.commit()
    db.refresh(course)
    logger.info(f"User {teacher.id} created course {course.id}")
    return course


def update_course(db: Session, course_id: int, course_req: CourseUpdateRequest, acting_user: User) -> Course:
    course = get_course(db, course_id)
    ensure_owner(acting_user, course.teacher_id)
    for key, value in course_req.model_dump(exclude_unset=True).items():
        if key == "title" and value is None:
            continue
        setattr(course, key, value)
    course.updated_at = utcnow()
    db.add(course)
    db.commit()
    db.refresh(course)
    return course


def delete_course(db: Session, course_id: int, acting_user: User) -> None:
    course = get_course(db, course_id)
    ensure_owner(acting_user, course.teacher_id)
    # lessons and their progress rows go with it through the relationship cascade
    db.delete(course)
    db.commit()
    logger.info(f"User {acting_user.id} deleted course {course_id}")
