import logging
from typing import Optional, List

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from learnhub.auth.auth_handler import get_password_hash
from learnhub.models import User, UserRole
from learnhub.schemas.user_schema import UserCreateRequest
from learnhub.utils.errors import ConflictError, ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)

# admins are created out of band, never through the public register endpoint
SELF_REGISTER_ROLES = (UserRole.student, UserRole.teacher)


def create_user(user_req: UserCreateRequest, db: Session) -> User:
    if user_req.role not in SELF_REGISTER_ROLES:
        raise ForbiddenError(f"Cannot register with role {user_req.role.value}")
    if get_user_by_email(user_req.email, db):
        raise ConflictError("Email already registered")
    user = User(
        name=user_req.name,
        email=user_req.email,
        password=get_password_hash(user_req.password),
        role=user_req.role,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("Email already registered")
    db.refresh(user)
    logger.info(f"Registered user {user.id} ({user.role.value})")
    return user


def get_user(user_id: int, db: Session) -> User:
    user = db.get(User, user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


def get_user_by_email(email: str, db: Session) -> Optional[User]:
    statement = select(User).where(User.email == email)
    return db.exec(statement).first()


def list_users(db: Session) -> List[User]:
    statement = select(User).order_by(User.id)
    return db.exec(statement).all()
