import logging

from fastapi import Depends

from learnhub.auth.auth_handler import get_current_user
from learnhub.models import User, UserRole
from learnhub.utils.errors import ForbiddenError

logger = logging.getLogger(__name__)


def require_roles(*roles: UserRole):
    """Dependency factory: the caller's role must be one of ``roles``."""

    def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in roles:
            logger.warning(f"User {current_user.id} with role {current_user.role} denied, needs one of {[r.value for r in roles]}")
            raise ForbiddenError("Forbidden")
        return current_user

    return role_checker


def can_modify(role: UserRole | str, user_id: int, owner_id: int) -> bool:
    if role == UserRole.admin:
        return True
    return role == UserRole.teacher and user_id == owner_id


def ensure_owner(user: User, owner_id: int, detail: str = "Unauthorized action") -> None:
    if not can_modify(user.role, user.id, owner_id):
        logger.warning(f"User {user.id} is not the owner ({owner_id}) of the resource")
        raise ForbiddenError(detail)


require_student = require_roles(UserRole.student)
require_staff = require_roles(UserRole.teacher, UserRole.admin)
require_admin = require_roles(UserRole.admin)
