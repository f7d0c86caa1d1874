from .user import User, UserRole
from .course import Course
from .lesson import Lesson
from .progress import Progress

__all__ = ['User', 'UserRole', 'Course', 'Lesson', 'Progress']
