from .user_schema import UserCreateRequest, LoginRequest, UserResponse, RegisterResponse
from .token import Token
from .course_schema import (
    TeacherSummary,
    CourseCreateRequest,
    CourseUpdateRequest,
    CourseResponse,
    LessonCreateRequest,
    LessonUpdateRequest,
    LessonResponse,
    MessageResponse,
)
from .progress_schema import (
    ProgressUpdateRequest,
    LessonRef,
    ProgressResponse,
    CompletedLessonResponse,
    ProgressUpdateResponse,
    CourseProgressSummary,
)
