import unittest

from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine, select

from learnhub.auth.auth_handler import create_access_token
from learnhub.configs.database import get_db
from learnhub.main import app
from learnhub.models import Course, Lesson, Progress, User, UserRole


class ApiTestCase(unittest.TestCase):
    """Fresh in-memory database per test, wired into the app through get_db."""

    def setUp(self):
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        SQLModel.metadata.create_all(self.engine)
        self.db = Session(self.engine)

        def override_get_db():
            with Session(self.engine) as session:
                yield session

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()
        self.db.close()
        SQLModel.metadata.drop_all(self.engine)
        self.engine.dispose()

    def _save(self, obj):
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def make_user(self, name="Student One", role=UserRole.student, email=None, password="not-a-real-hash") -> User:
        email = email or f"{name.lower().replace(' ', '.')}@example.com"
        return self._save(User(name=name, email=email, password=password, role=role))

    def make_course(self, teacher: User, title="English for Kids") -> Course:
        return self._save(Course(title=title, description="Basic English learning", teacher_id=teacher.id))

    def make_lesson(self, course: Course, title="Alphabet") -> Lesson:
        return self._save(Lesson(title=title, content=f"{title} content", course_id=course.id))

    def make_progress(self, user: User, lesson: Lesson, **fields) -> Progress:
        return self._save(Progress(user_id=user.id, lesson_id=lesson.id, **fields))

    def auth_headers(self, user: User) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user)}"}

    def count(self, model, **filters) -> int:
        with Session(self.engine) as session:
            rows = session.exec(select(model).filter_by(**filters)).all()
            return len(rows)
