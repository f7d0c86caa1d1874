#!/usr/bin/env python3
"""
Database initialization script.
Run this to create all database tables, optionally with demo data:

    python -m learnhub.init_db --seed
"""

import argparse
import logging
import sys

from sqlmodel import Session, select, text

from learnhub.auth.auth_handler import get_password_hash
from learnhub.configs.database import engine, init_db
from learnhub.models import Course, Lesson, Progress, User, UserRole
from learnhub.utils.utils import utcnow

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
)
logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"


def seed(session: Session) -> bool:
    """Insert demo users, courses, lessons and progress. Skips a non-empty database."""
    if session.exec(select(User)).first():
        logger.warning("Users already present, skipping demo data")
        return False

    password = get_password_hash(DEMO_PASSWORD)
    admin = User(name="Admin User", email="admin@example.com", password=password, role=UserRole.admin)
    teacher = User(name="Teacher One", email="teacher1@example.com", password=password, role=UserRole.teacher)
    student = User(name="Student One", email="student1@example.com", password=password, role=UserRole.student)
    session.add_all([admin, teacher, student])
    session.flush()

    kids = Course(title="English for Kids", description="Basic English learning", teacher_id=teacher.id)
    advanced = Course(title="Advanced English", description="Grammar and pronunciation", teacher_id=teacher.id)
    session.add_all([kids, advanced])
    session.flush()

    alphabet = Lesson(title="Alphabet", content="Learn the English alphabet", course_id=kids.id)
    greetings = Lesson(title="Basic Greetings", content="Say Hello & Goodbye", course_id=kids.id)
    tenses = Lesson(title="Verb Tenses", content="Learn present, past, and future", course_id=advanced.id)
    session.add_all([alphabet, greetings, tenses])
    session.flush()

    session.add_all([
        Progress(user_id=student.id, lesson_id=alphabet.id, completed=True,
                 progress_percentage=100.0, completed_at=utcnow()),
        Progress(user_id=student.id, lesson_id=greetings.id, progress_percentage=40.0),
    ])
    session.commit()
    logger.info(f"Seeded 3 users, 2 courses, 3 lessons (password: {DEMO_PASSWORD})")
    return True


def main():
    """Initialize the database schema."""
    parser = argparse.ArgumentParser(description="Create learnhub tables")
    parser.add_argument("--seed", action="store_true", help="insert demo data into an empty database")
    args = parser.parse_args()

    try:
        logger.info("Testing database connection...")
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))

        init_db()
        logger.info("Database schema created")

        if args.seed:
            with Session(engine) as session:
                seed(session)
    except Exception:
        logger.exception("Error initializing database")
        sys.exit(1)


if __name__ == "__main__":
    main()
