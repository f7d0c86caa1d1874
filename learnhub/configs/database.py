from sqlmodel import SQLModel, create_engine, Session

from .settings import settings

DATABASE_URL = settings.database_url

# SQLite connections are handed between the threadpool workers FastAPI runs sync routes on
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, echo=settings.DB_ECHO, connect_args=connect_args)


def init_db():
    # Register every table on the metadata before creating it
    import learnhub.models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_db():
    with Session(engine) as session:
        yield session
