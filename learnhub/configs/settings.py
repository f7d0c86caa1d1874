import os
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # project-root local.env, unless ENV_FILE points elsewhere
        env_file=os.getenv("ENV_FILE") or str(Path(__file__).parent.parent.parent / "local.env"),
        case_sensitive=False,
        extra="ignore",
    )

    # Database settings. DATABASE_URL wins; otherwise a PostgreSQL URL is
    # assembled from the DB_* parts when DB_HOST is set.
    DATABASE_URL: Optional[str] = None
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""
    DB_HOST: Optional[str] = None
    DB_PORT: str = "5432"
    DB_NAME: str = "learnhub"
    DB_ECHO: bool = False

    # JWT settings
    JWT_ACCESS_SECRET: str = "dev-access-secret-change-me"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # Optional development settings
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.DB_HOST:
            return f"postgresql://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        return "sqlite:///./learnhub.db"


settings = Settings()
