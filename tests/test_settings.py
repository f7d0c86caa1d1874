import os
import unittest
from unittest.mock import patch

from learnhub.configs.settings import Settings


class TestSettings(unittest.TestCase):
    def load(self, **env) -> Settings:
        with patch.dict(os.environ, env, clear=True):
            return Settings(_env_file=None)

    def test_defaults_to_local_sqlite(self):
        settings = self.load()
        self.assertEqual(settings.database_url, "sqlite:///./learnhub.db")
        self.assertEqual(settings.ACCESS_TOKEN_EXPIRE_MINUTES, 60)

    def test_database_url_wins_over_parts(self):
        settings = self.load(DATABASE_URL="sqlite:///./other.db", DB_HOST="db")
        self.assertEqual(settings.database_url, "sqlite:///./other.db")

    def test_postgres_url_assembled_from_parts(self):
        settings = self.load(DB_HOST="db", db_user="app", DB_PASSWORD="secret", DB_NAME="courses")
        self.assertEqual(settings.database_url, "postgresql://app:secret@db:5432/courses")

    def test_unknown_variables_are_ignored(self):
        settings = self.load(CELERY_BROKER_URL="redis://localhost", LOG_LEVEL="DEBUG")
        self.assertEqual(settings.LOG_LEVEL, "DEBUG")
        self.assertFalse(hasattr(settings, "CELERY_BROKER_URL"))


if __name__ == '__main__':
    unittest.main()
