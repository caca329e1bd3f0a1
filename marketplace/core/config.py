import os
from dotenv import load_dotenv

load_dotenv(override=True)

DATABASE_URL = os.getenv("DATABASE_URL")

DB_DRIVER = os.getenv("DB_DRIVER", "postgresql+asyncpg")
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PASSWORD = os.getenv("DB_PASSWORD", "")
DB_ECHO = os.getenv("DB_ECHO", "false").lower() in ("1", "true", "yes")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def build_database_url(dbname: str, port: str, user: str) -> str:
    """Собирает URL подключения из аргументов командной строки.

    DATABASE_URL из окружения имеет приоритет над аргументами.
    """
    if DATABASE_URL:
        return DATABASE_URL

    credentials = f"{user}:{DB_PASSWORD}" if DB_PASSWORD else user
    return f"{DB_DRIVER}://{credentials}@{DB_HOST}:{port}/{dbname}"
