# worklog/config/settings.py
# Environment driven configuration for the work-log service

import os
from typing import List

from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()


class Settings:
    """Application settings read from the environment (.env is loaded first)"""

    # Database settings
    DATABASE_URL = os.getenv("DATABASE_URL")
    DB_HOST = os.getenv("DB_HOST", "localhost")
    DB_PORT = int(os.getenv("DB_PORT", "5432"))
    DB_USERNAME = os.getenv("DB_USERNAME", "postgres")
    DB_PASSWORD = os.getenv("DB_PASSWORD", "")
    DB_NAME = os.getenv("DB_NAME", "worklog")
    DB_SSLMODE = os.getenv("DB_SSLMODE", "disable")
    SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

    # Server settings
    SERVER_HOST = os.getenv("SERVER_HOST", "0.0.0.0")
    SERVER_PORT = int(os.getenv("SERVER_PORT", "8000"))
    RELOAD = os.getenv("RELOAD", "false").lower() == "true"
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Comma separated allow-list of frontend origins
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:4173,http://localhost:5173")

    @classmethod
    def database_url(cls):
        """Full DATABASE_URL wins, otherwise the URL is assembled from the DB_* parts"""
        if cls.DATABASE_URL:
            return cls.DATABASE_URL

        return URL.create(
            "postgresql+psycopg2",
            username=cls.DB_USERNAME,
            password=cls.DB_PASSWORD or None,
            host=cls.DB_HOST,
            port=cls.DB_PORT,
            database=cls.DB_NAME,
        )

    @classmethod
    def cors_origins(cls) -> List[str]:
        return [origin.strip() for origin in cls.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
