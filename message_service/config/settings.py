"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


class Config:
    # App settings
    APP_ENV = os.getenv("APP_ENV", "development")
    DEBUG = _env_flag("DEBUG")
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5001"))
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

    # Persistence
    # "memory": process-local dict, lost on restart (default, used by tests)
    # "prisma": PostgreSQL through the generated Prisma client (see schema.prisma)
    MESSAGE_STORE = os.getenv("MESSAGE_STORE", "memory").lower()
    DATABASE_URL = os.getenv("DATABASE_URL", "")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(name)s] [%(correlation_id)s] %(message)s",
    )
