"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}

STORAGE_BACKENDS = ("memory", "prisma")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class BaseConfig:
    # Uvicorn auto-reload and verbose server logs (run_fastapi.py)
    DEBUG = os.getenv("DEBUG", "false").lower() in _TRUTHY

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(name)s] [%(correlation_id)s] %(message)s",
    )

    # Storage
    # "memory" keeps everything in-process (local development, tests)
    # "prisma" talks to PostgreSQL through the generated Prisma client
    STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "memory").lower()
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")

    # Message pagination
    MESSAGE_PAGE_DEFAULT_LIMIT: int = int(
        os.getenv("MESSAGE_PAGE_DEFAULT_LIMIT", "50")
    )
    MESSAGE_PAGE_MAX_LIMIT: int = int(os.getenv("MESSAGE_PAGE_MAX_LIMIT", "100"))

    # Auth (tokens are issued elsewhere, only verified here)
    SERVICE_AUTH_SECRET = os.getenv("SERVICE_AUTH_SECRET", "")
    SERVICE_AUTH_ISSUER = os.getenv("SERVICE_AUTH_ISSUER", "your_service_name")
    SERVICE_AUTH_AUDIENCE = os.getenv("SERVICE_AUTH_AUDIENCE", "your_service_audience")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "5001"))


class DevelopmentConfig(BaseConfig):
    """Development configuration"""

    DEBUG = True


class TestingConfig(BaseConfig):
    """Testing configuration"""

    STORAGE_BACKEND = "memory"


class ProductionConfig(BaseConfig):
    """Production configuration"""

    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "prisma").lower()


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])


# Active configuration, chosen once from APP_ENV at import
Config = get_config()


def validate_config(cfg=None) -> None:
    """
    Check a configuration class for values the service cannot run with.

    Raises:
        ValueError: listing every problem found, one per line
    """
    if cfg is None:
        cfg = Config
    problems = []

    if cfg.STORAGE_BACKEND not in STORAGE_BACKENDS:
        problems.append(
            f"STORAGE_BACKEND: must be one of {', '.join(STORAGE_BACKENDS)}, "
            f"got {cfg.STORAGE_BACKEND!r}"
        )
    if cfg.STORAGE_BACKEND == "prisma" and not cfg.DATABASE_URL:
        problems.append("DATABASE_URL: required when STORAGE_BACKEND is prisma")
    if cfg.MESSAGE_PAGE_DEFAULT_LIMIT < 1:
        problems.append("MESSAGE_PAGE_DEFAULT_LIMIT: must be positive")
    if cfg.MESSAGE_PAGE_MAX_LIMIT < 1:
        problems.append("MESSAGE_PAGE_MAX_LIMIT: must be positive")
    if cfg.MESSAGE_PAGE_DEFAULT_LIMIT > cfg.MESSAGE_PAGE_MAX_LIMIT:
        problems.append(
            "MESSAGE_PAGE_DEFAULT_LIMIT: cannot exceed MESSAGE_PAGE_MAX_LIMIT"
        )
    if cfg.LOG_LEVEL.upper() not in LOG_LEVELS:
        problems.append(
            f"LOG_LEVEL: must be one of {', '.join(LOG_LEVELS)}, got {cfg.LOG_LEVEL!r}"
        )

    if problems:
        details = "\n".join(f"  - {p}" for p in problems)
        raise ValueError(f"Environment variable validation failed:\n{details}")
