# dashboard/adapters/configuration/config.py

from logging import getLevelName
from pydantic import field_validator, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"  # "development", "production", "testing"
    DEBUG: bool = False
    USE_HTTPS: bool = False

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./dashboard.db"
    DB_ECHO: bool = False

    # Auth
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    BCRYPT_ROUNDS: int = 12
    TOKEN_HEADER: str = "accesstoken"

    # Token blacklist maintenance (0 disables the background task)
    BLACKLIST_CLEANUP_INTERVAL_SECONDS: int = 24 * 60 * 60

    @field_validator("DATABASE_URL", mode="before")
    def assemble_db_url(cls, value: str) -> str:
        """
        Swap sync drivers for their asyncio counterparts so a plain
        DATABASE_URL copied from other tooling still works.
        """
        value = str(value)
        if value.startswith("postgresql+psycopg2://") or value.startswith("postgresql://"):
            return "postgresql+asyncpg://" + value.split("://", 1)[1]
        if value.startswith("sqlite://"):
            return "sqlite+aiosqlite://" + value.split("://", 1)[1]
        return value

    @field_validator("SECRET_KEY")
    def validate_secret_key(cls, v: str) -> str:
        if len(v) < 32:
            raise ValueError("SECRET_KEY must be at least 32 characters long")
        return v

    @field_validator("BCRYPT_ROUNDS")
    def validate_bcrypt_rounds(cls, v: int) -> int:
        # bcrypt only accepts log2 cost factors in this range
        if not 4 <= v <= 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return v

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, v: str) -> str:
        """Ensure the value is a valid logging level"""
        lvl = str(v).upper()
        if not isinstance(getLevelName(lvl), int):
            raise ValueError(f"Invalid LOG_LEVEL: {v!r}")
        return lvl

    model_config = ConfigDict(env_file=".env", extra="ignore")
