"""Configuration settings for tuiter."""
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Tuiter service configuration."""

    # Service
    SERVICE_NAME: str = "tuiter"
    SERVICE_VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 4000

    # Storage backing: 'memory' or 'dynamodb'
    STORAGE_BACKEND: str = "memory"

    # DynamoDB
    DYNAMODB_ENDPOINT: str = "http://dynamodb-local:8000"
    DYNAMODB_REGION: str = "us-east-1"
    DYNAMODB_ACCESS_KEY: str = "fake"
    DYNAMODB_SECRET_KEY: str = "fake"
    USERS_TABLE_NAME: str = "users"
    TUITS_TABLE_NAME: str = "tuits"
    SESSIONS_TABLE_NAME: str = "sessions"

    # Sessions
    SESSION_COOKIE_NAME: str = "tuiter_session"
    SESSION_COOKIE_SECURE: bool = False
    SESSION_COOKIE_SAMESITE: str = "lax"  # 'none' for cross-site clients (requires SECURE)
    SESSION_TTL_SECONDS: int = 60 * 60 * 24

    # Passwords
    BCRYPT_ROUNDS: int = 12

    # CORS (credentialed requests need explicit origins, never '*')
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
    ]

    # Placeholder author identity stamped on new tuits
    TUIT_DEFAULT_HANDLE: str = "@nasa"
    TUIT_DEFAULT_USER_NAME: str = "Nasa"
    TUIT_DEFAULT_IMAGE: str = "nasa.png"
    TUIT_DEFAULT_TIME: str = "1h"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True
    )


# Global settings instance
settings = Settings()
