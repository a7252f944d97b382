"""Configuration settings for the plan ingestor."""
import os
from typing import List, Literal


EnvironmentType = Literal["development", "staging", "production"]

DEFAULT_MAX_PLAN_TEXT_LENGTH = 100_000
DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173"


class Settings:
    """Application settings."""

    # Environment
    ENVIRONMENT: EnvironmentType = "development"

    # Request limits
    MAX_PLAN_TEXT_LENGTH: int = DEFAULT_MAX_PLAN_TEXT_LENGTH

    # CORS
    CORS_ALLOWED_ORIGINS: List[str] = []

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"

        # Request limits
        try:
            self.MAX_PLAN_TEXT_LENGTH = int(os.getenv("MAX_PLAN_TEXT_LENGTH", DEFAULT_MAX_PLAN_TEXT_LENGTH))
        except ValueError:
            self.MAX_PLAN_TEXT_LENGTH = DEFAULT_MAX_PLAN_TEXT_LENGTH

        # CORS
        origins = os.getenv("CORS_ALLOWED_ORIGINS", DEFAULT_CORS_ORIGINS)
        self.CORS_ALLOWED_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]


settings = Settings()
