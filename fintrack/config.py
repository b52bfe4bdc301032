"""
Configuration module for the fintrack data-access layer.

Loads environment variables and validates required settings.
"""
import logging
import os

from dotenv import load_dotenv

# Load .env file
load_dotenv()

logger = logging.getLogger(__name__)


class Settings:
    """Application settings loaded from environment variables."""

    # Supabase Configuration
    SUPABASE_URL: str = os.getenv("SUPABASE_URL", "")
    # Public (anon) key of the project; every query runs under RLS
    SUPABASE_ANON_KEY: str = os.getenv("SUPABASE_ANON_KEY", "")

    # Auth redirects (email confirmation, OAuth)
    SITE_URL: str = os.getenv("SITE_URL", "http://localhost:5173")
    AUTH_REDIRECT_PATH: str = os.getenv("AUTH_REDIRECT_PATH", "/dashboard")

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def auth_redirect_url(self) -> str:
        """Where the identity provider sends the user after sign-in or confirmation."""
        return f"{self.SITE_URL.rstrip('/')}{self.AUTH_REDIRECT_PATH}"

    @classmethod
    def validate(cls) -> None:
        """
        Validate that all required settings are configured.

        Raises:
            ValueError: If any required setting is missing.
        """
        required_settings = {
            "SUPABASE_URL": cls.SUPABASE_URL,
            "SUPABASE_ANON_KEY": cls.SUPABASE_ANON_KEY,
        }

        missing = [key for key, value in required_settings.items() if not value]

        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Please check your .env file."
            )

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT.lower() == "development"


# Create a singleton instance
settings = Settings()

# Validate settings on module import (fail fast outside development)
# Skipped during tests via VALIDATE_CONFIG=false
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        if settings.is_development():
            logger.warning(f"{e} The client will not reach Supabase until .env is configured.")
        else:
            raise
