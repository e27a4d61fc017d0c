# Standard library imports
import os
from typing import Final, Optional
from dotenv import load_dotenv

REPOSITORY_BACKENDS: Final = ("mongo", "memory")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        self.app_name: Final[str] = os.getenv("APP_NAME", "Webinar API")

        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # Repository backend: "mongo" for the database, "memory" for local runs and tests
        backend = os.getenv("WEBINAR_REPOSITORY", "mongo").lower()
        if backend not in REPOSITORY_BACKENDS:
            raise ValueError(
                f"WEBINAR_REPOSITORY must be one of {', '.join(REPOSITORY_BACKENDS)}, got '{backend}'"
            )
        self.repository_backend: Final[str] = backend

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "webinars")

        # Collection Names
        self.webinars_collection: Final[str] = os.getenv("WEBINARS_COLLECTION", "webinars")


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
