# Standard library imports
import os
from typing import Final, List, Optional
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "Asia/Jakarta")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "follooow")

        # Collection Names
        self.influencers_collection: Final[str] = os.getenv(
            "INFLUENCERS_COLLECTION",
            "influencers"
        )

        # Request Configuration
        # Every store call made while serving a request must finish inside this deadline
        self.request_timeout_seconds: Final[float] = float(
            os.getenv("REQUEST_TIMEOUT_SECONDS", "10")
        )

        # Listing Configuration
        self.default_page_limit: Final[int] = int(
            os.getenv("DEFAULT_PAGE_LIMIT", "6")
        )
        self.quick_find_limit: Final[int] = int(
            os.getenv("QUICK_FIND_LIMIT", "20")
        )

        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # CORS Configuration
        self.cors_allow_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
            if origin.strip()
        ]

    @property
    def request_timeout_ms(self) -> int:
        """Request deadline in milliseconds (pymongo timeout options use ms)."""
        return int(self.request_timeout_seconds * 1000)


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
