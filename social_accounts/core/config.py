# Standard library imports
import os
from typing import Final, Optional

# External package imports
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "social_accounts")

        # Password Hashing Configuration
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "10"))
        self.hash_timeout_seconds: Final[float] = float(
            os.getenv("HASH_TIMEOUT_SECONDS", "10.0")
        )

        # User Record Validation
        self.password_min_length: Final[int] = int(os.getenv("PASSWORD_MIN_LENGTH", "6"))
        self.name_max_length: Final[int] = int(os.getenv("NAME_MAX_LENGTH", "10"))

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Loads a local .env file (if present) the first time settings are built.

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        load_dotenv()
        _settings = Settings()
    return _settings
