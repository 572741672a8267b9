"""
Application configuration via Pydantic Settings
"""
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings read from environment variables"""

    # Application Settings
    APP_NAME: str = "receipt-processor"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # CORS Settings
    ALLOWED_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Include the error kind and field in 400 responses
    EXPOSE_VALIDATION_ERRORS: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def allowed_origins_list(self) -> List[str]:
        """Split CORS origins into a list"""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


# Singleton instance
_settings: Settings = None


def get_settings() -> Settings:
    """Get settings (singleton)"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
