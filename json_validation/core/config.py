"""
Application configuration.

Loads settings from environment variables and .env file.
The middleware itself takes no configuration; these settings only
drive the sample host application.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "JSON Validation"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
