# app/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from typing import Optional
from pathlib import Path

# =============================================================================
# Console Access Config (nested)
# =============================================================================
class ConsoleAccessSettings(BaseSettings):
    """Credentials and endpoints of the device management Console"""

    console_endpoint: str = ""
    portal_authorization_endpoint: str = ""
    client_id: str = ""
    client_secret: str = ""

    # HTTP
    request_timeout: int = 30

    @field_validator('console_endpoint', 'portal_authorization_endpoint')
    @classmethod
    def strip_trailing_slash(cls, v):
        return v.strip().rstrip('/')

    @field_validator('request_timeout')
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("Request timeout must be positive")
        return v

    @property
    def is_complete(self) -> bool:
        return all([
            self.console_endpoint,
            self.portal_authorization_endpoint,
            self.client_id,
            self.client_secret
        ])

    # -------------------------------------------------------------------------
    # Pydantic Settings Config
    # -------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_prefix="CONSOLE_ACCESS_",   # map .env variables like CONSOLE_ACCESS_CLIENT_ID
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


# =============================================================================
# Main Application Settings
# =============================================================================
class Settings(BaseSettings):
    """Application settings with validation"""

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = "Edge Inference Viewer"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 3000

    # Used when a request does not pass numberOfImages
    default_number_of_images: int = 5

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    log_format: str = "json"  # json, console
    log_file_path: Optional[Path] = None
    log_max_size: str = "100MB"
    log_backup_count: int = 5

    # -------------------------------------------------------------------------
    # Nested Console Access Config
    # -------------------------------------------------------------------------
    console_access: ConsoleAccessSettings = ConsoleAccessSettings()

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator('log_format')
    @classmethod
    def validate_log_format(cls, v):
        if v not in ('json', 'console'):
            raise ValueError("Log format must be one of: ['json', 'console']")
        return v

    @field_validator('default_number_of_images')
    @classmethod
    def validate_number_of_images(cls, v):
        if v < 1:
            raise ValueError("Default number of images must be at least 1")
        return v

    # -------------------------------------------------------------------------
    # Pydantic Settings Config
    # -------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
