"""Configuration management for the Apillon MCP server"""

from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_API_URL = "https://api.apillon.io"


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # Credentials (empty values are allowed, the platform rejects the call)
    apillon_api_key: str = ""
    apillon_api_secret: str = ""

    # Remote platform
    apillon_api_url: str = DEFAULT_API_URL
    request_timeout: float = 60.0

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @property
    def has_credentials(self) -> bool:
        """Check if both Apillon credentials are configured"""
        return bool(self.apillon_api_key and self.apillon_api_secret)


def get_config() -> Settings:
    """Load settings from the environment."""
    return Settings()
