"""Configuration management for s3-url-handler."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    otel_enabled: bool = False
    otel_service_name: str = "s3-url-handler"

    profile_name: str = "artifacts"
    default_region: str = "eu-west-1"
    credentials_filename: str = ".s3credentials"
    endpoint_url: Optional[str] = None

    model_config = {
        "env_prefix": "S3_URL_HANDLER_",
        "case_sensitive": False,
    }


settings = Settings()
