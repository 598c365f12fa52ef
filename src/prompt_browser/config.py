"""
Configuration management for the Prompt Browser backend.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Service configuration
    SERVICE_HOST: str = "0.0.0.0"
    SERVICE_PORT: int = 8010
    CORS_ORIGINS: List[str] = ["*"]

    # Catalog source (JSON file); the built-in sample catalog is used when unset
    CATALOG_PATH: Optional[str] = None

    # Content pane configuration
    RESOURCE_CATEGORY_MARKER: str = "0. 실습파일, 교재"
    EMPTY_CONTENT_PLACEHOLDER: str = "설명이 없습니다."
    EMPTY_SELECTION_MESSAGE: str = "카테고리를 선택하여 프롬프트를 확인하세요."
    DEFAULT_BREADCRUMB: str = "Select Category"
    PROMPT_HINT: str = "Click copy button to use this prompt"
    RESOURCE_HINT: str = "Click the button above to download resources"

    class Config:
        env_file = ".env"
        case_sensitive = True


# Global settings instance
settings = Settings()
