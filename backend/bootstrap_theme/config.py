"""Application configuration using pydantic-settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings

from bootstrap_theme.services.glyphicons import GLYPHICON_VERSIONS


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_env: str = "development"
    app_debug: bool = True

    # Active theme
    theme_name: str = "bootstrap"
    # Comma-separated base themes, root first (e.g. "bootstrap,corporate")
    theme_base_themes: str = ""
    # JSON file with colorize/iconize table overrides for the active theme
    theme_overrides_path: str = ""

    # Bootstrap Framework
    framework_version: str = "3.3.5"
    glyphicons_enabled: bool = True

    # Documentation
    project_documentation: str = "http://drupal-bootstrap.org"
    project_branch: str = "8.x-3.x"

    # CORS
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    @field_validator("framework_version")
    @classmethod
    def validate_framework_version(cls, v: str) -> str:
        if v not in GLYPHICON_VERSIONS:
            raise ValueError(f"Unsupported Bootstrap version {v!r}, expected one of {', '.join(GLYPHICON_VERSIONS)}")
        return v

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def base_themes_list(self) -> list[str]:
        return [theme.strip() for theme in self.theme_base_themes.split(",") if theme.strip()]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
