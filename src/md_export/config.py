"""Configuration management for md-export."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from reportlab.lib.pagesizes import A4, letter

from md_export.renderers import PageLayout


PAGE_SIZES: dict[str, tuple[float, float]] = {
    "a4": A4,
    "letter": letter,
}


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_format: str = Field(
        default="txt",
        alias="MD_EXPORT_FORMAT",
    )
    output_dir: Path = Field(
        default=Path("."),
        alias="MD_EXPORT_OUTPUT_DIR",
    )
    page_size: Literal["a4", "letter"] = Field(
        default="a4",
        alias="MD_EXPORT_PAGE_SIZE",
    )

    @field_validator("page_size", mode="before")
    @classmethod
    def _lower_page_size(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    def page_layout(self) -> PageLayout:
        """Build the PDF page layout for the configured page size."""
        return PageLayout(page_size=PAGE_SIZES[self.page_size])


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
