"""Configuration management for the application."""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = "MTG SVG Maker"
    app_version: str = "0.1.0"
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Output
    output_dir: Path = Field(default=Path("."))

    # Sprite sheets
    cards_per_row: int = Field(default=4, ge=1)
    spacing: int = Field(default=30, ge=0)

    # Assets
    embed_font: bool = Field(default=False)
    font_path: Optional[Path] = Field(default=None)
    icons_dir: Optional[Path] = Field(default=None)

    model_config = SettingsConfigDict(
        env_prefix="MTG_SVG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
