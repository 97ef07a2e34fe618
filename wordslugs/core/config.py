import logging
import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from wordslugs.core.types import CaseStyle

logger = logging.getLogger(__name__)

# Project root is where the optional .env file lives
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"
DEFAULT_TOML_FILE = "config/base.toml"
CONFIG_FILE_ENV = "WORDSLUGS_CONFIG_FILE"


class GeneratorConfig(BaseModel):
    """Slug generation defaults."""

    default_word_count: int = Field(default=3, ge=1)
    default_case_style: CaseStyle = CaseStyle.KEBAB
    max_word_count: int = Field(default=12, ge=1)

    @model_validator(mode="after")
    def check_word_count_bounds(self) -> "GeneratorConfig":
        if self.default_word_count > self.max_word_count:
            raise ValueError(
                f"default_word_count ({self.default_word_count}) cannot exceed "
                f"max_word_count ({self.max_word_count})"
            )
        return self


class CatalogConfig(BaseModel):
    """Word catalog configuration."""

    validate_on_load: bool = True


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    format: str = "text"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}")
        return v.upper()

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        valid_formats = ["json", "text"]
        if v not in valid_formats:
            raise ValueError(f"format must be one of {valid_formats}")
        return v


class Settings(BaseSettings):
    """Library settings with nested configuration support."""

    model_config = SettingsConfigDict(
        env_prefix="WORDSLUGS_",
        env_file=str(ENV_FILE_PATH),
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        toml_file=[DEFAULT_TOML_FILE],
        validate_default=True,
        extra="ignore",
    )

    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # An explicit config file replaces config/base.toml
        toml_file = os.environ.get(CONFIG_FILE_ENV) or DEFAULT_TOML_FILE
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=toml_file),
            file_secret_settings,
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached Settings instance."""
    try:
        settings = Settings()
        return settings
    except Exception as e:
        logger.error(f"Failed to load configuration: {e}")
        raise
