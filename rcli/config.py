"""Configuration management with Pydantic and XDG base directory support."""

import os
from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from rcli.errors import ConfigurationError

SignFormatName = Literal["blake3", "ed25519"]
CsvFormatName = Literal["json", "yaml"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_xdg_config_home() -> Path:
    """Get XDG_CONFIG_HOME directory, defaulting to ~/.config."""
    xdg_config = os.getenv("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


class Settings(BaseSettings):
    """rcli configuration settings.

    Precedence: CLI flag > environment variable > .env file > defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="RCLI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    default_sign_format: SignFormatName = Field(
        default="blake3",
        description="Algorithm used by `text` commands when --format is omitted",
    )

    config_dir: Path | None = Field(
        default=None,
        description="Override config directory (defaults to XDG_CONFIG_HOME/rcli)",
    )

    key_dir: Path | None = Field(
        default=None,
        description="Default output directory for `text generate` (defaults to <config_dir>/keys)",
    )

    log_level: LogLevelName = Field(
        default="WARNING",
        description="Root logging level; --verbose forces DEBUG",
    )

    genpass_length: int = Field(
        default=16,
        ge=4,
        le=256,
        description="Password length used by `genpass` when --length is omitted",
    )

    csv_output_format: CsvFormatName = Field(
        default="json",
        description="Output format used by `csv` when --format is omitted",
    )

    def get_config_dir(self) -> Path:
        """Get the config directory, creating if necessary."""
        if self.config_dir:
            config_dir = self.config_dir
        else:
            config_dir = get_xdg_config_home() / "rcli"

        config_dir.mkdir(parents=True, exist_ok=True)
        return config_dir

    def get_key_dir(self) -> Path:
        """Get the default key directory, creating if necessary."""
        key_dir = self.key_dir if self.key_dir is not None else self.get_config_dir() / "keys"
        key_dir.mkdir(parents=True, exist_ok=True)
        return key_dir


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance.

    Raises:
        ConfigurationError: If the environment or .env file holds invalid values
    """
    global _settings
    if _settings is None:
        try:
            _settings = Settings()
        except ValidationError as exc:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in exc.errors()
            )
            raise ConfigurationError(f"Invalid configuration: {problems}") from exc
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
