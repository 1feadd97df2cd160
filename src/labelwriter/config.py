"""Configuration management for labelwriter."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from labelwriter.errors import ConfigError
from labelwriter.models.printer import PrinterConfig, PrinterInterface

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Environment-based settings.

    Printer fields left unset fall back to the config file.
    """

    model_config = SettingsConfigDict(
        env_prefix="LABELWRITER_",
        env_file=".env",
        extra="ignore",
    )

    config_file: Path = Path("labelwriter.yaml")
    debug: bool = False

    interface: PrinterInterface | None = None
    host: str | None = None
    port: int | None = None
    device_id: str | None = None
    device: str | None = None


def load_config(config_path: Path) -> PrinterConfig:
    """Load printer configuration from the ``printer`` section of a YAML file.

    Raises:
        ConfigError: If the file cannot be parsed or does not validate.
    """
    if not config_path.exists():
        return PrinterConfig()

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {config_path}")

    # YAML returns None for an empty "printer:" key
    printer_data = data.get("printer") or {}
    try:
        return PrinterConfig.model_validate(printer_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid printer configuration in {config_path}: {e}") from e


def resolve_config(settings: Settings) -> PrinterConfig:
    """Load the config file and apply environment overrides."""
    config = load_config(settings.config_file)
    overrides = {
        key: value
        for key, value in settings.model_dump(include={"interface", "host", "port", "device_id", "device"}).items()
        if value is not None
    }
    if overrides:
        logger.debug(f"Environment overrides: {', '.join(sorted(overrides))}")
        config = config.model_copy(update=overrides)
    return config


# Global settings instance
settings = Settings()
