"""Configuration management for the WebScrapingAPI client."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from ..core.models import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)


class APIConfig(BaseModel):
    """Transport configuration for the scraping endpoint."""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(default=30.0, gt=0.0)
    max_keepalive_connections: int = Field(default=5, ge=0)
    max_connections: int = Field(default=10, ge=1)


class ClientSettings(BaseModel):
    """Main client configuration.

    The API key is passed to the client directly and never stored here.
    """
    api: APIConfig = Field(default_factory=APIConfig)

    # Logging
    log_level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    log_file: str | None = None


class ConfigManager:
    """Reads and writes ClientSettings as YAML at a fixed path."""

    def __init__(self, config_path: Path):
        self.config_path = Path(config_path)
        self._config: ClientSettings | None = None

    def load(self) -> ClientSettings:
        """Load settings from the file, or defaults if it is missing or invalid."""
        try:
            data = yaml.safe_load(self.config_path.read_text(encoding="utf-8"))
            self._config = ClientSettings.model_validate(data or {})
        except FileNotFoundError:
            logger.info(f"No config at {self.config_path}, using defaults")
            self._config = ClientSettings()
        except (OSError, yaml.YAMLError, ValidationError) as e:
            logger.warning(f"Invalid config {self.config_path}, using defaults: {e}")
            self._config = ClientSettings()
        return self._config

    def save(self, config: ClientSettings | None = None) -> None:
        """Write the given (or last loaded) settings to the file."""
        settings = config or self._config
        if settings is None:
            raise ValueError("No configuration to save")

        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(
            yaml.safe_dump(settings.model_dump(), sort_keys=False), encoding="utf-8"
        )
        logger.info(f"Wrote config to {self.config_path}")

    def get_config(self) -> ClientSettings:
        if self._config is None:
            return self.load()
        return self._config


def load_config(config_path: Path | None = None) -> ClientSettings:
    """Load configuration from a specific path, or return defaults."""
    if config_path:
        return ConfigManager(config_path).load()
    return ClientSettings()


def configure_logging(settings: ClientSettings) -> None:
    """Configure root logging for applications embedding the client."""
    kwargs = {"level": getattr(logging, settings.log_level)}
    if settings.log_file:
        kwargs["filename"] = settings.log_file
    logging.basicConfig(**kwargs)
