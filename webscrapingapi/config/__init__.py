"""Client configuration."""

from .settings import APIConfig, ClientSettings, ConfigManager, configure_logging, load_config

__all__ = ["APIConfig", "ClientSettings", "ConfigManager", "configure_logging", "load_config"]
