"""Configuration module for newsapix."""

from newsapix.config.factory import create_client, create_from_config
from newsapix.config.loader import get_default_config_path, load_config
from newsapix.config.models import LoggingConfig, NewsApiClientConfig, NewsApiXConfig

__all__ = [
    "LoggingConfig",
    "NewsApiClientConfig",
    "NewsApiXConfig",
    "create_client",
    "create_from_config",
    "get_default_config_path",
    "load_config",
]
