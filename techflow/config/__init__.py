"""Configuration management for TechFlow."""

from .loader import Config, default_config_path, load_config, save_config
from .models import CacheConfig, ConfigModel, FetchConfig, SourceDescriptor, TrendingConfig
from .sources import DEFAULT_SOURCES, TRENDING_SOURCE_NAME, list_sources

__all__ = [
    "Config",
    "ConfigModel",
    "FetchConfig",
    "TrendingConfig",
    "CacheConfig",
    "SourceDescriptor",
    "DEFAULT_SOURCES",
    "TRENDING_SOURCE_NAME",
    "default_config_path",
    "list_sources",
    "load_config",
    "save_config",
]
