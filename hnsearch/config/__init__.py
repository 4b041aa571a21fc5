"""Configuration module for hnsearch."""

from hnsearch.config.loader import get_config_path, load_config, save_config
from hnsearch.config.schema import Config, SearchConfig, StorageConfig

__all__ = [
    "Config",
    "SearchConfig",
    "StorageConfig",
    "get_config_path",
    "load_config",
    "save_config",
]
