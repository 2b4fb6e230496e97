"""Configuration management for findurls."""

from .extensions import DEFAULT_EXTENSIONS_REQUIRING_PROTOCOL, EXTENSION_GROUPS
from .loader import (
    ALLOW_ALL,
    DEFAULT_CONFIG,
    DEFAULT_OPTIONS,
    AllowAll,
    ConfigError,
    ExtractOptions,
    get_config_path,
    load_config,
    merge_options,
    save_config,
)

__all__ = [
    "ALLOW_ALL",
    "AllowAll",
    "ConfigError",
    "DEFAULT_CONFIG",
    "DEFAULT_EXTENSIONS_REQUIRING_PROTOCOL",
    "DEFAULT_OPTIONS",
    "EXTENSION_GROUPS",
    "ExtractOptions",
    "get_config_path",
    "load_config",
    "merge_options",
    "save_config",
]
