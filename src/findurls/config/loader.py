"""Extraction options and configuration file handling."""

import logging
from enum import Enum
from pathlib import Path
from typing import Any, FrozenSet, Mapping, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .extensions import DEFAULT_EXTENSIONS_REQUIRING_PROTOCOL

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or validated."""

    pass


class AllowAll(str, Enum):
    """Protocol policy that accepts any scheme."""

    ALL = "*"


ALLOW_ALL = AllowAll.ALL


class ExtractOptions(BaseModel):
    """Options controlling URL extraction.

    Instances are immutable. Use ``merge_options`` to derive a new set of
    options from the defaults.
    """

    model_config = ConfigDict(frozen=True)

    # Reject candidates without an explicit or protocol-relative scheme
    require_protocol: bool = False
    # Scheme added to bare candidates ("" disables defaulting)
    default_protocol: str = "https"
    # Concrete scheme list, or ALLOW_ALL
    allowed_protocols: Union[AllowAll, Tuple[str, ...]] = ("http", "https")
    # Bare, path-less candidates ending in these are treated as filenames
    extensions_requiring_protocol: FrozenSet[str] = DEFAULT_EXTENSIONS_REQUIRING_PROTOCOL
    # Dotless hostnames that are still accepted
    allowed_bare_hostnames: Tuple[str, ...] = ("localhost",)
    deduplicate: bool = False

    @field_validator("allowed_protocols", mode="before")
    @classmethod
    def _null_means_allow_all(cls, value: Any) -> Any:
        if value is None:
            return ALLOW_ALL
        return value

    @field_validator("extensions_requiring_protocol", mode="before")
    @classmethod
    def _normalize_extensions(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple, set, frozenset)):
            return frozenset(str(ext).lower().lstrip(".") for ext in value)
        return value

    @property
    def allows_any_protocol(self) -> bool:
        return self.allowed_protocols is ALLOW_ALL

    def allows_protocol(self, protocol: str) -> bool:
        """Check a scheme (without trailing colon) against the allow-list."""
        if self.allows_any_protocol:
            return True
        return protocol in self.allowed_protocols


DEFAULT_OPTIONS = ExtractOptions()


def merge_options(
    options: Optional[Union[ExtractOptions, Mapping[str, Any]]] = None,
    **overrides: Any,
) -> ExtractOptions:
    """
    Merge caller options over the defaults.

    Fields the caller does not mention keep their default value. An explicit
    ``allowed_protocols=None`` means "allow every protocol", which is not the
    same as leaving the field out.

    Args:
        options: Existing options, a mapping of field values, or None
        **overrides: Field values applied on top of ``options``

    Returns:
        A new, validated ExtractOptions
    """
    if options is None and not overrides:
        return DEFAULT_OPTIONS

    if isinstance(options, ExtractOptions):
        values = options.model_dump()
    else:
        values = dict(options or {})

    values.update(overrides)
    return ExtractOptions(**values)


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "findurls" / "config.yml"


DEFAULT_CONFIG = """# findurls configuration

# Only extract candidates written with a protocol (https://...) or as //host
require_protocol: false

# Protocol added to bare domains such as example.com ("" disables this)
default_protocol: https

# Protocols kept in the results. Use "*" (or null) to accept any protocol.
allowed_protocols:
  - http
  - https

# Hostnames without a dot that are still treated as URLs
allowed_bare_hostnames:
  - localhost

# Drop matches whose normalized URL was already found
deduplicate: false

# Bare names ending in these extensions (readme.txt) need a protocol or path.
# Leave unset to use the built-in list.
# extensions_requiring_protocol:
#   - txt
#   - pdf
"""


def load_config(config_path: Optional[Path] = None) -> ExtractOptions:
    """Load options from a YAML file, or the defaults if it does not exist."""
    if config_path is None:
        config_path = get_config_path()

    config_path = Path(config_path)
    if not config_path.exists():
        logger.debug(f"No config at {config_path}, using defaults")
        return DEFAULT_OPTIONS

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping in {config_path}, got {type(data).__name__}")

    try:
        return merge_options(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid options in {config_path}: {e}") from e


def save_config(options: ExtractOptions, config_path: Optional[Path] = None):
    """Save options to a YAML file."""
    if config_path is None:
        config_path = get_config_path()

    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = options.model_dump(mode="json", exclude={"extensions_requiring_protocol"})

    # Only write the extension list when it differs from the built-in one
    if options.extensions_requiring_protocol != DEFAULT_EXTENSIONS_REQUIRING_PROTOCOL:
        data["extensions_requiring_protocol"] = sorted(options.extensions_requiring_protocol)

    with open(config_path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
