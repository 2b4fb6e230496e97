"""Tests for option handling and config files."""

import pytest
from pydantic import ValidationError

from findurls.config import (
    ALLOW_ALL,
    DEFAULT_CONFIG,
    DEFAULT_EXTENSIONS_REQUIRING_PROTOCOL,
    DEFAULT_OPTIONS,
    ConfigError,
    ExtractOptions,
    load_config,
    merge_options,
    save_config,
)


def test_default_options():
    """Test ExtractOptions has the expected defaults."""
    options = ExtractOptions()

    assert options.require_protocol is False
    assert options.default_protocol == "https"
    assert options.allowed_protocols == ("http", "https")
    assert options.allowed_bare_hostnames == ("localhost",)
    assert options.deduplicate is False
    assert options.extensions_requiring_protocol == DEFAULT_EXTENSIONS_REQUIRING_PROTOCOL


def test_default_extensions_skip_real_tlds():
    """Test extensions that are also TLDs aren't in the default list."""
    for tld in ("md", "zip", "rs", "pm", "app", "so"):
        assert tld not in DEFAULT_EXTENSIONS_REQUIRING_PROTOCOL
    assert "txt" in DEFAULT_EXTENSIONS_REQUIRING_PROTOCOL


def test_merge_keeps_unspecified_defaults():
    """Test merging only changes the given fields."""
    options = merge_options(deduplicate=True)

    assert options.deduplicate is True
    assert options.allowed_protocols == ("http", "https")
    assert options.default_protocol == "https"


def test_merge_without_arguments_returns_defaults():
    """Test no options means the defaults."""
    assert merge_options() is DEFAULT_OPTIONS


def test_none_allowed_protocols_means_allow_all():
    """Test an explicit None allows any protocol."""
    options = merge_options(allowed_protocols=None)

    assert options.allowed_protocols is ALLOW_ALL
    assert options.allows_any_protocol
    assert options.allows_protocol("gopher")


def test_concrete_allowed_protocols():
    """Test a concrete allow-list."""
    options = merge_options({"allowed_protocols": ["ftp"]})

    assert options.allowed_protocols == ("ftp",)
    assert not options.allows_any_protocol
    assert options.allows_protocol("ftp")
    assert not options.allows_protocol("https")


def test_merge_over_existing_options():
    """Test overrides are applied on top of an options object."""
    base = merge_options(allowed_protocols=None, require_protocol=True)
    options = merge_options(base, deduplicate=True)

    assert options.allowed_protocols is ALLOW_ALL
    assert options.require_protocol is True
    assert options.deduplicate is True


def test_extensions_are_normalized():
    """Test extensions are lowercased and lose a leading dot."""
    options = merge_options(extensions_requiring_protocol=["TXT", ".Pdf"])
    assert options.extensions_requiring_protocol == frozenset({"txt", "pdf"})


def test_options_are_frozen():
    """Test options can't be changed after creation."""
    with pytest.raises(ValidationError):
        DEFAULT_OPTIONS.deduplicate = True


def test_invalid_option_value():
    """Test bad values are rejected."""
    with pytest.raises(ValidationError):
        merge_options(allowed_protocols="http")


def test_load_config_missing_file(tmp_path):
    """Test a missing config file gives the defaults."""
    assert load_config(tmp_path / "missing.yml") is DEFAULT_OPTIONS


def test_load_config_from_yaml(tmp_path):
    """Test loading options from YAML."""
    config_path = tmp_path / "config.yml"
    config_path.write_text(
        "require_protocol: true\n"
        "allowed_protocols: '*'\n"
        "allowed_bare_hostnames: [localhost, intranet]\n"
        "extensions_requiring_protocol: [txt]\n"
    )

    options = load_config(config_path)

    assert options.require_protocol is True
    assert options.allowed_protocols is ALLOW_ALL
    assert options.allowed_bare_hostnames == ("localhost", "intranet")
    assert options.extensions_requiring_protocol == frozenset({"txt"})
    assert options.default_protocol == "https"


def test_load_config_null_allowed_protocols(tmp_path):
    """Test YAML null allows every protocol."""
    config_path = tmp_path / "config.yml"
    config_path.write_text("allowed_protocols: null\n")

    assert load_config(config_path).allowed_protocols is ALLOW_ALL


def test_load_config_empty_file(tmp_path):
    """Test an empty file gives the defaults."""
    config_path = tmp_path / "config.yml"
    config_path.write_text("")

    assert load_config(config_path).model_dump() == DEFAULT_OPTIONS.model_dump()


def test_default_config_template_matches_defaults(tmp_path):
    """Test the commented template describes the default options."""
    config_path = tmp_path / "config.yml"
    config_path.write_text(DEFAULT_CONFIG)

    assert load_config(config_path).model_dump() == DEFAULT_OPTIONS.model_dump()


def test_load_config_invalid_yaml(tmp_path):
    """Test unparseable YAML raises ConfigError."""
    config_path = tmp_path / "config.yml"
    config_path.write_text("allowed_protocols: [http\n")

    with pytest.raises(ConfigError):
        load_config(config_path)


def test_load_config_not_a_mapping(tmp_path):
    """Test a YAML list at the top level raises ConfigError."""
    config_path = tmp_path / "config.yml"
    config_path.write_text("- http\n- https\n")

    with pytest.raises(ConfigError):
        load_config(config_path)


def test_load_config_invalid_value(tmp_path):
    """Test invalid field values raise ConfigError."""
    config_path = tmp_path / "config.yml"
    config_path.write_text("deduplicate: sometimes\n")

    with pytest.raises(ConfigError):
        load_config(config_path)


def test_save_and_load_config(tmp_path):
    """Test saved options load back unchanged."""
    config_path = tmp_path / "nested" / "config.yml"
    options = merge_options(
        allowed_protocols=None,
        default_protocol="http",
        extensions_requiring_protocol=["txt", "log"],
        deduplicate=True,
    )

    save_config(options, config_path)
    loaded = load_config(config_path)

    assert config_path.exists()
    assert loaded.model_dump() == options.model_dump()


def test_save_config_omits_default_extensions(tmp_path):
    """Test the built-in extension list isn't written out."""
    config_path = tmp_path / "config.yml"
    save_config(DEFAULT_OPTIONS, config_path)

    assert "extensions_requiring_protocol" not in config_path.read_text()
