"""
Unit Tests for Configuration Management.

Black box tests against the public interface of config.py.
Tests run against the real project files (config/settings/*.yaml).
Failure scenarios use tmp_path to create controlled filesystems.
"""

import pytest

from curlkit.core.config import (
    AppConfig,
    find_project_root,
    get_app_config,
    load_yaml_config,
)
from curlkit.core.config_schema import LoggingSchema, TransportSchema
from curlkit.core.exceptions import ConfigurationError


def _make_root(tmp_path, files: dict[str, str]):
    (tmp_path / ".project_root").touch()
    settings = tmp_path / "config" / "settings"
    settings.mkdir(parents=True)
    for name, content in files.items():
        (settings / name).write_text(content, encoding="utf-8")
    return tmp_path


# =============================================================================
# find_project_root
# =============================================================================


class TestFindProjectRoot:
    """Tests for .project_root marker discovery."""

    def test_finds_root_from_project_directory(self):
        root = find_project_root()
        assert root is not None
        assert (root / ".project_root").exists()
        assert (root / "config" / "settings").is_dir()

    def test_finds_root_from_subdirectory(self, tmp_path):
        _make_root(tmp_path, {})
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_project_root(nested) == tmp_path.resolve()

    def test_returns_none_when_no_marker_file(self, tmp_path):
        assert find_project_root(tmp_path) is None


# =============================================================================
# load_yaml_config
# =============================================================================


class TestLoadYamlConfig:
    """Tests for reading settings files."""

    def test_reads_project_transport_settings(self):
        data = load_yaml_config("transport.yaml")
        assert data["binary"] == "curl"
        assert data["debug_session"] == {"param": "XDEBUG_SESSION", "value": "vscode"}

    def test_missing_file_is_empty(self, tmp_path, monkeypatch):
        monkeypatch.chdir(_make_root(tmp_path, {}))
        assert load_yaml_config("transport.yaml") == {}

    def test_no_project_root_is_empty(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert load_yaml_config("transport.yaml") == {}

    def test_empty_file_is_empty(self, tmp_path, monkeypatch):
        monkeypatch.chdir(_make_root(tmp_path, {"transport.yaml": ""}))
        assert load_yaml_config("transport.yaml") == {}

    def test_invalid_yaml_raises(self, tmp_path, monkeypatch):
        monkeypatch.chdir(_make_root(tmp_path, {"transport.yaml": "binary: [unclosed\n"}))
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_yaml_config("transport.yaml")

    def test_non_mapping_raises(self, tmp_path, monkeypatch):
        monkeypatch.chdir(_make_root(tmp_path, {"transport.yaml": "- curl\n"}))
        with pytest.raises(ConfigurationError, match="expected a mapping"):
            load_yaml_config("transport.yaml")


# =============================================================================
# AppConfig
# =============================================================================


class TestAppConfig:
    """Tests for validated configuration."""

    def test_properties_are_typed(self):
        config = AppConfig()
        assert isinstance(config.transport, TransportSchema)
        assert isinstance(config.logging, LoggingSchema)

    def test_project_settings_match_defaults(self):
        config = AppConfig()
        assert config.transport == TransportSchema()
        assert config.logging.level == "WARNING"
        assert config.logging.handlers.file.enabled is False

    def test_defaults_without_project_root(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = AppConfig()
        assert config.transport.binary == "curl"
        assert config.transport.debug_session.param == "XDEBUG_SESSION"
        assert config.logging.format == "console"

    def test_partial_file_keeps_other_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(_make_root(tmp_path, {"transport.yaml": "binary: /opt/curl/bin/curl\n"}))
        config = AppConfig()
        assert config.transport.binary == "/opt/curl/bin/curl"
        assert config.transport.debug_session.value == "vscode"

    def test_unknown_key_raises(self, tmp_path, monkeypatch):
        monkeypatch.chdir(_make_root(tmp_path, {"transport.yaml": "binary: curl\nretries: 3\n"}))
        with pytest.raises(ConfigurationError, match="transport.yaml"):
            AppConfig()

    def test_invalid_log_level_raises(self, tmp_path, monkeypatch):
        monkeypatch.chdir(_make_root(tmp_path, {"logging.yaml": "level: LOUD\n"}))
        with pytest.raises(ConfigurationError, match="logging.yaml"):
            AppConfig()

    def test_get_app_config_is_cached(self):
        assert get_app_config() is get_app_config()
