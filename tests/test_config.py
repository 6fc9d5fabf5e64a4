"""Tests for settings loading."""

from pathlib import Path

import pytest

from devopsfetch.config import Settings, load_settings
from devopsfetch.core.exceptions import ConfigurationError


@pytest.fixture
def default_file(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    monkeypatch.setattr("devopsfetch.config.loader.CONFIG_FILE", path)
    return path


class TestLoadSettings:
    """Tests for load_settings."""

    def test_missing_default_file_gives_defaults(self, default_file):
        settings = load_settings()

        assert settings == Settings()
        assert settings.nginx_conf_dir == Path("/etc/nginx/sites-enabled")
        assert settings.min_uid == 1000
        assert settings.log_window_limit == 50
        assert settings.command_timeout == 30

    def test_default_file_is_read(self, default_file):
        default_file.write_text("min_uid: 500\nnginx_conf_dir: /opt/nginx/sites\n")

        settings = load_settings()

        assert settings.min_uid == 500
        assert settings.nginx_conf_dir == Path("/opt/nginx/sites")

    def test_explicit_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_settings(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_settings(path) == Settings()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("min_uid: [1000\n")

        with pytest.raises(ConfigurationError, match="Cannot read settings file"):
            load_settings(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            load_settings(path)

    @pytest.mark.parametrize("content", [
        "min_uid: -1\n",
        "command_timeout: 0\n",
        "unknown_key: 1\n",
    ])
    def test_invalid_values(self, tmp_path, content):
        path = tmp_path / "invalid.yaml"
        path.write_text(content)

        with pytest.raises(ConfigurationError, match="Invalid settings"):
            load_settings(path)
