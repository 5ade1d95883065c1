"""
Tests for Settings
==================
Dotted-path lookups in the YAML app config.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from wordkit import settings
from wordkit.settings import get_setting, load_app_config, resolve_path


@pytest.fixture
def fresh_config():
    """Clear the cached config before and after a test."""
    load_app_config.cache_clear()
    yield
    load_app_config.cache_clear()


class TestGetSetting:
    """Tests for get_setting()."""

    def test_shipped_defaults(self, fresh_config):
        """Test values from the bundled app.yaml."""
        assert get_setting("markov.order") == 3
        assert get_setting("markov.prior") == 0.0
        assert get_setting("markov.max_word_attempts") == 100
        assert get_setting("generation.min_length") == 3
        assert get_setting("generation.max_length") == 8

    def test_missing_key_returns_default(self, fresh_config):
        """Test unknown paths fall back to the default."""
        assert get_setting("markov.nope", 42) == 42
        assert get_setting("nope.deeper.still") is None

    def test_path_through_scalar(self, fresh_config):
        """Test a path descending into a scalar returns the default."""
        assert get_setting("markov.order.value", "x") == "x"

    def test_env_override(self, fresh_config, tmp_path, monkeypatch):
        """Test WORDKIT_CONFIG points at another file."""
        path = tmp_path / "custom.yaml"
        path.write_text("markov:\n  order: 5\n")
        monkeypatch.setenv(settings.CONFIG_ENV_VAR, str(path))

        assert get_setting("markov.order") == 5
        assert get_setting("generation.count", 11) == 11

    def test_env_override_missing_file(self, fresh_config, tmp_path, monkeypatch):
        """Test a missing config file raises."""
        monkeypatch.setenv(settings.CONFIG_ENV_VAR, str(tmp_path / "missing.yaml"))
        with pytest.raises(FileNotFoundError):
            load_app_config()

    def test_empty_config(self, fresh_config, tmp_path, monkeypatch):
        """Test an empty file behaves like an empty mapping."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        monkeypatch.setenv(settings.CONFIG_ENV_VAR, str(path))
        assert get_setting("markov.order", 3) == 3

    def test_null_value_is_not_defaulted(self, fresh_config, tmp_path, monkeypatch):
        """Test a key set to null returns None rather than the default."""
        path = tmp_path / "custom.yaml"
        path.write_text("markov:\n  max_batch_attempts: null\n")
        monkeypatch.setenv(settings.CONFIG_ENV_VAR, str(path))
        assert get_setting("markov.max_batch_attempts", 10000) is None
        assert get_setting("markov.max_word_attempts", 100) == 100

    def test_relative_override(self, fresh_config, tmp_path, monkeypatch):
        """Test a relative WORDKIT_CONFIG resolves against the working directory."""
        (tmp_path / "custom.yaml").write_text("markov:\n  order: 2\n")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv(settings.CONFIG_ENV_VAR, "custom.yaml")
        assert settings.config_path() == tmp_path.resolve() / "custom.yaml"
        assert get_setting("markov.order") == 2


class TestResolvePath:
    """Tests for resolve_path()."""

    def test_absolute(self, tmp_path):
        assert resolve_path(str(tmp_path)) == tmp_path

    def test_relative_to_base(self, tmp_path):
        assert resolve_path("a/b.txt", base=tmp_path) == (tmp_path / "a" / "b.txt").resolve()

    def test_none_rejected(self):
        with pytest.raises(ValueError):
            resolve_path(None)

    def test_relative_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert resolve_path("b.txt") == tmp_path.resolve() / "b.txt"
