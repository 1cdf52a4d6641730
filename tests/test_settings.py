"""
Tests for Settings
==================
Tests for the YAML app config in wordkit/settings.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from wordkit import settings
from wordkit.errors import ConfigurationError
from wordkit.generators import EndingPickMode, GenerationParameters


@pytest.fixture
def custom_config(tmp_path, monkeypatch):
    """Point WORDKIT_CONFIG at a temporary file."""
    path = tmp_path / "app.yaml"
    path.write_text(
        "generator:\n"
        "  target_length_min: 4\n"
        "  target_length_max: 6\n"
        "  ending_pick_mode: follow_branch\n"
        "  max_attempts: 50\n",
        encoding="utf-8",
    )
    monkeypatch.setenv(settings.CONFIG_ENV_VAR, str(path))
    settings.load_app_config.cache_clear()
    yield path
    monkeypatch.delenv(settings.CONFIG_ENV_VAR)
    settings.load_app_config.cache_clear()


class TestGetSetting:
    """Tests for dotted lookups in the bundled config."""

    def test_bundled_values(self):
        assert settings.get_setting('generator.target_length_min') == 3
        assert settings.get_setting('generator.target_length_max') == 10
        assert settings.get_setting('generator.max_attempts') == 1000
        assert settings.get_setting('sequencing.strategy') == 'CharDepthSequencingStrategy'

    def test_missing_returns_default(self):
        assert settings.get_setting('generator.missing') is None
        assert settings.get_setting('missing.section', 42) == 42
        assert settings.get_setting('generator.target_length_min.deeper', 'x') == 'x'

    def test_env_override(self, custom_config):
        assert settings.config_path() == custom_config
        assert settings.get_setting('generator.target_length_min') == 4
        assert settings.get_setting('sampling.separator', ',') == ','


class TestLoadYamlFile:

    def test_load_mapping(self, tmp_path):
        path = tmp_path / "profile.yaml"
        path.write_text("parameters:\n  seed: Test\n", encoding="utf-8")
        assert settings.load_yaml_file(path) == {'parameters': {'seed': 'Test'}}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert settings.load_yaml_file(path) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            settings.load_yaml_file(tmp_path / "missing.yaml")

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            settings.load_yaml_file(path)


class TestParametersFromSettings:
    """Tests for GenerationParameters.from_settings."""

    def test_defaults(self):
        params = GenerationParameters.from_settings()
        assert params.target_length_min == 3
        assert params.target_length_max == 10
        assert params.ending_pick_mode is EndingPickMode.RANDOM
        assert params.seed is None

    def test_overrides(self):
        params = GenerationParameters.from_settings(target_length_max=5, seed=7, entropy=None)
        assert params.target_length_max == 5
        assert params.seed == "7"
        assert params.entropy == 0.0

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError):
            GenerationParameters.from_settings(target_length=5)

    def test_from_custom_config(self, custom_config):
        params = GenerationParameters.from_settings()
        assert params.target_length_min == 4
        assert params.target_length_max == 6
        assert params.ending_pick_mode is EndingPickMode.FOLLOW_BRANCH

    def test_to_dict(self):
        data = GenerationParameters(seed="Test").to_dict()
        assert data == {
            'target_length_min': 3,
            'target_length_max': 10,
            'seed': 'Test',
            'entropy': 0.0,
            'entropy_start': 0.0,
            'entropy_middle': 0.0,
            'entropy_end': 0.0,
            'ending_pick_mode': 'random',
        }
