"""Tests for configuration loading."""

from pathlib import Path

import pytest

from skycover.core.config import (
    DEFAULT_CONFIG,
    SkycoverConfig,
    load_config,
    save_config,
)
from skycover.core.exceptions import ConfigError


class TestLoadConfig:
    """Test reading settings from TOML."""

    def test_missing_file_gives_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "missing.toml")
        assert config == DEFAULT_CONFIG
        assert config.height_scale == 100
        assert config.separators == " "

    def test_reads_section(self, tmp_path: Path):
        path = tmp_path / "skycover.toml"
        path.write_text('[skycover]\nheight_scale = 30\nseparators = " ,"\n')
        config = load_config(path)
        assert config.height_scale == 30
        assert config.separators == " ,"

    def test_missing_section_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "other.toml"
        path.write_text("[other]\nkey = 1\n")
        assert load_config(path) == DEFAULT_CONFIG

    def test_malformed_toml(self, tmp_path: Path):
        path = tmp_path / "bad.toml"
        path.write_text("[skycover\n")
        with pytest.raises(ConfigError):
            load_config(path)

    @pytest.mark.parametrize(
        "body",
        [
            "height_scale = 0",
            'separators = ""',
            'separators = "A"',
            "unknown = 1",
        ],
    )
    def test_invalid_values(self, tmp_path: Path, body: str):
        path = tmp_path / "invalid.toml"
        path.write_text(f"[skycover]\n{body}\n")
        with pytest.raises(ConfigError):
            load_config(path)

    def test_section_must_be_table(self, tmp_path: Path):
        path = tmp_path / "scalar.toml"
        path.write_text('skycover = "yes"\n')
        with pytest.raises(ConfigError):
            load_config(path)


class TestSaveConfig:
    """Test writing settings to TOML."""

    def test_save_and_reload(self, tmp_path: Path):
        path = tmp_path / "nested" / "skycover.toml"
        config = SkycoverConfig(height_scale=50, separators=" \t")
        save_config(config, path)
        assert load_config(path) == config
