"""Tests for configuration loading."""

import pytest
from pydantic import ValidationError

from memory_game.config import (
    DEFAULT_SYMBOLS,
    Config,
    GameConfig,
    load_config,
)


class TestConfig:
    """Tests for config models."""

    def test_defaults(self):
        """Test the default configuration."""
        config = Config()
        assert len(config.game.symbols) == 16
        assert sorted(set(config.game.symbols)) == sorted(DEFAULT_SYMBOLS)
        assert config.game.max_stars == 3
        assert config.game.flip_back_delay == pytest.approx(0.6)
        assert config.game.adjudication_delay == pytest.approx(0.65)
        assert config.game.seed is None
        assert config.logging.level == "INFO"
        assert not config.game_log.enabled

    def test_default_symbols_not_shared(self):
        """Test that each config gets its own symbol list."""
        first = GameConfig()
        first.symbols.append("extra")
        assert len(GameConfig().symbols) == 16

    def test_flip_back_after_clear_rejected(self):
        """Test that cards cannot flip back after the selection clears."""
        with pytest.raises(ValidationError):
            GameConfig(flip_back_delay=1.0, adjudication_delay=0.5)

    def test_zero_stars_rejected(self):
        """Test that max_stars must be positive."""
        with pytest.raises(ValidationError):
            GameConfig(max_stars=0)


class TestLoadConfig:
    """Tests for load_config."""

    def test_none_path(self):
        """Test that no path gives defaults."""
        assert load_config(None) == Config()

    def test_missing_file(self, tmp_path):
        """Test that a missing file gives defaults."""
        assert load_config(tmp_path / "absent.yaml") == Config()

    def test_empty_file(self, tmp_path):
        """Test that an empty file gives defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_yaml_values(self, tmp_path):
        """Test reading values from YAML."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "game:\n"
            "  symbols: [sun, sun, moon, moon]\n"
            "  max_stars: 5\n"
            "  seed: 7\n"
            "logging:\n"
            "  level: DEBUG\n"
            "game_log:\n"
            "  enabled: true\n"
            "  output_path: logs/game.jsonl\n"
        )
        config = load_config(str(path))

        assert config.game.symbols == ["sun", "sun", "moon", "moon"]
        assert config.game.max_stars == 5
        assert config.game.seed == 7
        assert config.game.adjudication_delay == pytest.approx(0.65)
        assert config.logging.level == "DEBUG"
        assert config.game_log.enabled
        assert config.game_log.output_path == "logs/game.jsonl"

    def test_invalid_yaml_values(self, tmp_path):
        """Test that invalid values raise a validation error."""
        path = tmp_path / "bad.yaml"
        path.write_text("game:\n  max_stars: many\n")
        with pytest.raises(ValidationError):
            load_config(path)
