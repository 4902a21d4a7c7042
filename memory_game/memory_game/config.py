"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator

# Icon names of the classic 16-card board
DEFAULT_SYMBOLS = [
    "diamond",
    "paper-plane-o",
    "anchor",
    "bolt",
    "cube",
    "leaf",
    "bicycle",
    "bomb",
]


def default_symbol_multiset() -> list[str]:
    """Each default symbol twice."""
    return [s for s in DEFAULT_SYMBOLS for _ in range(2)]


class GameConfig(BaseModel):
    """Game configuration."""

    # Symbol multiset, two of each symbol. Checked when the deck is built.
    symbols: list[str] = Field(default_factory=default_symbol_multiset)
    max_stars: int = Field(default=3, ge=1)

    # Presentation delays in seconds after a pair is compared
    flip_back_delay: float = Field(default=0.6, ge=0)  # mismatched cards turn over
    adjudication_delay: float = Field(default=0.65, ge=0)  # selection is cleared

    # Shuffle seed for reproducible layouts
    seed: int | None = None

    @model_validator(mode="after")
    def _check_delays(self) -> "GameConfig":
        if self.flip_back_delay > self.adjudication_delay:
            raise ValueError(
                "flip_back_delay must not exceed adjudication_delay "
                f"({self.flip_back_delay} > {self.adjudication_delay})"
            )
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"


class GameLogConfig(BaseModel):
    """Configuration for the JSONL game event log."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
