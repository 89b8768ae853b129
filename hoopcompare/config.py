"""Configuration management for hoopcompare."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    # CSV data
    data_dir: Path
    career_file: str
    season_dir: str

    log_level: str

    @property
    def career_path(self) -> Path:
        return self.data_dir / self.career_file

    @property
    def season_path(self) -> Path:
        return self.data_dir / self.season_dir

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            data_dir=Path(os.environ.get("HOOPCOMPARE_DATA_DIR", "data")),
            career_file=os.environ.get("HOOPCOMPARE_CAREER_FILE", "career_averages.csv"),
            season_dir=os.environ.get("HOOPCOMPARE_SEASON_DIR", "player-stats"),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )


def get_config() -> Config:
    """Get application configuration."""
    return Config.from_env()
