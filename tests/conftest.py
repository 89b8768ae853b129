"""Pytest configuration for hoopcompare tests."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from hoopcompare.api.main import app
from hoopcompare.config import Config
from hoopcompare.storage.csv_store import CsvStore, close_store, init_store

CAREER_CSV = """// Career averages
id,name,games_played,ppg,rpg,apg,spg,bpg,fg_pct,ft_pct,fg3_pct,career_pts,championships,role
1,Alpha Scorer,1600,35,8.0,6.0,1.5,0.5,0.5,0.8,0.4,40000,4,Guard
2,Beta Big,800,17.5,8.0,2.0,0.75,3.0,0.55,,0.1,14000,1,Center
3,Gamma Wing,1000,20.0,5.0,4.0,1.2,1.0,,0.85,0.38,20000,0,Forward
"""

ALPHA_SEASONS_CSV = """season,team,games_played,pts,ppg,rpg,apg,spg,bpg,fg_pct,ft_pct,fg3_pct
2010-11,1610612747,82,2870,35.0,9.0,7.5,1.5,0.6,0.52,0.81,0.41
2005-06,,41,,20.0,6.0,3.0,1.0,0.3,0.45,0.7,0.3
"""

BETA_SEASONS_CSV = """// Beta Big by season
season,team,games_played,pts,ppg,rpg,apg,spg,bpg,fg_pct,ft_pct,fg3_pct
2012-13,1610612759,70,1225,17.5,10.0,2.0,0.8,3.0,0.56,0.6,0.0
"""


def write_sample_data(root: Path) -> Path:
    """Lay out a career table and a season directory under root."""
    (root / "career_averages.csv").write_text(CAREER_CSV, encoding="utf-8")
    season_dir = root / "player-stats"
    season_dir.mkdir()
    (season_dir / "1_alpha_scorer_yearly.csv").write_text(ALPHA_SEASONS_CSV, encoding="utf-8")
    # No id in the name: found through the player's name
    (season_dir / "beta_big_seasons.csv").write_text(BETA_SEASONS_CSV, encoding="utf-8")
    return root


@pytest.fixture
def data_dir(tmp_path):
    return write_sample_data(tmp_path)


@pytest.fixture
def store(data_dir):
    return CsvStore(data_dir / "career_averages.csv", data_dir / "player-stats")


@pytest.fixture
def client(data_dir):
    """TestClient backed by the sample data."""
    close_store()
    init_store(
        Config(
            data_dir=data_dir,
            career_file="career_averages.csv",
            season_dir="player-stats",
            log_level="INFO",
        )
    )
    yield TestClient(app)
    close_store()
