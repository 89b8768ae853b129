# hoopcompare/api/models.py
"""Pydantic models for API responses."""

from pydantic import BaseModel


class PlayerSummary(BaseModel):
    """Brief player info for cards and lists."""

    id: str
    name: str
    role: str
    games_played: int
    ppg: float
    rpg: float
    apg: float
    career_pts: float
    championships: int


class PlayerDetail(BaseModel):
    """Full career averages."""

    id: str
    name: str
    role: str
    games_played: int
    ppg: float
    rpg: float
    apg: float
    spg: float
    bpg: float
    fg_pct: float
    ft_pct: float
    fg3_pct: float
    career_pts: float
    championships: int


class SeasonStats(BaseModel):
    """One row of a player's season table."""

    season: str
    start_year: int
    team: str
    games_played: int
    pts: float
    ppg: float
    rpg: float
    apg: float
    spg: float
    bpg: float
    fg_pct: float
    ft_pct: float
    fg3_pct: float


class SeasonSeries(BaseModel):
    """Season line chart data for one stat."""

    player_id: str
    stat: str
    label: str
    seasons: list[str]
    values: list[float]
    trend_up: bool


class RadarSeries(BaseModel):
    """Radar values for one player."""

    player_id: str
    name: str
    values: list[float]


class BarRow(BaseModel):
    """Head-to-head bar for one statistic."""

    key: str
    label: str
    value1: float
    value2: float
    higher_side: str  # A, B, tie
    max_value: float


class ComparisonResult(BaseModel):
    """Player comparison result."""

    mode: str
    player1: PlayerDetail
    player2: PlayerDetail
    season1: str | None
    season2: str | None
    radar_labels: list[str]
    radar_series: list[RadarSeries]
    bar_rows: list[BarRow]


class CategoryAxis(BaseModel):
    """A comparison category with its radar and bar reference maxima."""

    key: str
    label: str
    radar_max: float
    bar_max: float | None
    multiplier: float
