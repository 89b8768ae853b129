"""Player listing, search and season chart helpers."""

from dataclasses import dataclass

from .normalization import PlayerCareerRecord, PlayerSeasonRecord, sort_seasons

SORT_FIELDS = {
    "career_pts": "Career Points",
    "ppg": "Points Per Game",
    "rpg": "Rebounds Per Game",
    "apg": "Assists Per Game",
    "championships": "Championships",
}

DEFAULT_TOP_PLAYERS = 20

# stat key -> (label, multiplier)
SEASON_CHART_STATS = {
    "ppg": ("Points Per Game", 1),
    "rpg": ("Rebounds Per Game", 1),
    "apg": ("Assists Per Game", 1),
    "spg": ("Steals Per Game", 1),
    "bpg": ("Blocks Per Game", 1),
    "fg_pct": ("Field Goal %", 100),
    "ft_pct": ("Free Throw %", 100),
    "fg3_pct": ("3-Point %", 100),
    "games_played": ("Games Played", 1),
}


@dataclass(frozen=True)
class SeasonSeries:
    """Line chart data for one stat across a player's seasons."""

    stat: str
    label: str
    seasons: tuple[str, ...]
    values: tuple[float, ...]
    trend_up: bool


def rank_players(
    records: list[PlayerCareerRecord],
    sort_by: str = "career_pts",
    limit: int | None = DEFAULT_TOP_PLAYERS,
) -> list[PlayerCareerRecord]:
    """Sort players by a stat, highest first.

    Args:
        records: Career records to rank
        sort_by: One of SORT_FIELDS
        limit: Maximum number returned, None for all

    Returns:
        Ranked records (ties keep their input order)
    """
    if sort_by not in SORT_FIELDS:
        raise ValueError(f"Unknown sort field: {sort_by}")
    ranked = sorted(records, key=lambda r: getattr(r, sort_by), reverse=True)
    return ranked if limit is None else ranked[:limit]


def search_players(records: list[PlayerCareerRecord], term: str | None) -> list[PlayerCareerRecord]:
    """Case-insensitive name search. A blank term matches everyone."""
    needle = (term or "").strip().lower()
    if not needle:
        return list(records)
    return [r for r in records if needle in r.name.lower()]


def season_series(seasons: list[PlayerSeasonRecord], stat: str = "ppg") -> SeasonSeries:
    """Build chronological chart data for one stat.

    Shooting percentages are scaled to 0-100. The trend is up when the
    latest season beats the first.
    """
    if stat not in SEASON_CHART_STATS:
        raise ValueError(f"Unknown stat: {stat}")
    label, multiplier = SEASON_CHART_STATS[stat]

    ordered = sort_seasons(seasons)
    values = tuple(getattr(s, stat) * multiplier for s in ordered)

    return SeasonSeries(
        stat=stat,
        label=label,
        seasons=tuple(s.season for s in ordered),
        values=values,
        trend_up=bool(values) and values[-1] > values[0],
    )
