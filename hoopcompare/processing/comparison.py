"""Player comparison engine for head-to-head analysis."""

import logging
from dataclasses import dataclass
from enum import Enum

from ..storage.csv_store import CsvStore
from .normalization import PlayerCareerRecord, PlayerProfile
from .scaling import normalize_value

logger = logging.getLogger(__name__)


class CompareMode(str, Enum):
    """Which statistics a comparison is drawn from."""

    CAREER = "career"
    SEASON = "season"


class Side(str, Enum):
    """Side holding the greater raw value in a bar row."""

    A = "A"
    B = "B"
    TIE = "tie"


@dataclass(frozen=True)
class RadarAxis:
    """One radar category and its reference maximum."""

    key: str
    label: str
    reference_max: float
    multiplier: float = 1.0


@dataclass(frozen=True)
class BarStat:
    """One bar-comparison statistic and its bar reference maximum."""

    key: str
    label: str
    max_value: float
    multiplier: float = 1.0


# Radar and bar maxima are separate tables and differ for the same stat.
_SHARED_RADAR_AXES = (
    RadarAxis("ppg", "Scoring (PPG)", 35),
    RadarAxis("rpg", "Rebounding (RPG)", 15),
    RadarAxis("apg", "Assists (APG)", 12),
    RadarAxis("spg", "Steals (SPG)", 3),
    RadarAxis("bpg", "Blocks (BPG)", 3),
    RadarAxis("fg_pct", "Field Goal %", 100, multiplier=100),
    RadarAxis("fg3_pct", "3-Point %", 100, multiplier=100),
    RadarAxis("ft_pct", "Free Throw %", 100, multiplier=100),
)

CAREER_RADAR_AXES = _SHARED_RADAR_AXES + (
    RadarAxis("games_played", "Games Played", 1600),
    RadarAxis("championships", "Championship Impact", 100, multiplier=25),
)

SEASON_RADAR_AXES = _SHARED_RADAR_AXES + (
    RadarAxis("games_played", "Games Played", 82),
    RadarAxis("pts", "Season Points", 2500),
)

_SHARED_BAR_STATS = (
    BarStat("ppg", "Points Per Game", 30),
    BarStat("rpg", "Rebounds Per Game", 12),
    BarStat("apg", "Assists Per Game", 10),
    BarStat("spg", "Steals Per Game", 3),
    BarStat("bpg", "Blocks Per Game", 3),
    BarStat("fg_pct", "Field Goal %", 70, multiplier=100),
    BarStat("fg3_pct", "3-Point %", 50, multiplier=100),
    BarStat("ft_pct", "Free Throw %", 100, multiplier=100),
)

CAREER_BAR_STATS = _SHARED_BAR_STATS + (
    BarStat("games_played", "Games Played", 1500),
    BarStat("career_pts", "Career Points", 40000),
)

SEASON_BAR_STATS = _SHARED_BAR_STATS + (
    BarStat("games_played", "Games Played", 82),
    BarStat("pts", "Season Points", 2500),
)

RADAR_AXES = {CompareMode.CAREER: CAREER_RADAR_AXES, CompareMode.SEASON: SEASON_RADAR_AXES}
BAR_STATS = {CompareMode.CAREER: CAREER_BAR_STATS, CompareMode.SEASON: SEASON_BAR_STATS}

# Per-game and shooting fields a missing season borrows from the career record
CAREER_FALLBACK_FIELDS = ("ppg", "rpg", "apg", "spg", "bpg", "fg_pct", "fg3_pct", "ft_pct")


@dataclass(frozen=True)
class RadarSeries:
    """Bounded radar values for one side, in axis order."""

    player_id: str
    name: str
    values: tuple[float, ...]


@dataclass(frozen=True)
class BarRow:
    """Raw values for one statistic on both sides."""

    key: str
    label: str
    value1: float
    value2: float
    higher_side: Side
    max_value: float


@dataclass(frozen=True)
class ComparisonResult:
    """Result of comparing two players."""

    mode: CompareMode
    player_a: PlayerCareerRecord
    player_b: PlayerCareerRecord
    season_a: str | None
    season_b: str | None
    radar_labels: tuple[str, ...]
    radar_series: tuple[RadarSeries, RadarSeries]
    bar_rows: tuple[BarRow, ...]


@dataclass(frozen=True)
class SelectionIncomplete:
    """No comparison: one or both players did not resolve."""

    missing: tuple[str, ...]

    message = "Select players to compare"


def higher_side(value1: float, value2: float) -> Side:
    if value1 > value2:
        return Side.A
    if value2 > value1:
        return Side.B
    return Side.TIE


def resolve_stats(
    profile: PlayerProfile,
    mode: CompareMode,
    season: str | None = None,
) -> tuple[dict[str, float], str | None]:
    """Collect the raw statistics one side is compared on.

    In season mode a missing season falls back to the career per-game and
    shooting values, with season games played and points set to zero.

    Returns:
        (stat key -> value, season label actually used or None)
    """
    career = profile.career
    if mode is CompareMode.CAREER:
        return {
            "ppg": career.ppg,
            "rpg": career.rpg,
            "apg": career.apg,
            "spg": career.spg,
            "bpg": career.bpg,
            "fg_pct": career.fg_pct,
            "fg3_pct": career.fg3_pct,
            "ft_pct": career.ft_pct,
            "games_played": career.games_played,
            "championships": career.championships,
            "career_pts": career.career_pts,
        }, None

    record = profile.season(season)
    if record is None:
        logger.debug("No season %s for player %s, using career values", season, career.id)
        stats = {field: getattr(career, field) for field in CAREER_FALLBACK_FIELDS}
        stats.update(games_played=0, pts=0.0)
        return stats, None

    stats = {field: getattr(record, field) for field in CAREER_FALLBACK_FIELDS}
    stats.update(games_played=record.games_played, pts=record.pts)
    return stats, record.season


def build_radar_series(
    player: PlayerCareerRecord,
    stats: dict[str, float],
    axes: tuple[RadarAxis, ...],
) -> RadarSeries:
    """Build radar chart values for one side.

    Args:
        player: Career record naming the series
        stats: Dict of stat key -> raw value
        axes: Radar axes in display order

    Returns:
        RadarSeries with one bounded value per axis
    """
    return RadarSeries(
        player_id=player.id,
        name=player.name,
        values=tuple(
            normalize_value(stats[axis.key] * axis.multiplier, axis.reference_max)
            for axis in axes
        ),
    )


def build_bar_rows(
    stats_a: dict[str, float],
    stats_b: dict[str, float],
    bar_stats: tuple[BarStat, ...],
) -> tuple[BarRow, ...]:
    rows = []
    for stat in bar_stats:
        value1 = stats_a[stat.key] * stat.multiplier
        value2 = stats_b[stat.key] * stat.multiplier
        rows.append(
            BarRow(
                key=stat.key,
                label=stat.label,
                value1=value1,
                value2=value2,
                higher_side=higher_side(value1, value2),
                max_value=stat.max_value,
            )
        )
    return tuple(rows)


def compare(
    profile_a: PlayerProfile | None,
    profile_b: PlayerProfile | None,
    mode: CompareMode | str = CompareMode.CAREER,
    season_a: str | None = None,
    season_b: str | None = None,
) -> ComparisonResult | SelectionIncomplete:
    """Compare two players head-to-head.

    Pure function of its arguments: no state is kept between calls.

    Args:
        profile_a: First player, or None if the identifier did not resolve
        profile_b: Second player, or None if the identifier did not resolve
        mode: Career or season comparison
        season_a: Season label for the first player (season mode only)
        season_b: Season label for the second player (season mode only)

    Returns:
        ComparisonResult, or SelectionIncomplete naming the unresolved sides
    """
    mode = CompareMode(mode)
    missing = tuple(
        side.value for side, profile in ((Side.A, profile_a), (Side.B, profile_b))
        if profile is None
    )
    if missing:
        return SelectionIncomplete(missing=missing)

    axes = RADAR_AXES[mode]

    stats_a, used_a = resolve_stats(profile_a, mode, season_a)
    stats_b, used_b = resolve_stats(profile_b, mode, season_b)

    return ComparisonResult(
        mode=mode,
        player_a=profile_a.career,
        player_b=profile_b.career,
        season_a=used_a,
        season_b=used_b,
        radar_labels=tuple(axis.label for axis in axes),
        radar_series=(
            build_radar_series(profile_a.career, stats_a, axes),
            build_radar_series(profile_b.career, stats_b, axes),
        ),
        bar_rows=build_bar_rows(stats_a, stats_b, BAR_STATS[mode]),
    )


def compare_players(
    store: CsvStore,
    player_a_id: str,
    player_b_id: str,
    mode: CompareMode | str = CompareMode.CAREER,
    season_a: str | None = None,
    season_b: str | None = None,
) -> ComparisonResult | SelectionIncomplete:
    """Look up two players in the store and compare them."""
    mode = CompareMode(mode)
    with_seasons = mode is CompareMode.SEASON
    profile_a = store.get_profile(player_a_id, with_seasons=with_seasons) if player_a_id else None
    profile_b = store.get_profile(player_b_id, with_seasons=with_seasons) if player_b_id else None

    result = compare(profile_a, profile_b, mode, season_a, season_b)
    if isinstance(result, SelectionIncomplete):
        logger.info("Comparison %s vs %s incomplete: missing %s", player_a_id, player_b_id, result.missing)
    return result
