"""Schema-driven normalization of raw CSV rows into typed player records."""

import logging
import math
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

SEASON_START_RE = re.compile(r"^(\d{4})")


def parse_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"non-finite value: {text!r}")
    return value


def parse_int(text: str) -> int:
    """Parse integral or decimal text, truncating toward zero ("3.0" -> 3)."""
    return int(parse_float(text))


def parse_text(text: str) -> str:
    return text


def parse_season(text: str) -> str:
    """Accept any label with a readable leading year, kept as written."""
    if not SEASON_START_RE.match(text):
        raise ValueError(f"bad season label: {text!r}")
    return text


@dataclass(frozen=True)
class FieldSpec:
    """Default text and parser for one schema field."""

    default: str
    parser: Callable[[str], Any]


Schema = Mapping[str, FieldSpec]

SEASON_SCHEMA: dict[str, FieldSpec] = {
    "season": FieldSpec("2023-24", parse_season),
    "team": FieldSpec("1610612763", parse_text),
    "games_played": FieldSpec("0", parse_int),
    "pts": FieldSpec("0", parse_float),
    "ppg": FieldSpec("0", parse_float),
    "rpg": FieldSpec("0", parse_float),
    "apg": FieldSpec("0", parse_float),
    "spg": FieldSpec("0", parse_float),
    "bpg": FieldSpec("0", parse_float),
    "fg_pct": FieldSpec("0", parse_float),
    "ft_pct": FieldSpec("0", parse_float),
    "fg3_pct": FieldSpec("0", parse_float),
}

CAREER_SCHEMA: dict[str, FieldSpec] = {
    "id": FieldSpec("", parse_text),
    "name": FieldSpec("Unknown Player", parse_text),
    "games_played": FieldSpec("0", parse_int),
    "ppg": FieldSpec("0", parse_float),
    "rpg": FieldSpec("0", parse_float),
    "apg": FieldSpec("0", parse_float),
    "spg": FieldSpec("0", parse_float),
    "bpg": FieldSpec("0", parse_float),
    "fg_pct": FieldSpec("0", parse_float),
    "ft_pct": FieldSpec("0", parse_float),
    "fg3_pct": FieldSpec("0", parse_float),
    "career_pts": FieldSpec("0", parse_float),
    "championships": FieldSpec("0", parse_int),
    "role": FieldSpec("", parse_text),
}


def _raw_text(value: Any) -> str:
    """Coerce a raw cell to trimmed text; unrecognized shapes become empty."""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def normalize_record(raw: Mapping[str, Any], schema: Schema) -> dict[str, Any]:
    """Build a fully populated record from a raw row.

    Every schema field is present in the result. A field that is absent,
    empty or fails to parse takes the schema default. Fields outside the
    schema are dropped.

    Args:
        raw: Mapping of field name -> raw cell (usually text)
        schema: Mapping of field name -> FieldSpec

    Returns:
        Dict of field name -> parsed value
    """
    record = {}
    for name, spec in schema.items():
        text = _raw_text(raw.get(name))
        if text:
            try:
                record[name] = spec.parser(text)
                continue
            except (ValueError, TypeError):
                logger.debug("Unparsable %s=%r, using default %r", name, text, spec.default)
        record[name] = spec.parser(spec.default)
    return record


@dataclass(frozen=True)
class PlayerCareerRecord:
    """Career averages for a player."""

    id: str
    name: str
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
    role: str

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "PlayerCareerRecord":
        return cls(**normalize_record(raw, CAREER_SCHEMA))


@dataclass(frozen=True)
class PlayerSeasonRecord:
    """Per-season averages for a player."""

    season: str
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

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "PlayerSeasonRecord":
        return cls(**normalize_record(raw, SEASON_SCHEMA))

    @property
    def start_year(self) -> int:
        """Leading year of the season label ("2019-20" -> 2019)."""
        return int(SEASON_START_RE.match(self.season).group(1))


@dataclass(frozen=True)
class PlayerProfile:
    """A career record with its season records, oldest season first."""

    career: PlayerCareerRecord
    seasons: tuple[PlayerSeasonRecord, ...] = ()

    def season(self, label: str | None) -> PlayerSeasonRecord | None:
        if not label:
            return None
        for record in self.seasons:
            if record.season == label:
                return record
        return None


def sort_seasons(
    seasons: list[PlayerSeasonRecord],
    descending: bool = False,
) -> list[PlayerSeasonRecord]:
    """Order seasons by leading year. Stable for equal years."""
    return sorted(seasons, key=lambda s: s.start_year, reverse=descending)
