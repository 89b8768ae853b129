"""CSV-backed player data store for hoopcompare."""

import io
import logging
from pathlib import Path

import pandas as pd

from ..config import Config, get_config
from ..processing.normalization import (
    SEASON_START_RE,
    PlayerCareerRecord,
    PlayerProfile,
    PlayerSeasonRecord,
    sort_seasons,
)

logger = logging.getLogger(__name__)

_store: "CsvStore | None" = None


class StoreError(Exception):
    """Player data could not be read."""


def read_csv_rows(path: Path) -> list[dict[str, str]]:
    """Read a CSV file into a list of trimmed string rows.

    A leading line starting with "//" is a comment and is skipped.
    Empty and missing cells come back as "".
    """
    text = path.read_text(encoding="utf-8")
    if text.startswith("//"):
        text = text.split("\n", 1)[1] if "\n" in text else ""
    if not text.strip():
        return []

    df = pd.read_csv(
        io.StringIO(text),
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        index_col=False,
    )
    df.columns = [str(c).strip() for c in df.columns]
    df = df.fillna("")
    for col in df.columns:
        df[col] = df[col].astype(str).str.strip()
    return df.to_dict(orient="records")


class CsvStore:
    """Career table plus a directory of per-player season files.

    The career table is parsed once and cached; season files are read on
    every request.
    """

    def __init__(self, career_path: Path, season_dir: Path):
        self.career_path = Path(career_path)
        self.season_dir = Path(season_dir)
        self._career: dict[str, PlayerCareerRecord] | None = None

    @classmethod
    def from_config(cls, config: Config) -> "CsvStore":
        return cls(config.career_path, config.season_path)

    def load(self) -> dict[str, PlayerCareerRecord]:
        """Parse the career table, replacing any cached copy."""
        try:
            rows = read_csv_rows(self.career_path)
        except (OSError, ValueError) as e:
            logger.error("Error reading player data from %s: %s", self.career_path, e)
            raise StoreError(f"Failed to read {self.career_path}") from e

        career: dict[str, PlayerCareerRecord] = {}
        for row in rows:
            record = PlayerCareerRecord.from_raw(row)
            if not record.id:
                logger.warning("Skipping career row without id: %s", record.name)
                continue
            if record.id in career:
                logger.warning("Duplicate player id %s, keeping first row", record.id)
                continue
            career[record.id] = record

        self._career = career
        logger.info("Loaded %d career records from %s", len(career), self.career_path)
        return career

    def close(self) -> None:
        self._career = None

    def _career_records(self) -> dict[str, PlayerCareerRecord]:
        career = self._career
        if career is None:
            career = self.load()
        return career

    def list_career_records(self) -> list[PlayerCareerRecord]:
        """All career records in file order."""
        return list(self._career_records().values())

    def get_career_record(self, player_id: str) -> PlayerCareerRecord | None:
        return self._career_records().get(str(player_id))

    def find_season_file(self, player_id: str) -> Path | None:
        """Locate the season file for a player.

        Tries identifier-based names first, then the player's name.
        """
        if not self.season_dir.is_dir():
            logger.warning("Season directory %s does not exist", self.season_dir)
            return None

        files = sorted(p.name for p in self.season_dir.iterdir() if p.is_file())

        for name in files:
            if (
                name.startswith(f"{player_id}_")
                or f"_{player_id}_yearly" in name
                or name == f"{player_id}.csv"
                or name == f"player_{player_id}_yearly.csv"
            ):
                return self.season_dir / name

        player = self.get_career_record(player_id)
        if player:
            underscored = "_".join(player.name.split()).lower()
            plain = player.name.lower()
            for name in files:
                lowered = name.lower()
                if underscored in lowered or plain in lowered:
                    return self.season_dir / name

        return None

    def get_season_records(self, player_id: str) -> list[PlayerSeasonRecord]:
        """Season records for a player, oldest first. Empty if none on file."""
        path = self.find_season_file(str(player_id))
        if path is None:
            logger.debug("No season file for player %s", player_id)
            return []

        try:
            rows = read_csv_rows(path)
        except (OSError, ValueError) as e:
            logger.error("Error reading yearly stats from %s: %s", path, e)
            return []

        seasons: dict[str, PlayerSeasonRecord] = {}
        for row in rows:
            label = row.get("season", "").strip()
            if label and not SEASON_START_RE.match(label):
                logger.warning("Skipping row with unreadable season %r in %s", label, path.name)
                continue
            record = PlayerSeasonRecord.from_raw(row)
            if record.season in seasons:
                logger.warning("Duplicate season %s in %s, keeping first row", record.season, path.name)
                continue
            seasons[record.season] = record

        return sort_seasons(list(seasons.values()))

    def get_profile(self, player_id: str, with_seasons: bool = True) -> PlayerProfile | None:
        career = self.get_career_record(player_id)
        if career is None:
            return None
        seasons = tuple(self.get_season_records(player_id)) if with_seasons else ()
        return PlayerProfile(career=career, seasons=seasons)


def init_store(config: Config | None = None) -> CsvStore:
    """Initialize the process-wide store. Safe to call multiple times."""
    global _store
    if _store is not None:
        return _store
    _store = CsvStore.from_config(config or get_config())
    logger.info("CSV store initialized (data=%s)", _store.career_path)
    return _store


def close_store() -> None:
    """Drop the process-wide store and its cached data."""
    global _store
    if _store is not None:
        _store.close()
        _store = None
        logger.info("CSV store closed")


def get_store() -> CsvStore:
    """Return the process-wide store, initializing it on first use."""
    if _store is None:
        return init_store()
    return _store
