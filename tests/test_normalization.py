"""Tests for record normalization."""

from hoopcompare.processing.normalization import (
    CAREER_SCHEMA,
    SEASON_SCHEMA,
    PlayerCareerRecord,
    PlayerProfile,
    PlayerSeasonRecord,
    normalize_record,
    sort_seasons,
)


def test_empty_season_record_gets_documented_defaults():
    """Every season field falls back to its default."""
    result = normalize_record({}, SEASON_SCHEMA)

    assert result == {
        "season": "2023-24",
        "team": "1610612763",
        "games_played": 0,
        "pts": 0.0,
        "ppg": 0.0,
        "rpg": 0.0,
        "apg": 0.0,
        "spg": 0.0,
        "bpg": 0.0,
        "fg_pct": 0.0,
        "ft_pct": 0.0,
        "fg3_pct": 0.0,
    }


def test_missing_numeric_fields_default_to_zero():
    """Absent, empty and whitespace-only cells use the default."""
    raw = {"ppg": "25.5", "rpg": "", "apg": "   ", "spg": None}
    result = normalize_record(raw, SEASON_SCHEMA)

    assert result["ppg"] == 25.5
    assert result["rpg"] == 0.0
    assert result["apg"] == 0.0
    assert result["spg"] == 0.0
    assert result["bpg"] == 0.0


def test_malformed_numeric_text_uses_default():
    """Unparsable numbers never raise."""
    raw = {"ppg": "abc", "fg_pct": "0.4.5", "games_played": "lots", "rpg": "nan", "apg": "inf"}
    result = normalize_record(raw, SEASON_SCHEMA)

    assert result["ppg"] == 0.0
    assert result["fg_pct"] == 0.0
    assert result["games_played"] == 0
    assert result["rpg"] == 0.0
    assert result["apg"] == 0.0


def test_integer_fields_accept_decimal_text():
    """Integer fields truncate decimal text."""
    result = normalize_record({"games_played": "82.0", "championships": "3.7"}, CAREER_SCHEMA)
    assert result["games_played"] == 82
    assert result["championships"] == 3


def test_values_are_trimmed():
    """Surrounding whitespace is ignored."""
    result = normalize_record({"ppg": " 27.1 ", "name": "  LeBron James "}, CAREER_SCHEMA)
    assert result["ppg"] == 27.1
    assert result["name"] == "LeBron James"


def test_season_label_kept_as_written():
    """Labels with a readable leading year are not relabeled."""
    assert normalize_record({"season": "1998-99"}, SEASON_SCHEMA)["season"] == "1998-99"
    assert normalize_record({"season": "2019-2020"}, SEASON_SCHEMA)["season"] == "2019-2020"
    assert PlayerSeasonRecord.from_raw({"season": "2019-2020"}).start_year == 2019


def test_unreadable_season_label_uses_default():
    """Labels without a leading year fall back to the default."""
    assert normalize_record({"season": "last year"}, SEASON_SCHEMA)["season"] == "2023-24"
    assert normalize_record({"season": ""}, SEASON_SCHEMA)["season"] == "2023-24"


def test_unknown_fields_are_dropped():
    """Only schema fields survive normalization."""
    result = normalize_record({"ppg": "10", "favorite_color": "blue"}, SEASON_SCHEMA)
    assert "favorite_color" not in result
    assert set(result) == set(SEASON_SCHEMA)


def test_non_string_cells():
    """Numbers pass through, other shapes default."""
    result = normalize_record({"ppg": 12.5, "rpg": ["8"], "apg": True}, SEASON_SCHEMA)
    assert result["ppg"] == 12.5
    assert result["rpg"] == 0.0
    assert result["apg"] == 0.0


def test_career_record_from_raw():
    """Career rows become typed records."""
    record = PlayerCareerRecord.from_raw(
        {
            "id": "2",
            "name": "Michael Jordan",
            "games_played": "1072",
            "ppg": "30.1",
            "fg_pct": "0.497",
            "championships": "6",
            "role": "Guard",
        }
    )

    assert record.id == "2"
    assert record.games_played == 1072
    assert record.ppg == 30.1
    assert record.fg_pct == 0.497
    assert record.championships == 6
    assert record.rpg == 0.0
    assert record.career_pts == 0.0


def test_career_record_missing_name():
    """A nameless row still gets a display name."""
    assert PlayerCareerRecord.from_raw({"id": "7"}).name == "Unknown Player"


def test_season_start_year():
    """Leading year is extracted from the label."""
    record = PlayerSeasonRecord.from_raw({"season": "2019-20"})
    assert record.start_year == 2019


def test_sort_seasons():
    """Seasons sort by leading year in either direction."""
    seasons = [PlayerSeasonRecord.from_raw({"season": label}) for label in ["2015-16", "2003-04", "2011-12"]]

    assert [s.season for s in sort_seasons(seasons)] == ["2003-04", "2011-12", "2015-16"]
    assert [s.season for s in sort_seasons(seasons, descending=True)] == ["2015-16", "2011-12", "2003-04"]


def test_profile_season_lookup():
    """Profiles find seasons by label."""
    season = PlayerSeasonRecord.from_raw({"season": "2010-11", "ppg": "30"})
    profile = PlayerProfile(career=PlayerCareerRecord.from_raw({"id": "1"}), seasons=(season,))

    assert profile.season("2010-11") is season
    assert profile.season("1998-99") is None
    assert profile.season(None) is None
