# hoopcompare/api/main.py
"""FastAPI application for the hoopcompare stats API."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict
from typing import Literal

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import JSONResponse

load_dotenv()

from ..processing.browse import (  # noqa: E402
    DEFAULT_TOP_PLAYERS,
    SEASON_CHART_STATS,
    SORT_FIELDS,
    rank_players,
    search_players,
    season_series,
)
from ..processing.comparison import (  # noqa: E402
    BAR_STATS,
    RADAR_AXES,
    CompareMode,
    SelectionIncomplete,
    compare_players,
)
from ..storage.csv_store import StoreError, close_store, get_store, init_store  # noqa: E402
from .models import (  # noqa: E402
    BarRow,
    CategoryAxis,
    ComparisonResult,
    PlayerDetail,
    PlayerSummary,
    RadarSeries,
    SeasonSeries,
    SeasonStats,
)

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Initialize the data store on startup, release it on shutdown."""
    init_store()
    yield
    close_store()


app = FastAPI(
    title="hoopcompare API",
    description="Player statistics browsing and head-to-head comparison",
    version=VERSION,
    lifespan=lifespan,
)


@app.exception_handler(StoreError)
async def store_error_handler(_request: Request, exc: StoreError):
    logger.error("Store error: %s", exc)
    return JSONResponse(status_code=500, content={"detail": "Failed to fetch player data"})


@app.get("/")
async def root():
    """API root - health check."""
    return {"status": "ok", "version": VERSION}


@app.get("/players", response_model=list[PlayerSummary])
def list_players(
    search: str | None = None,
    sort_by: str = "career_pts",
    limit: int = Query(DEFAULT_TOP_PLAYERS, ge=1, le=500),
):
    """List players, best first, with optional name search."""
    if sort_by not in SORT_FIELDS:
        raise HTTPException(status_code=422, detail=f"sort_by must be one of {sorted(SORT_FIELDS)}")

    players = search_players(get_store().list_career_records(), search)
    return [PlayerSummary(**asdict(p)) for p in rank_players(players, sort_by=sort_by, limit=limit)]


@app.get("/players/{player_id}", response_model=PlayerDetail)
def get_player(player_id: str):
    """Get career averages for a player."""
    player = get_store().get_career_record(player_id)
    if not player:
        raise HTTPException(status_code=404, detail="Player not found")
    return PlayerDetail(**asdict(player))


@app.get("/players/{player_id}/seasons", response_model=list[SeasonStats])
def get_player_seasons(player_id: str, order: Literal["asc", "desc"] = "desc"):
    """Get a player's season table, most recent season first by default."""
    store = get_store()
    if not store.get_career_record(player_id):
        raise HTTPException(status_code=404, detail="Player not found")

    seasons = store.get_season_records(player_id)
    if order == "desc":
        seasons = seasons[::-1]
    return [SeasonStats(start_year=s.start_year, **asdict(s)) for s in seasons]


@app.get("/players/{player_id}/seasons/chart", response_model=SeasonSeries)
def get_player_season_chart(player_id: str, stat: str = "ppg"):
    """Get season-by-season chart data for one stat."""
    if stat not in SEASON_CHART_STATS:
        raise HTTPException(status_code=422, detail=f"stat must be one of {list(SEASON_CHART_STATS)}")

    store = get_store()
    if not store.get_career_record(player_id):
        raise HTTPException(status_code=404, detail="Player not found")

    series = season_series(store.get_season_records(player_id), stat)
    return SeasonSeries(
        player_id=player_id,
        stat=series.stat,
        label=series.label,
        seasons=list(series.seasons),
        values=list(series.values),
        trend_up=series.trend_up,
    )


# Comparison endpoints
@app.get("/compare", response_model=ComparisonResult)
def compare(
    p1: str = "",
    p2: str = "",
    mode: CompareMode = CompareMode.CAREER,
    s1: str | None = None,
    s2: str | None = None,
):
    """Compare two players head-to-head."""
    result = compare_players(get_store(), p1, p2, mode, season_a=s1, season_b=s2)
    if isinstance(result, SelectionIncomplete):
        raise HTTPException(
            status_code=404,
            detail={"message": result.message, "missing": list(result.missing)},
        )

    return ComparisonResult(
        mode=result.mode.value,
        player1=PlayerDetail(**asdict(result.player_a)),
        player2=PlayerDetail(**asdict(result.player_b)),
        season1=result.season_a,
        season2=result.season_b,
        radar_labels=list(result.radar_labels),
        radar_series=[
            RadarSeries(player_id=s.player_id, name=s.name, values=list(s.values))
            for s in result.radar_series
        ],
        bar_rows=[
            BarRow(
                key=row.key,
                label=row.label,
                value1=row.value1,
                value2=row.value2,
                higher_side=row.higher_side.value,
                max_value=row.max_value,
            )
            for row in result.bar_rows
        ],
    )


@app.get("/compare/categories", response_model=list[CategoryAxis])
async def get_compare_categories(mode: CompareMode = CompareMode.CAREER):
    """Radar axes for a mode, with the bar maximum for the same stat if any."""
    bar_max = {stat.key: stat.max_value for stat in BAR_STATS[mode]}
    return [
        CategoryAxis(
            key=axis.key,
            label=axis.label,
            radar_max=axis.reference_max,
            bar_max=bar_max.get(axis.key),
            multiplier=axis.multiplier,
        )
        for axis in RADAR_AXES[mode]
    ]
