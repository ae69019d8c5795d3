"""Week/month overview and chart series routes."""

from datetime import date, datetime, time, timezone, tzinfo
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, Query

from mood.aggregator import month_overview, week_overview
from mood.resampler import plottable as plottable_points
from mood.resampler import resample, sub_periods
from mood.storage import MoodStore
from mood.windows import Window, localize, month_window, week_window
from shared_types import ChartPeriod
from web.auth import get_current_user
from web.deps import get_bucketing_tz, get_store, get_week_start
from web.models import ChartResponse, DataPointOut, OverviewResponse

logger = structlog.get_logger()

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


def _reference(day: Optional[date], tz: Optional[tzinfo]) -> datetime:
    """Noon of the requested day, or the current wall-clock time in the bucketing zone."""
    if day is not None:
        return datetime.combine(day, time(12))
    return localize(datetime.now(timezone.utc), tz)


@router.get("/week", response_model=OverviewResponse)
async def get_week(
    day: Optional[date] = Query(None, alias="date"),
    user: dict = Depends(get_current_user),
    store: MoodStore = Depends(get_store),
    week_start: str = Depends(get_week_start),
    tz: Optional[tzinfo] = Depends(get_bucketing_tz),
):
    """Seven day buckets for the week containing ``date`` plus the week summary."""
    reference = _reference(day, tz)
    entries = store.fetch_window(user["id"], week_window(reference, week_start))
    summary = week_overview(entries, reference, week_start=week_start, tz=tz)
    return OverviewResponse.from_summary(summary)


@router.get("/month", response_model=OverviewResponse)
async def get_month(
    day: Optional[date] = Query(None, alias="date"),
    user: dict = Depends(get_current_user),
    store: MoodStore = Depends(get_store),
    tz: Optional[tzinfo] = Depends(get_bucketing_tz),
):
    """One bucket per day of the month containing ``date`` plus the month summary."""
    reference = _reference(day, tz)
    entries = store.fetch_window(user["id"], month_window(reference))
    summary = month_overview(entries, reference, tz=tz)
    return OverviewResponse.from_summary(summary)


@router.get("/chart", response_model=ChartResponse)
async def get_chart(
    period: ChartPeriod = ChartPeriod.WEEK,
    day: Optional[date] = Query(None, alias="date"),
    plottable: bool = False,
    user: dict = Depends(get_current_user),
    store: MoodStore = Depends(get_store),
    week_start: str = Depends(get_week_start),
    tz: Optional[tzinfo] = Depends(get_bucketing_tz),
):
    """Energy and mood-score series, one point per sub-period.

    With ``plottable=true`` points where both series are zero are dropped,
    as a line chart would do.
    """
    reference = _reference(day, tz)
    windows = sub_periods(period, reference, week_start)
    entries = store.fetch_window(user["id"], Window(windows[0].start, windows[-1].end))
    points = resample(entries, period, reference, week_start=week_start, tz=tz)
    if plottable:
        points = plottable_points(points)
    logger.debug("dashboard.chart", user_id=user["id"], period=period.value, points=len(points))
    return ChartResponse(
        period=period.value,
        points=[DataPointOut.from_point(p) for p in points],
    )
