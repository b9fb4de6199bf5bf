import logging
from datetime import date, datetime

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from core.config import TIMELINE_CLUSTER_THRESHOLD_PX
from db.deps import get_db
from schemas.goal import GoalIn
from schemas.timeline import TimelineLayout, ZoomLevel, ZoomLevelOption
from services.goals import list_goals
from services.timeline import build_timeline_layout, list_zoom_levels

LOGGER = logging.getLogger(__name__)

router = APIRouter()

_DATE_FORMAT = "%Y-%m-%d"


def _parse_date(value: str) -> date:
    try:
        dt = datetime.strptime(value, _DATE_FORMAT)
        return dt.date()
    except ValueError:
        raise HTTPException(400, detail="Invalid date format. Use YYYY-MM-DD.")


def _resolve_today(value: str | None) -> date:
    if value is None:
        return date.today()
    return _parse_date(value)


@router.get("/zoom-levels", response_model=list[ZoomLevelOption])
def zoom_levels():
    return list_zoom_levels()


@router.get("/layout", response_model=TimelineLayout)
def stored_goals_layout(
    zoom: ZoomLevel = Query(ZoomLevel.ALL, description="Zoom level"),
    user_id: str | None = Query(None, description="Filter by user ID (optional)"),
    today: str | None = Query(None, description="Override today (YYYY-MM-DD)"),
    db: Session = Depends(get_db),
):
    day = _resolve_today(today)
    goals = list_goals(db, user_id=user_id)
    LOGGER.info("loaded %d goals for timeline (user_id=%s)", len(goals), user_id)
    return build_timeline_layout(
        goals, zoom, today=day, threshold=TIMELINE_CLUSTER_THRESHOLD_PX
    )


@router.post("/layout", response_model=TimelineLayout)
def posted_goals_layout(
    goals: list[GoalIn] = Body(..., description="Goals to lay out"),
    zoom: ZoomLevel = Query(ZoomLevel.ALL, description="Zoom level"),
    today: str | None = Query(None, description="Override today (YYYY-MM-DD)"),
):
    day = _resolve_today(today)
    return build_timeline_layout(
        goals, zoom, today=day, threshold=TIMELINE_CLUSTER_THRESHOLD_PX
    )
