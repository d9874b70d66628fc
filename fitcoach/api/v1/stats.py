from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from fitcoach.api.deps import get_current_user, get_db, resolve_period
from fitcoach.api.v1.schemas import CamelModel, MacrosOut
from fitcoach.core.aggregate import aggregate
from fitcoach.core.config import settings
from fitcoach.core.macros import macros_for
from fitcoach.core.queries import get_profile, list_meals, list_workout_logs
from fitcoach.core.stats import project
from fitcoach.models.user import User

router = APIRouter(prefix="/stats", tags=["stats"])


class NutritionDayOut(CamelModel):
    date: str
    calories: float
    protein: float
    carbs: float
    fat: float


class SessionsDayOut(CamelModel):
    date: str
    sessions: int


class MuscleGroupVolumeOut(CamelModel):
    muscle_group: str
    sets: int


class StatsOverviewOut(CamelModel):
    nutrition_daily: list[NutritionDayOut]
    macros: MacrosOut | None
    workout_sessions_per_day: list[SessionsDayOut]
    workout_volume_by_muscle_group: list[MuscleGroupVolumeOut]


@router.get("/overview", response_model=StatsOverviewOut)
def stats_overview(
    from_: str | None = Query(default=None, alias="from"),
    to: str | None = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Dashboard series for [from, to]; defaults to the trailing 30 days.
    """
    period = resolve_period(from_, to, settings.STATS_OVERVIEW_SPAN_DAYS)
    start, end = period.as_utc_naive()

    macros = macros_for(get_profile(db, user.id))
    aggregation = aggregate(
        list_meals(db, user.id, start, end),
        list_workout_logs(db, user.id, start, end),
    )

    return StatsOverviewOut.model_validate(project(aggregation, macros))
