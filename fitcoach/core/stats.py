from dataclasses import dataclass, field
from typing import Optional

from fitcoach.core.aggregate import Aggregation
from fitcoach.core.macros import MacroTargets


@dataclass(frozen=True)
class NutritionDay:
    date: str
    calories: float
    protein: float
    carbs: float
    fat: float


@dataclass(frozen=True)
class SessionsDay:
    date: str
    sessions: int


@dataclass(frozen=True)
class MuscleGroupVolume:
    muscle_group: str
    sets: int


@dataclass(frozen=True)
class StatsOverview:
    macros: Optional[MacroTargets]
    nutrition_daily: list[NutritionDay] = field(default_factory=list)
    workout_sessions_per_day: list[SessionsDay] = field(default_factory=list)
    workout_volume_by_muscle_group: list[MuscleGroupVolume] = field(default_factory=list)


def project(aggregation: Aggregation, macros: Optional[MacroTargets]) -> StatsOverview:
    """Reshape an aggregation into the dashboard series, each sorted by key."""
    return StatsOverview(
        macros=macros,
        nutrition_daily=[
            NutritionDay(
                date=day.date,
                calories=day.calories,
                protein=day.protein,
                carbs=day.carbs,
                fat=day.fat,
            )
            for day in aggregation.nutrition_days()
        ],
        workout_sessions_per_day=[
            SessionsDay(date=day.date, sessions=day.sessions)
            for day in aggregation.session_days()
        ],
        workout_volume_by_muscle_group=[
            MuscleGroupVolume(muscle_group=mg, sets=count)
            for mg, count in aggregation.muscle_groups()
        ],
    )
