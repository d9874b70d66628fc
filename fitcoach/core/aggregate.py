from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable

UNKNOWN_MUSCLE_GROUP = "Unknown"


@dataclass
class DailyAggregate:
    date: str
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    meals: int = 0
    sessions: int = 0


@dataclass
class Aggregation:
    daily: dict[str, DailyAggregate] = field(default_factory=dict)
    muscle_volume: dict[str, int] = field(default_factory=dict)

    @property
    def total_sessions(self) -> int:
        return sum(day.sessions for day in self.daily.values())

    def nutrition_days(self) -> list[DailyAggregate]:
        # sparse: only days with at least one meal, ascending by date
        return [self.daily[k] for k in sorted(self.daily) if self.daily[k].meals]

    def session_days(self) -> list[DailyAggregate]:
        return [self.daily[k] for k in sorted(self.daily) if self.daily[k].sessions]

    def muscle_groups(self) -> list[tuple[str, int]]:
        return sorted(self.muscle_volume.items())


def day_key(instant: datetime) -> str:
    """UTC calendar day of an instant as YYYY-MM-DD; naive values are UTC."""
    if instant.tzinfo is not None:
        instant = instant.astimezone(timezone.utc)
    return instant.date().isoformat()


def muscle_group_key(exercise: Any) -> str:
    group = getattr(exercise, "muscle_group", None) if exercise is not None else None
    if group is None or not str(group).strip():
        return UNKNOWN_MUSCLE_GROUP
    return group


def aggregate(
    nutrition_entries: Iterable[Any],
    workout_logs: Iterable[Any],
) -> Aggregation:
    """
    Fold range-filtered meal entries and workout logs into per-day buckets.

    Each meal adds its calories/protein/carbs/fat to its day, each workout log
    counts one session on its day, and every set of every log counts one set
    for its exercise's muscle group over the whole period.
    """
    daily: dict[str, DailyAggregate] = {}
    muscle_volume: dict[str, int] = defaultdict(int)

    def bucket(instant: datetime) -> DailyAggregate:
        key = day_key(instant)
        if key not in daily:
            daily[key] = DailyAggregate(date=key)
        return daily[key]

    for entry in nutrition_entries:
        day = bucket(entry.date)
        day.calories += entry.calories or 0
        day.protein += entry.protein or 0
        day.carbs += entry.carbs or 0
        day.fat += entry.fat or 0
        day.meals += 1

    for log in workout_logs:
        bucket(log.date).sessions += 1
        for s in log.sets or []:
            muscle_volume[muscle_group_key(s.exercise_template)] += 1

    return Aggregation(daily=daily, muscle_volume=dict(muscle_volume))
