from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session, selectinload

from fitcoach.models.nutrition import MealEntry
from fitcoach.models.profile import FitnessProfile
from fitcoach.models.workout import WorkoutLog, WorkoutSet


def get_profile(db: Session, user_id: int) -> Optional[FitnessProfile]:
    return (
        db.query(FitnessProfile)
        .filter(FitnessProfile.user_id == user_id)
        .one_or_none()
    )


def list_meals(
    db: Session,
    user_id: int,
    start: datetime | None = None,
    end: datetime | None = None,
) -> list[MealEntry]:
    """Meal entries of one user inside [start, end] (naive UTC), oldest first."""
    q = db.query(MealEntry).filter(MealEntry.user_id == user_id)
    if start is not None:
        q = q.filter(MealEntry.date >= start)
    if end is not None:
        q = q.filter(MealEntry.date <= end)
    return q.order_by(MealEntry.date.asc(), MealEntry.id.asc()).all()


def list_workout_logs(
    db: Session,
    user_id: int,
    start: datetime | None = None,
    end: datetime | None = None,
    newest_first: bool = False,
) -> list[WorkoutLog]:
    """Workout logs with their sets and exercise templates eagerly loaded."""
    q = (
        db.query(WorkoutLog)
        .options(
            selectinload(WorkoutLog.workout_template),
            selectinload(WorkoutLog.sets).selectinload(WorkoutSet.exercise_template),
        )
        .filter(WorkoutLog.user_id == user_id)
    )
    if start is not None:
        q = q.filter(WorkoutLog.date >= start)
    if end is not None:
        q = q.filter(WorkoutLog.date <= end)

    if newest_first:
        return q.order_by(WorkoutLog.date.desc(), WorkoutLog.id.desc()).all()
    return q.order_by(WorkoutLog.date.asc(), WorkoutLog.id.asc()).all()
