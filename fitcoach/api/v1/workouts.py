import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import Field
from sqlalchemy.orm import Session

from fitcoach.api.deps import get_current_user, get_db
from fitcoach.api.v1.schemas import CamelModel
from fitcoach.core.periods import InvalidDateError, open_range, parse_instant
from fitcoach.core.queries import list_workout_logs
from fitcoach.models.user import User
from fitcoach.models.workout import (
    WorkoutExerciseTemplate,
    WorkoutLog,
    WorkoutSet,
    WorkoutTemplate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/workouts", tags=["workouts"])


# ---------- Pydantic schemas ----------

class ExerciseTemplateIn(CamelModel):
    # incomplete rows are dropped rather than rejected
    name: str | None = None
    muscle_group: str | None = None
    sets: int | None = None
    reps: int | None = None
    rir: int | None = None

    def is_complete(self) -> bool:
        return bool(
            self.name
            and self.name.strip()
            and self.muscle_group
            and self.muscle_group.strip()
            and self.sets
            and self.reps
            and self.rir is not None
        )


class WorkoutTemplateIn(CamelModel):
    name: str | None = None
    exercises: list[ExerciseTemplateIn] = Field(default_factory=list)


class ExerciseTemplateOut(CamelModel):
    id: int
    workout_template_id: int
    name: str
    muscle_group: str | None
    sets: int
    reps: int
    rir: int
    order_index: int


class WorkoutTemplateOut(CamelModel):
    id: int
    user_id: int
    name: str
    created_at: datetime | None = None
    exercises: list[ExerciseTemplateOut] = []


class WorkoutTemplateRef(CamelModel):
    id: int
    name: str


class WorkoutSetIn(CamelModel):
    exercise_template_id: int | None = None
    set_index: int | None = None
    weight_kg: float | None = None
    reps: int | None = None
    rir: int | None = None

    def is_complete(self) -> bool:
        return (
            bool(self.exercise_template_id)
            and self.set_index is not None
            and self.weight_kg is not None
            and self.reps is not None
        )


class WorkoutLogIn(CamelModel):
    date: str | None = None
    workout_template_id: int | None = None
    notes: str | None = None
    sets: list[WorkoutSetIn] = Field(default_factory=list)


class WorkoutSetOut(CamelModel):
    id: int
    workout_log_id: int
    exercise_template_id: int
    set_index: int
    weight_kg: float
    reps: int
    rir: int | None
    exercise_template: ExerciseTemplateOut


class WorkoutLogOut(CamelModel):
    id: int
    user_id: int
    date: datetime
    workout_template_id: int | None
    notes: str | None
    created_at: datetime | None = None
    workout_template: WorkoutTemplateRef | None = None
    sets: list[WorkoutSetOut] = []


def _template_out(template: WorkoutTemplate) -> dict:
    return WorkoutTemplateOut.model_validate(template).model_dump(by_alias=True)


def _log_out(log: WorkoutLog) -> dict:
    return WorkoutLogOut.model_validate(log).model_dump(by_alias=True)


# ---------- Templates ----------

@router.get("/templates")
def list_templates(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    templates = (
        db.query(WorkoutTemplate)
        .filter(WorkoutTemplate.user_id == user.id)
        .order_by(WorkoutTemplate.created_at.desc(), WorkoutTemplate.id.desc())
        .all()
    )
    return {"templates": [_template_out(t) for t in templates]}


@router.post("/templates", status_code=201)
def create_template(
    payload: WorkoutTemplateIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Create a template from the complete exercise rows; incomplete rows are dropped.
    """
    name = (payload.name or "").strip()
    if not name or not payload.exercises:
        raise HTTPException(400, "Name and at least one exercise are required")

    valid = [e for e in payload.exercises if e.is_complete()]
    if not valid:
        raise HTTPException(400, "At least one valid exercise is required")

    template = WorkoutTemplate(user_id=user.id, name=name)
    for index, e in enumerate(valid):
        template.exercises.append(
            WorkoutExerciseTemplate(
                name=e.name.strip(),
                muscle_group=e.muscle_group.strip(),
                sets=e.sets,
                reps=e.reps,
                rir=e.rir,
                order_index=index,
            )
        )

    db.add(template)
    db.commit()
    db.refresh(template)

    return {"template": _template_out(template)}


@router.delete("/templates/{template_id}")
def delete_template(
    template_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    template = (
        db.query(WorkoutTemplate)
        .filter(WorkoutTemplate.id == template_id, WorkoutTemplate.user_id == user.id)
        .one_or_none()
    )
    if not template:
        raise HTTPException(404, "Template not found")

    logs_count = (
        db.query(WorkoutLog)
        .filter(WorkoutLog.user_id == user.id, WorkoutLog.workout_template_id == template_id)
        .count()
    )
    if logs_count > 0:
        raise HTTPException(
            400,
            "This template has workout logs. You cannot delete it while logs exist.",
        )

    # exercises go with it (delete-orphan cascade)
    db.delete(template)
    db.commit()
    return {"success": True}


# ---------- Logs ----------

@router.get("/logs")
def list_logs(
    from_: str | None = Query(default=None, alias="from"),
    to: str | None = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Workout logs in an optional whole-day window, newest first, sets in order.
    """
    try:
        start, end = open_range(from_, to)
    except InvalidDateError as e:
        raise HTTPException(400, str(e))

    logs = list_workout_logs(db, user.id, start, end, newest_first=True)
    return {"logs": [_log_out(log) for log in logs]}


@router.post("/logs", status_code=201)
def create_log(
    payload: WorkoutLogIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    if not payload.date:
        raise HTTPException(400, "Date is required")

    try:
        dt = parse_instant(payload.date)
    except InvalidDateError as e:
        raise HTTPException(400, str(e))

    if payload.workout_template_id is not None:
        owned = (
            db.query(WorkoutTemplate.id)
            .filter(
                WorkoutTemplate.id == payload.workout_template_id,
                WorkoutTemplate.user_id == user.id,
            )
            .one_or_none()
        )
        if owned is None:
            raise HTTPException(400, f"Unknown workout template {payload.workout_template_id}")

    valid_sets = [s for s in payload.sets if s.is_complete()]

    # sets may only point at exercises from the caller's own templates
    exercise_ids = {s.exercise_template_id for s in valid_sets}
    if exercise_ids:
        owned_ids = {
            row[0]
            for row in db.query(WorkoutExerciseTemplate.id)
            .join(WorkoutTemplate)
            .filter(
                WorkoutExerciseTemplate.id.in_(exercise_ids),
                WorkoutTemplate.user_id == user.id,
            )
            .all()
        }
        unknown = sorted(exercise_ids - owned_ids)
        if unknown:
            raise HTTPException(400, f"Unknown exercise template(s): {unknown}")

    log = WorkoutLog(
        user_id=user.id,
        date=dt,
        workout_template_id=payload.workout_template_id,
        notes=payload.notes,
    )
    for s in valid_sets:
        log.sets.append(
            WorkoutSet(
                exercise_template_id=s.exercise_template_id,
                set_index=s.set_index,
                weight_kg=s.weight_kg,
                reps=s.reps,
                rir=s.rir,
            )
        )

    db.add(log)
    db.commit()
    db.refresh(log)

    logger.info("Workout log %s created for user %s with %d sets", log.id, user.id, len(valid_sets))
    return {"log": _log_out(log)}


@router.delete("/logs/{log_id}")
def delete_log(
    log_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    log = (
        db.query(WorkoutLog)
        .filter(WorkoutLog.id == log_id, WorkoutLog.user_id == user.id)
        .one_or_none()
    )
    if not log:
        raise HTTPException(404, "Log not found")

    db.delete(log)
    db.commit()
    return {"success": True}
