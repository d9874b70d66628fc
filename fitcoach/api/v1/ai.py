import logging
from datetime import datetime
from typing import Callable

from fastapi import APIRouter, Depends, HTTPException
from pydantic import Field
from sqlalchemy.orm import Session

from fitcoach.api.deps import get_current_user, get_db, resolve_period
from fitcoach.api.v1.schemas import CamelModel
from fitcoach.core.aggregate import aggregate
from fitcoach.core.config import settings
from fitcoach.core.db import utc_now
from fitcoach.core.macros import macros_for
from fitcoach.core.queries import get_profile, list_meals, list_workout_logs
from fitcoach.core.summary import (
    format_meal_plan_request,
    format_profile_line,
    format_summary,
    format_workout_plan_request,
)
from fitcoach.models.ai_feedback import AiFeedback, FeedbackType
from fitcoach.models.user import User
from fitcoach.services.ai_coach import (
    AiCoachClient,
    AiCoachError,
    AiNotConfiguredError,
    get_ai_coach,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["ai"])

FEEDBACK_HISTORY_LIMIT = 20


# ---------- Pydantic schemas ----------

class WeeklyReviewIn(CamelModel):
    # "YYYY-MM-DD" or a full ISO string
    from_: str | None = Field(default=None, alias="from")
    to: str | None = None


class WorkoutPlanIn(CamelModel):
    days_per_week: int = Field(default=4, ge=1, le=7)
    split_type: str = "Upper/Lower"
    experience: str = "intermediate"
    notes: str = ""


class MealPlanIn(CamelModel):
    meals_per_day: int = Field(default=3, ge=1, le=10)
    preferences: str = ""
    avoid: str = ""
    notes: str = ""


class AiFeedbackOut(CamelModel):
    id: int
    user_id: int
    date_from: datetime
    date_to: datetime
    feedback_type: str
    input_summary: str
    result_text: str
    created_at: datetime | None = None


def _feedback_out(feedback: AiFeedback) -> dict:
    return AiFeedbackOut.model_validate(feedback).model_dump(by_alias=True)


def _generate(generate: Callable[[str], str], input_summary: str) -> str:
    try:
        return generate(input_summary)
    except AiNotConfiguredError as e:
        logger.warning("AI request rejected: %s", e)
        raise HTTPException(503, "AI coach is not configured")
    except AiCoachError as e:
        logger.error("AI generation failed: %s", e)
        raise HTTPException(502, "Failed to generate AI response")


def _store_feedback(
    db: Session,
    user_id: int,
    feedback_type: FeedbackType,
    date_from: datetime,
    date_to: datetime,
    input_summary: str,
    result_text: str,
) -> AiFeedback:
    feedback = AiFeedback(
        user_id=user_id,
        date_from=date_from,
        date_to=date_to,
        feedback_type=feedback_type.value,
        input_summary=input_summary,
        result_text=result_text,
    )
    db.add(feedback)
    db.commit()
    db.refresh(feedback)
    return feedback


# ---------- Endpoints ----------

@router.post("/weekly-review", status_code=201)
def weekly_review(
    payload: WeeklyReviewIn | None = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    coach: AiCoachClient = Depends(get_ai_coach),
):
    """
    Summarize the period's nutrition and training, ask the model for a review
    and store both the prompt body and the answer.
    """
    payload = payload or WeeklyReviewIn()
    period = resolve_period(payload.from_, payload.to, settings.WEEKLY_REVIEW_SPAN_DAYS)
    start, end = period.as_utc_naive()

    macros = macros_for(get_profile(db, user.id))
    aggregation = aggregate(
        list_meals(db, user.id, start, end),
        list_workout_logs(db, user.id, start, end),
    )

    input_summary = format_summary(
        period,
        macros,
        aggregation.nutrition_days(),
        aggregation.total_sessions,
        aggregation.muscle_volume,
    )
    result_text = _generate(coach.weekly_review, input_summary)

    feedback = _store_feedback(
        db, user.id, FeedbackType.WEEKLY_REVIEW, start, end, input_summary, result_text
    )
    return {"feedback": _feedback_out(feedback)}


@router.post("/workout-plan", status_code=201)
def workout_plan(
    payload: WorkoutPlanIn | None = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    coach: AiCoachClient = Depends(get_ai_coach),
):
    payload = payload or WorkoutPlanIn()
    profile = get_profile(db, user.id)

    input_summary = format_workout_plan_request(
        format_profile_line(profile, macros_for(profile)),
        payload.days_per_week,
        payload.split_type,
        payload.experience,
        payload.notes,
    )
    result_text = _generate(coach.workout_plan, input_summary)

    now = utc_now()
    feedback = _store_feedback(
        db, user.id, FeedbackType.WORKOUT_PLAN, now, now, input_summary, result_text
    )
    return {"feedback": _feedback_out(feedback)}


@router.post("/meal-plan", status_code=201)
def meal_plan(
    payload: MealPlanIn | None = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    coach: AiCoachClient = Depends(get_ai_coach),
):
    payload = payload or MealPlanIn()
    profile = get_profile(db, user.id)

    input_summary = format_meal_plan_request(
        format_profile_line(profile, macros_for(profile)),
        payload.meals_per_day,
        payload.preferences,
        payload.avoid,
        payload.notes,
    )
    result_text = _generate(coach.meal_plan, input_summary)

    now = utc_now()
    feedback = _store_feedback(
        db, user.id, FeedbackType.MEAL_PLAN, now, now, input_summary, result_text
    )
    return {"feedback": _feedback_out(feedback)}


@router.get("/feedbacks")
def list_feedbacks(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """
    The caller's latest AI feedbacks, newest first.
    """
    feedbacks = (
        db.query(AiFeedback)
        .filter(AiFeedback.user_id == user.id)
        .order_by(AiFeedback.created_at.desc(), AiFeedback.id.desc())
        .limit(FEEDBACK_HISTORY_LIMIT)
        .all()
    )
    return {"feedbacks": [_feedback_out(f) for f in feedbacks]}
