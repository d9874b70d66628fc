from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import Field, field_validator
from sqlalchemy.orm import Session

from fitcoach.api.deps import get_current_user, get_db
from fitcoach.api.v1.schemas import CamelModel
from fitcoach.core.aggregate import aggregate
from fitcoach.core.periods import InvalidDateError, open_range, parse_instant
from fitcoach.core.queries import list_meals
from fitcoach.models.nutrition import MealEntry
from fitcoach.models.user import User

router = APIRouter(prefix="/nutrition", tags=["nutrition"])


# ---------- Pydantic schemas ----------

class MealEntryIn(CamelModel):
    date: str = Field(..., description="YYYY-MM-DD or ISO8601 timestamp of the meal")
    name: str
    calories: float = Field(..., ge=0)
    protein: float = Field(..., ge=0)
    carbs: float = Field(..., ge=0)
    fat: float = Field(..., ge=0)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be empty")
        return v


class MealEntryOut(CamelModel):
    id: int
    user_id: int
    date: datetime
    name: str
    calories: float
    protein: float
    carbs: float
    fat: float
    created_at: datetime | None = None


class DailyTotalOut(CamelModel):
    date: str
    calories: float
    protein: float
    carbs: float
    fat: float


# ---------- Endpoints ----------

@router.get("/entries")
def list_meal_entries(
    from_: str | None = Query(default=None, alias="from"),
    to: str | None = None,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Meal entries in an optional whole-day window plus per-day totals.
    """
    try:
        start, end = open_range(from_, to)
    except InvalidDateError as e:
        raise HTTPException(400, str(e))

    entries = list_meals(db, user.id, start, end)
    totals = aggregate(entries, []).nutrition_days()

    return {
        "entries": [MealEntryOut.model_validate(e).model_dump(by_alias=True) for e in entries],
        "totals": [DailyTotalOut.model_validate(t).model_dump(by_alias=True) for t in totals],
    }


@router.post("/entries", status_code=201)
def create_meal_entry(
    payload: MealEntryIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        dt = parse_instant(payload.date)
    except InvalidDateError as e:
        raise HTTPException(400, str(e))

    entry = MealEntry(
        user_id=user.id,
        date=dt,
        name=payload.name,
        calories=payload.calories,
        protein=payload.protein,
        carbs=payload.carbs,
        fat=payload.fat,
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)

    return {"entry": MealEntryOut.model_validate(entry).model_dump(by_alias=True)}


@router.delete("/entries/{entry_id}")
def delete_meal_entry(
    entry_id: int,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    entry = (
        db.query(MealEntry)
        .filter(MealEntry.id == entry_id, MealEntry.user_id == user.id)
        .one_or_none()
    )
    if not entry:
        raise HTTPException(404, "Entry not found")

    db.delete(entry)
    db.commit()
    return {"success": True}
