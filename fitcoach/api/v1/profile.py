from fastapi import APIRouter, Depends
from pydantic import Field
from sqlalchemy.orm import Session

from fitcoach.api.deps import get_current_user, get_db
from fitcoach.api.v1.schemas import CamelModel, MacrosOut, ProfileOut
from fitcoach.core.macros import ActivityLevel, Gender, GoalType, macros_for
from fitcoach.core.queries import get_profile
from fitcoach.models.profile import FitnessProfile
from fitcoach.models.user import User

router = APIRouter(prefix="/profile", tags=["profile"])


# ---------- Pydantic schemas ----------

class ProfileIn(CamelModel):
    gender: Gender
    age: int = Field(..., gt=0)
    height_cm: float = Field(..., gt=0)
    weight_kg: float = Field(..., gt=0)
    activity_level: ActivityLevel
    goal_type: GoalType
    training_days: str = Field(..., min_length=1)


class ProfileResponse(CamelModel):
    profile: ProfileOut | None
    macros: MacrosOut | None


def _profile_response(profile: FitnessProfile | None) -> ProfileResponse:
    macros = macros_for(profile)
    return ProfileResponse(
        profile=ProfileOut.model_validate(profile) if profile else None,
        macros=MacrosOut.model_validate(macros) if macros else None,
    )


# ---------- Endpoints ----------

@router.get("/me", response_model=ProfileResponse)
def get_my_profile(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """
    Return the caller's profile and macro targets; both null before setup.
    """
    return _profile_response(get_profile(db, user.id))


@router.post("/upsert", response_model=ProfileResponse)
def upsert_profile(
    payload: ProfileIn,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    profile = get_profile(db, user.id)
    if profile is None:
        profile = FitnessProfile(user_id=user.id)
        db.add(profile)

    profile.gender = payload.gender.value
    profile.age = payload.age
    profile.height_cm = payload.height_cm
    profile.weight_kg = payload.weight_kg
    profile.activity_level = payload.activity_level.value
    profile.goal_type = payload.goal_type.value
    profile.training_days = payload.training_days.strip()

    db.commit()
    db.refresh(profile)

    return _profile_response(profile)
