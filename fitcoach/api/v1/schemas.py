from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MacrosOut(CamelModel):
    tdee: int
    target_calories: int
    protein_grams: int
    fat_grams: int
    carb_grams: int


class UserOut(CamelModel):
    id: int
    email: str
    created_at: datetime | None = None


class ProfileOut(CamelModel):
    id: int
    user_id: int
    gender: str
    age: int
    height_cm: float
    weight_kg: float
    activity_level: str
    goal_type: str
    training_days: str
