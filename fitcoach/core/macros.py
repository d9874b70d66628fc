from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Any, Optional


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    LIGHT = "light"
    MODERATE = "moderate"
    HIGH = "high"


class GoalType(str, Enum):
    LOSE_FAT = "LOSE_FAT"
    GAIN_MUSCLE = "GAIN_MUSCLE"
    MAINTAIN = "MAINTAIN"


ACTIVITY_FACTORS = {
    ActivityLevel.HIGH.value: 1.725,
    ActivityLevel.MODERATE.value: 1.55,
    ActivityLevel.LIGHT.value: 1.375,
}
DEFAULT_ACTIVITY_FACTOR = 1.2

# kcal offset applied to TDEE per goal; MAINTAIN and unknown goals keep TDEE
GOAL_CALORIE_OFFSETS = {
    GoalType.LOSE_FAT.value: -400,
    GoalType.GAIN_MUSCLE.value: 200,
}

PROTEIN_G_PER_KG = 2.0
FAT_G_PER_KG = 0.8
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9


@dataclass(frozen=True)
class MacroTargets:
    tdee: int
    target_calories: int
    protein_grams: int
    fat_grams: int
    carb_grams: int


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves away from zero.

    Every rounding step of the macro computation goes through here so that
    intermediate values (tdee, protein, fat) feed the carb split identically
    on every call site.
    """
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def activity_factor(level: Any) -> float:
    return ACTIVITY_FACTORS.get(_enum_value(level), DEFAULT_ACTIVITY_FACTOR)


def compute_bmr(profile: Any) -> float:
    """Mifflin-St Jeor basal metabolic rate in kcal/day."""
    gender_offset = -161 if _enum_value(profile.gender) == Gender.FEMALE.value else 5
    return (
        10 * profile.weight_kg
        + 6.25 * profile.height_cm
        - 5 * profile.age
        + gender_offset
    )


def compute_macros(profile: Any) -> MacroTargets:
    bmr = compute_bmr(profile)
    tdee = round_half_up(bmr * activity_factor(profile.activity_level))

    target_calories = tdee + GOAL_CALORIE_OFFSETS.get(_enum_value(profile.goal_type), 0)

    protein_grams = round_half_up(profile.weight_kg * PROTEIN_G_PER_KG)
    fat_grams = round_half_up(profile.weight_kg * FAT_G_PER_KG)

    carb_calories = (
        target_calories
        - protein_grams * KCAL_PER_G_PROTEIN
        - fat_grams * KCAL_PER_G_FAT
    )
    carb_grams = max(0, round_half_up(carb_calories / KCAL_PER_G_CARBS))

    return MacroTargets(
        tdee=tdee,
        target_calories=target_calories,
        protein_grams=protein_grams,
        fat_grams=fat_grams,
        carb_grams=carb_grams,
    )


def macros_for(profile: Optional[Any]) -> Optional[MacroTargets]:
    # no profile yet is a valid state for new users
    if profile is None:
        return None
    return compute_macros(profile)
