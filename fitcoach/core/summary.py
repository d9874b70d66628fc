from typing import Any, Iterable, Mapping, Optional

from fitcoach.core.aggregate import DailyAggregate
from fitcoach.core.macros import MacroTargets
from fitcoach.core.periods import Period

NO_PROFILE_LINE = "No fitness profile set."
NO_MEALS_LINE = "No meals logged."
NO_SETS_LINE = "No sets logged."


def format_number(value: float) -> str:
    """Render a logged quantity as-is, dropping a trailing ".0"."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _enum_value(value: Any) -> Any:
    return getattr(value, "value", value)


def format_macro_line(macros: Optional[MacroTargets]) -> str:
    if macros is None:
        return NO_PROFILE_LINE
    return (
        f"Target (based on profile): {macros.target_calories} kcal, "
        f"Protein {macros.protein_grams}g, Fat {macros.fat_grams}g, "
        f"Carbs {macros.carb_grams}g."
    )


def format_profile_line(profile: Optional[Any], macros: Optional[MacroTargets]) -> str:
    """Profile context line used by the workout- and meal-plan prompts."""
    if profile is None or macros is None:
        return NO_PROFILE_LINE
    return (
        f"Profile: gender={_enum_value(profile.gender)}, age={profile.age}, "
        f"height={format_number(profile.height_cm)}cm, "
        f"weight={format_number(profile.weight_kg)}kg, "
        f"goal={_enum_value(profile.goal_type)}, "
        f"activity={_enum_value(profile.activity_level)}. "
        f"Target: {macros.target_calories} kcal, P {macros.protein_grams}g, "
        f"F {macros.fat_grams}g, C {macros.carb_grams}g."
    )


def format_day_line(day: DailyAggregate) -> str:
    return (
        f"{day.date}: {format_number(day.calories)} kcal "
        f"(P {format_number(day.protein)}g, C {format_number(day.carbs)}g, "
        f"F {format_number(day.fat)}g)"
    )


def format_summary(
    period: Period,
    macros: Optional[MacroTargets],
    nutrition_days: Iterable[DailyAggregate],
    total_sessions: int,
    muscle_volume: Mapping[str, int],
) -> str:
    """
    Render the weekly-review prompt body.

    Day lines follow the order of `nutrition_days` (callers pass them sorted);
    muscle groups are always listed alphabetically.
    """
    day_lines = [format_day_line(day) for day in nutrition_days]
    muscle_lines = [f"{mg}: {count} sets" for mg, count in sorted(muscle_volume.items())]

    return "\n".join(
        [
            f"Date range: {period.start_day.isoformat()} to {period.end_day.isoformat()}",
            "",
            format_macro_line(macros),
            "",
            "Daily nutrition (per logged day):",
            "\n".join(day_lines) if day_lines else NO_MEALS_LINE,
            "",
            f"Workouts: {total_sessions} sessions in this period.",
            "Sets per muscle group:\n" + "\n".join(muscle_lines)
            if muscle_lines
            else NO_SETS_LINE,
        ]
    )


def format_workout_plan_request(
    profile_line: str,
    days_per_week: int,
    split_type: str,
    experience: str,
    notes: str = "",
) -> str:
    return "\n".join(
        [
            profile_line,
            "",
            "Workout plan request:",
            f"Days per week: {days_per_week}",
            f"Preferred split type: {split_type}",
            f"Experience level: {experience}",
            f"Additional notes: {notes}" if notes else "",
        ]
    )


def format_meal_plan_request(
    profile_line: str,
    meals_per_day: int,
    preferences: str = "",
    avoid: str = "",
    notes: str = "",
) -> str:
    return "\n".join(
        [
            profile_line,
            "",
            "Meal plan request:",
            f"Meals per day: {meals_per_day}",
            f"Preferences: {preferences}" if preferences else "",
            f"Avoid: {avoid}" if avoid else "",
            f"Additional notes: {notes}" if notes else "",
        ]
    )
