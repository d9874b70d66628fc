from datetime import datetime, timezone
from types import SimpleNamespace

from fitcoach.core.aggregate import DailyAggregate, aggregate
from fitcoach.core.macros import MacroTargets
from fitcoach.core.periods import resolve_range
from fitcoach.core.summary import (
    format_day_line,
    format_meal_plan_request,
    format_number,
    format_profile_line,
    format_summary,
    format_workout_plan_request,
)

UTC = timezone.utc
PERIOD = resolve_range("2025-01-06", "2025-01-12", 7, tz=UTC)
MACROS = MacroTargets(tdee=2744, target_calories=2344, protein_grams=150, fat_grams=60, carb_grams=301)


def _set(mg):
    return SimpleNamespace(exercise_template=SimpleNamespace(muscle_group=mg))


def test_empty_period_without_profile():
    text = format_summary(PERIOD, None, [], 0, {})

    assert "No fitness profile set." in text
    assert "No meals logged." in text
    assert "No sets logged." in text
    assert "Workouts: 0 sessions in this period." in text


def test_full_layout():
    result = aggregate(
        [
            SimpleNamespace(date=datetime(2025, 1, 7, 8), calories=600, protein=40, carbs=70, fat=15),
            SimpleNamespace(date=datetime(2025, 1, 7, 20), calories=900.5, protein=60, carbs=80, fat=30.25),
            SimpleNamespace(date=datetime(2025, 1, 6, 12), calories=2100, protein=150, carbs=220, fat=70),
        ],
        [
            SimpleNamespace(date=datetime(2025, 1, 6, 18), sets=[_set("Legs"), _set("Back")]),
            SimpleNamespace(date=datetime(2025, 1, 8, 18), sets=[_set("Chest"), _set("Back")]),
        ],
    )

    text = format_summary(
        PERIOD,
        MACROS,
        result.nutrition_days(),
        result.total_sessions,
        result.muscle_volume,
    )

    assert text == "\n".join(
        [
            "Date range: 2025-01-06 to 2025-01-12",
            "",
            "Target (based on profile): 2344 kcal, Protein 150g, Fat 60g, Carbs 301g.",
            "",
            "Daily nutrition (per logged day):",
            "2025-01-06: 2100 kcal (P 150g, C 220g, F 70g)",
            "2025-01-07: 1500.5 kcal (P 100g, C 150g, F 45.25g)",
            "",
            "Workouts: 2 sessions in this period.",
            "Sets per muscle group:",
            "Back: 2 sets",
            "Chest: 1 sets",
            "Legs: 1 sets",
        ]
    )


def test_format_number():
    assert format_number(2100.0) == "2100"
    assert format_number(12.34) == "12.34"
    assert format_number(0) == "0"
    assert format_number(1500.5) == "1500.5"


def test_day_line_keeps_logged_precision():
    day = DailyAggregate(date="2025-01-07", calories=512.25, protein=32.35, carbs=40.05, fat=12.75, meals=1)

    assert format_day_line(day) == "2025-01-07: 512.25 kcal (P 32.35g, C 40.05g, F 12.75g)"


def test_profile_line():
    profile = SimpleNamespace(
        gender="male",
        age=22,
        height_cm=180.0,
        weight_kg=75.5,
        goal_type="LOSE_FAT",
        activity_level="moderate",
    )

    assert format_profile_line(profile, MACROS) == (
        "Profile: gender=male, age=22, height=180cm, weight=75.5kg, goal=LOSE_FAT, "
        "activity=moderate. Target: 2344 kcal, P 150g, F 60g, C 301g."
    )
    assert format_profile_line(None, None) == "No fitness profile set."


def test_plan_requests():
    workout = format_workout_plan_request("No fitness profile set.", 4, "Upper/Lower", "intermediate")
    assert workout.splitlines()[2:6] == [
        "Workout plan request:",
        "Days per week: 4",
        "Preferred split type: Upper/Lower",
        "Experience level: intermediate",
    ]
    assert "Additional notes" not in workout

    meal = format_meal_plan_request("No fitness profile set.", 4, avoid="peanuts", notes="quick")
    assert "Meals per day: 4" in meal
    assert "Avoid: peanuts" in meal
    assert "Additional notes: quick" in meal
    assert "Preferences:" not in meal
