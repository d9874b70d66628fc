from types import SimpleNamespace

import pytest

from fitcoach.core.macros import (
    ActivityLevel,
    GoalType,
    MacroTargets,
    activity_factor,
    compute_bmr,
    compute_macros,
    macros_for,
    round_half_up,
)


def _profile(**overrides):
    values = dict(
        weight_kg=75,
        height_cm=180,
        age=22,
        gender="male",
        activity_level="moderate",
        goal_type="LOSE_FAT",
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def test_reference_profile():
    profile = _profile()

    assert compute_bmr(profile) == 1770
    assert compute_macros(profile) == MacroTargets(
        tdee=2744,
        target_calories=2344,
        protein_grams=150,
        fat_grams=60,
        carb_grams=301,
    )


def test_repeated_calls_are_identical():
    profile = _profile(weight_kg=82.3, height_cm=177.5, age=41)
    assert compute_macros(profile) == compute_macros(profile)


def test_female_gain_muscle_light():
    # bmr = 600 + 1031.25 - 150 - 161 = 1320.25 ; * 1.375 = 1815.34
    macros = compute_macros(
        _profile(
            weight_kg=60,
            height_cm=165,
            age=30,
            gender="female",
            activity_level="light",
            goal_type="GAIN_MUSCLE",
        )
    )
    assert macros.tdee == 1815
    assert macros.target_calories == 2015
    assert macros.protein_grams == 120
    assert macros.fat_grams == 48
    assert macros.carb_grams == 276


def test_unknown_activity_level_falls_back_to_sedentary_factor():
    macros = compute_macros(
        _profile(weight_kg=80, height_cm=180, age=30, activity_level="couch", goal_type="MAINTAIN")
    )
    # bmr 1780 * 1.2
    assert macros.tdee == 2136
    assert macros.target_calories == 2136


def test_unknown_goal_keeps_tdee():
    macros = compute_macros(_profile(goal_type="RECOMP"))
    assert macros.target_calories == macros.tdee


def test_carbs_never_negative():
    # protein + fat calories (2280) exceed the 1852 kcal target
    macros = compute_macros(
        _profile(
            weight_kg=150,
            height_cm=150,
            age=80,
            gender="female",
            activity_level="sedentary",
            goal_type="LOSE_FAT",
        )
    )
    assert macros.target_calories == 1852
    assert macros.protein_grams * 4 + macros.fat_grams * 9 > macros.target_calories
    assert macros.carb_grams == 0


def test_enum_members_are_accepted():
    by_value = compute_macros(_profile())
    by_enum = compute_macros(
        _profile(activity_level=ActivityLevel.MODERATE, goal_type=GoalType.LOSE_FAT)
    )
    assert by_enum == by_value


@pytest.mark.parametrize(
    "level, factor",
    [("high", 1.725), ("moderate", 1.55), ("light", 1.375), ("", 1.2), (None, 1.2)],
)
def test_activity_factor(level, factor):
    assert activity_factor(level) == factor


@pytest.mark.parametrize(
    "value, expected",
    [(2.5, 3), (3.5, 4), (2.4999, 2), (-2.5, -3), (-0.4, 0), (2743.5, 2744)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_macros_for_without_profile():
    assert macros_for(None) is None
    assert macros_for(_profile()) == compute_macros(_profile())
