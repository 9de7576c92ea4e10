"""Basal and total daily energy expenditure."""

from nutrient_ledger.domain.profile import ActivityLevel, BiometricProfile, Gender, Goal
from nutrient_ledger.errors import UnsupportedValueError
from nutrient_ledger.services.profiles import ensure_complete

_ACTIVITY_FACTORS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

_GOAL_FACTORS = {
    Goal.WEIGHT_LOSS: 0.85,
    Goal.WEIGHT_LOSS_WITH_MUSCLE_MAINTENANCE: 0.90,
    Goal.MAINTENANCE: 1.00,
    Goal.MAINTENANCE_WITH_MUSCLE_FOCUS: 1.05,
    Goal.WEIGHT_GAIN: 1.15,
    Goal.WEIGHT_GAIN_WITH_MUSCLE_FOCUS: 1.20,
}


def basal_metabolic_rate(profile: BiometricProfile) -> float:
    """Return BMR in kcal/day using the revised Harris-Benedict equations."""
    ensure_complete(profile, "weight_kg", "height_cm", "age_years", "gender")
    weight = float(profile.weight_kg)
    height = float(profile.height_cm)
    age = float(profile.age_years)
    if profile.gender is Gender.MALE:
        return 88.362 + 13.397 * weight + 4.799 * height - 5.677 * age
    if profile.gender is Gender.FEMALE:
        return 447.593 + 9.247 * weight + 3.098 * height - 4.330 * age
    raise UnsupportedValueError("gender", profile.gender)


def activity_factor(activity_level: ActivityLevel) -> float:
    """Return the TDEE multiplier for an activity level."""
    factor = _ACTIVITY_FACTORS.get(activity_level)
    if factor is None:
        raise UnsupportedValueError("activity level", activity_level)
    return factor


def total_daily_expenditure(profile: BiometricProfile) -> float:
    """Return TDEE in kcal/day."""
    ensure_complete(
        profile, "weight_kg", "height_cm", "age_years", "gender", "activity_level"
    )
    return basal_metabolic_rate(profile) * activity_factor(profile.activity_level)


def adjust_for_goal(tdee: float, goal: Goal) -> float:
    """Scale TDEE by the calorie adjustment for a goal."""
    factor = _GOAL_FACTORS.get(goal)
    if factor is None:
        raise UnsupportedValueError("goal", goal)
    return tdee * factor
