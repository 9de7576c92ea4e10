"""Macronutrient allocation from an energy budget."""

from dataclasses import dataclass

from nutrient_ledger.domain.profile import ActivityLevel, BiometricProfile, Goal
from nutrient_ledger.errors import UnsupportedValueError
from nutrient_ledger.services.profiles import ensure_complete

KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_FAT = 9
KCAL_PER_GRAM_CARBOHYDRATE = 4
OLDER_ADULT_AGE = 50

_PROTEIN_PER_KG_BY_GOAL = {
    Goal.WEIGHT_LOSS: 2.0,
    Goal.WEIGHT_LOSS_WITH_MUSCLE_MAINTENANCE: 2.0,
    Goal.MAINTENANCE: 1.2,
    Goal.MAINTENANCE_WITH_MUSCLE_FOCUS: 1.5,
    Goal.WEIGHT_GAIN: 1.8,
    Goal.WEIGHT_GAIN_WITH_MUSCLE_FOCUS: 1.8,
}

_PROTEIN_ACTIVITY_INCREMENT = {
    ActivityLevel.SEDENTARY: 0.0,
    ActivityLevel.LIGHT: 0.1,
    ActivityLevel.MODERATE: 0.2,
    ActivityLevel.ACTIVE: 0.4,
    ActivityLevel.VERY_ACTIVE: 0.4,
}

_FAT_ENERGY_SHARE_BY_GOAL = {
    Goal.WEIGHT_LOSS: 0.20,
    Goal.WEIGHT_LOSS_WITH_MUSCLE_MAINTENANCE: 0.25,
    Goal.MAINTENANCE: 0.25,
    Goal.MAINTENANCE_WITH_MUSCLE_FOCUS: 0.30,
    Goal.WEIGHT_GAIN: 0.30,
    Goal.WEIGHT_GAIN_WITH_MUSCLE_FOCUS: 0.35,
}

SATURATED_FAT_SHARE = 0.30
UNSATURATED_FAT_SHARE = 0.70


@dataclass(frozen=True)
class FatSplit:
    """Saturated and unsaturated fat grams."""

    saturated: float
    unsaturated: float


def protein_grams(profile: BiometricProfile) -> float:
    """Return daily protein grams from goal, age and activity level."""
    ensure_complete(profile, "weight_kg", "age_years", "activity_level", "goal")
    per_kg = _PROTEIN_PER_KG_BY_GOAL.get(profile.goal)
    if per_kg is None:
        raise UnsupportedValueError("goal", profile.goal)
    if profile.age_years > OLDER_ADULT_AGE:
        per_kg += 0.2
    increment = _PROTEIN_ACTIVITY_INCREMENT.get(profile.activity_level)
    if increment is None:
        raise UnsupportedValueError("activity level", profile.activity_level)
    return (per_kg + increment) * float(profile.weight_kg)


def fat_grams(profile: BiometricProfile, total_energy_kcal: float) -> float:
    """Return daily fat grams as a goal-dependent share of total energy."""
    ensure_complete(profile, "goal")
    share = _FAT_ENERGY_SHARE_BY_GOAL.get(profile.goal)
    if share is None:
        raise UnsupportedValueError("goal", profile.goal)
    return total_energy_kcal * share / KCAL_PER_GRAM_FAT


def fat_split(total_fat_grams: float) -> FatSplit:
    """Split total fat into saturated and unsaturated grams."""
    return FatSplit(
        saturated=total_fat_grams * SATURATED_FAT_SHARE,
        unsaturated=total_fat_grams * UNSATURATED_FAT_SHARE,
    )


def carb_grams(
    total_energy_kcal: float, protein_grams: float, fat_grams: float
) -> float:
    """Return carbohydrate grams filling the energy left after protein and fat.

    The result is negative when protein and fat already exceed the budget.
    """
    remaining_kcal = total_energy_kcal - (
        protein_grams * KCAL_PER_GRAM_PROTEIN + fat_grams * KCAL_PER_GRAM_FAT
    )
    return remaining_kcal / KCAL_PER_GRAM_CARBOHYDRATE
