"""Biometric profile models."""

from dataclasses import dataclass
from enum import Enum


class Gender(Enum):
    """Genders covered by the BMR formulas."""

    MALE = "MALE"
    FEMALE = "FEMALE"


class ActivityLevel(Enum):
    """Physical activity levels."""

    SEDENTARY = "SEDENTARY"
    LIGHT = "LIGHT"
    MODERATE = "MODERATE"
    ACTIVE = "ACTIVE"
    VERY_ACTIVE = "VERY_ACTIVE"


class Goal(Enum):
    """Body composition goals."""

    WEIGHT_LOSS = "WEIGHT_LOSS"
    WEIGHT_LOSS_WITH_MUSCLE_MAINTENANCE = "WEIGHT_LOSS_WITH_MUSCLE_MAINTENANCE"
    MAINTENANCE = "MAINTENANCE"
    MAINTENANCE_WITH_MUSCLE_FOCUS = "MAINTENANCE_WITH_MUSCLE_FOCUS"
    WEIGHT_GAIN = "WEIGHT_GAIN"
    WEIGHT_GAIN_WITH_MUSCLE_FOCUS = "WEIGHT_GAIN_WITH_MUSCLE_FOCUS"


@dataclass(frozen=True)
class BiometricProfile:
    """Biometric data for a user; any field may be missing until completed."""

    weight_kg: float | None = None
    height_cm: float | None = None
    age_years: int | None = None
    gender: Gender | None = None
    activity_level: ActivityLevel | None = None
    goal: Goal | None = None
