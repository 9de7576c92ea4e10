"""Supabase repository for user biometric profiles."""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from supabase import Client

from nutrient_ledger.domain.profile import ActivityLevel, BiometricProfile, Gender, Goal
from nutrient_ledger.errors import UnsupportedValueError
from nutrient_ledger.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Reads biometric fields from the user profile table."""

    client: Client
    table_name: str = "user_profiles"

    def get_profile(self, user_id: UUID) -> BiometricProfile | None:
        """Return the profile for a user, if present."""
        response = (
            self.client.table(self.table_name)
            .select(
                "user_id, weight_kg, height_cm, age_years, gender, activity_level, goal"
            )
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return BiometricProfile(
            weight_kg=_to_float(row.get("weight_kg")),
            height_cm=_to_float(row.get("height_cm")),
            age_years=_to_int(row.get("age_years")),
            gender=_to_enum(Gender, "gender", row.get("gender")),
            activity_level=_to_enum(
                ActivityLevel, "activity level", row.get("activity_level")
            ),
            goal=_to_enum(Goal, "goal", row.get("goal")),
        )


def _to_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)


def _to_int(value: object) -> int | None:
    if value is None:
        return None
    return int(value)


def _to_enum(enum_type: type[Enum], field: str, value: object) -> Enum | None:
    if value is None:
        return None
    try:
        return enum_type(str(value).upper())
    except ValueError as exc:
        raise UnsupportedValueError(field, value) from exc
