"""Daily recommended intake ledger.

A user's ledger row for a day is seeded on first access with the reference
intake table, personalized for energy and macronutrients, and afterwards only
decremented as meals are consumed.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol
from uuid import UUID

from nutrient_ledger.domain.ledger import DailyLedgerRow
from nutrient_ledger.domain.nutrients import NutrientMap
from nutrient_ledger.domain.profile import BiometricProfile
from nutrient_ledger.domain.reference_intake import (
    CARBOHYDRATE,
    ENERGY_KCAL,
    PROTEIN,
    SATURATED_FAT,
    TOTAL_FAT,
    UNSATURATED_FAT,
    reference_intake,
)
from nutrient_ledger.errors import (
    LedgerCreateError,
    LedgerNotFoundError,
    LedgerUpdateError,
)
from nutrient_ledger.services.energy import adjust_for_goal, total_daily_expenditure
from nutrient_ledger.services.locks import KeyedLock
from nutrient_ledger.services.macros import (
    carb_grams,
    fat_grams,
    fat_split,
    protein_grams,
)
from nutrient_ledger.services.names import normalize_nutrient_name
from nutrient_ledger.services.profiles import ProfileService, ensure_complete

_logger = logging.getLogger(__name__)


class LedgerRepository(Protocol):
    """Persistence interface for daily ledger rows."""

    def get_row(self, user_id: UUID, day: date) -> DailyLedgerRow | None:
        """Return the row for a user and day, if present."""

    def create_row(
        self, user_id: UUID, day: date, nutrients: dict[str, float | None]
    ) -> DailyLedgerRow:
        """Create a row for a user and day, or return the one already stored."""

    def update_nutrients(
        self, row: DailyLedgerRow, nutrients: dict[str, float | None]
    ) -> DailyLedgerRow:
        """Replace a row's nutrients if its version is unchanged and return it."""

    def list_rows(self, user_id: UUID, start: date, end: date) -> list[DailyLedgerRow]:
        """Return rows with start <= day <= end."""


def calculate_daily_intake(profile: BiometricProfile) -> dict[str, float | None]:
    """Compute one day of personalized recommended intake."""
    ensure_complete(profile)
    tdee = total_daily_expenditure(profile)
    total_energy_kcal = adjust_for_goal(tdee, profile.goal)
    protein = protein_grams(profile)
    fat = fat_grams(profile, total_energy_kcal)
    split = fat_split(fat)
    carbohydrate = carb_grams(total_energy_kcal, protein, fat)

    intake = reference_intake()
    intake.update(
        {
            ENERGY_KCAL: total_energy_kcal,
            PROTEIN: protein,
            TOTAL_FAT: fat,
            SATURATED_FAT: split.saturated,
            UNSATURATED_FAT: split.unsaturated,
            CARBOHYDRATE: carbohydrate,
        }
    )
    return intake


def apply_consumption(
    nutrients: dict[str, float | None], consumed: NutrientMap
) -> tuple[dict[str, float | None], list[str]]:
    """Subtract consumed amounts from matching nutrients.

    Returns the updated nutrients and the consumed names with no match.
    """
    remaining = dict(nutrients)
    by_normalized = {normalize_nutrient_name(name): name for name in nutrients}
    unmatched: list[str] = []
    for consumed_name, info in consumed.items():
        ledger_name = by_normalized.get(normalize_nutrient_name(consumed_name))
        if ledger_name is None:
            unmatched.append(consumed_name)
            continue
        current = _value_or_zero(remaining[ledger_name])
        amount = _value_or_zero(info.value)
        remaining[ledger_name] = current - amount
        _logger.debug(
            "Nutrient %s: initial=%s consumed=%s remaining=%s",
            ledger_name,
            current,
            amount,
            remaining[ledger_name],
        )
    return remaining, unmatched


@dataclass
class DailyIntakeService:
    """Creates, reads and decrements daily ledger rows."""

    profile_service: ProfileService
    repository: LedgerRepository
    clock: Callable[[], date] = date.today
    locks: KeyedLock = field(default_factory=KeyedLock)

    def get_or_create(
        self, user_id: UUID, today: date | None = None
    ) -> DailyLedgerRow:
        """Return the user's row for today, seeding it on first access."""
        day = today or self.clock()
        profile = self.profile_service.get_profile(user_id)
        with self.locks.hold((user_id, day)):
            existing = self.repository.get_row(user_id, day)
            if existing is not None:
                return existing
            nutrients = calculate_daily_intake(profile)
            try:
                row = self.repository.create_row(user_id, day, nutrients)
            except Exception as exc:
                _logger.exception("Error creating daily intake for user %s", user_id)
                raise LedgerCreateError(user_id) from exc
        _logger.info("Created daily intake for user %s on %s", user_id, day)
        return row

    def get_daily_intake(
        self, user_id: UUID, today: date | None = None
    ) -> dict[str, float]:
        """Return today's remaining intake values, creating the row if needed."""
        return nutrient_values(self.get_or_create(user_id, today).nutrients)

    def get_for_date(self, user_id: UUID, day: date) -> DailyLedgerRow:
        """Return the stored row for a specific day."""
        self.profile_service.get_profile(user_id)
        row = self.repository.get_row(user_id, day)
        if row is None:
            raise LedgerNotFoundError(user_id, day)
        return row

    def consume(
        self,
        user_id: UUID,
        meal_id: UUID,
        meal_nutrients: NutrientMap,
        today: date | None = None,
    ) -> dict[str, float]:
        """Decrement today's row by a meal's nutrients and return what remains."""
        day = today or self.clock()
        with self.locks.hold((user_id, day)):
            row = self.repository.get_row(user_id, day)
            if row is None:
                _logger.error("No daily intake found for user %s on %s", user_id, day)
                raise LedgerNotFoundError(user_id, day)

            remaining, unmatched = apply_consumption(row.nutrients, meal_nutrients)
            for name in unmatched:
                _logger.warning(
                    "Nutrient %s from meal %s not found in daily intake for user %s",
                    name,
                    meal_id,
                    user_id,
                )

            try:
                updated = self.repository.update_nutrients(row, remaining)
            except Exception as exc:
                _logger.exception("Error saving daily intake for user %s", user_id)
                raise LedgerUpdateError(user_id) from exc

        _logger.info("Updated daily intake for user %s after meal %s", user_id, meal_id)
        return nutrient_values(updated.nutrients)


def nutrient_values(nutrients: dict[str, float | None]) -> dict[str, float]:
    """Return nutrient values with missing amounts reported as zero."""
    return {name: _value_or_zero(value) for name, value in nutrients.items()}


def _value_or_zero(value: float | None) -> float:
    return value if value is not None else 0.0
