"""Meal consumption against the daily ledger."""

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from nutrient_ledger.services.intake import DailyIntakeService
from nutrient_ledger.services.meals import MealNutritionService
from nutrient_ledger.services.profiles import ProfileService

_logger = logging.getLogger(__name__)


@dataclass
class ConsumeMealService:
    """Applies a stored meal to a user's ledger row for today."""

    profile_service: ProfileService
    meal_service: MealNutritionService
    intake_service: DailyIntakeService

    def consume_meal(
        self, user_id: UUID, meal_id: UUID, today: date | None = None
    ) -> dict[str, float]:
        """Consume a meal and return the remaining intake for today."""
        _logger.debug("Consuming meal %s for user %s", meal_id, user_id)
        self.profile_service.get_profile(user_id)
        meal_nutrients = self.meal_service.calculate_meal_nutrients(meal_id)
        return self.intake_service.consume(user_id, meal_id, meal_nutrients, today)
