"""Meal nutrient queries."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from nutrient_ledger.domain.nutrients import Meal, NutrientMap
from nutrient_ledger.errors import MealNotFoundError
from nutrient_ledger.services.aggregation import (
    aggregate_meal,
    aggregate_per_ingredient,
)


class MealRepository(Protocol):
    """Read interface for meal compositions."""

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal with its ingredients and food items, if present."""


@dataclass
class MealNutritionService:
    """Computes nutrient totals for stored meals."""

    repository: MealRepository

    def get_meal(self, meal_id: UUID) -> Meal:
        """Return a meal or raise when it does not exist."""
        meal = self.repository.get_meal(meal_id)
        if meal is None:
            raise MealNotFoundError(meal_id)
        return meal

    def calculate_meal_nutrients(self, meal_id: UUID) -> NutrientMap:
        """Return the summed nutrients of all ingredients in a meal."""
        return aggregate_meal(self.get_meal(meal_id).ingredients)

    def calculate_nutrients_per_ingredient(
        self, meal_id: UUID
    ) -> dict[UUID, NutrientMap]:
        """Return nutrients per food item in a meal."""
        return aggregate_per_ingredient(self.get_meal(meal_id).ingredients)
