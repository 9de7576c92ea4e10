"""Supabase repository for meal compositions."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from nutrient_ledger.domain.nutrients import (
    FoodItem,
    IngredientEntry,
    Meal,
    NutrientRecord,
)
from nutrient_ledger.services.meals import MealRepository

_MEAL_COLUMNS = (
    "id, name, meal_ingredients(id, quantity_grams, "
    "food_items(id, name, portion_grams, "
    "food_item_nutrients(name, value, unit, source_id)))"
)


@dataclass
class SupabaseMealRepository(MealRepository):
    """Loads meals with their ingredients and food item nutrients."""

    client: Client
    table_name: str = "meals"

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id, if present."""
        response = (
            self.client.table(self.table_name)
            .select(_MEAL_COLUMNS)
            .eq("id", str(meal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return Meal(
            id=UUID(str(row["id"])),
            name=str(row.get("name", "")),
            ingredients=[
                _parse_ingredient(item) for item in row.get("meal_ingredients") or []
            ],
        )


def _parse_ingredient(row: dict[str, object]) -> IngredientEntry:
    food_row = row.get("food_items") or {}
    food_item = FoodItem(
        id=UUID(str(food_row["id"])),
        name=str(food_row.get("name", "")),
        nutrients=[
            _parse_nutrient(nutrient)
            for nutrient in food_row.get("food_item_nutrients") or []
        ],
        portion_grams=_to_float(food_row.get("portion_grams")),
    )
    quantity = _to_float(row.get("quantity_grams")) or 0.0
    if quantity <= 0 and food_item.portion_grams:
        quantity = food_item.portion_grams
    return IngredientEntry(food_item=food_item, quantity_grams=quantity)


def _parse_nutrient(row: dict[str, object]) -> NutrientRecord:
    name = row.get("name")
    source_id = row.get("source_id")
    return NutrientRecord(
        name=str(name) if name is not None else None,
        value=_to_float(row.get("value")),
        unit=str(row.get("unit") or ""),
        source_id=int(source_id) if source_id is not None else None,
    )


def _to_float(value: object) -> float | None:
    if value is None:
        return None
    return float(value)
