"""Domain models for food items, meals and nutrient maps."""

from dataclasses import dataclass, field
from uuid import UUID


@dataclass(frozen=True)
class NutrientRecord:
    """Nutrient entry on a food item, value per 100 g."""

    name: str | None
    value: float | None
    unit: str
    source_id: int | None = None


@dataclass(frozen=True)
class FoodItem:
    """Catalog food item with its nutrient records."""

    id: UUID
    name: str
    nutrients: list[NutrientRecord] = field(default_factory=list)
    portion_grams: float | None = None


@dataclass(frozen=True)
class IngredientEntry:
    """One line of a meal."""

    food_item: FoodItem
    quantity_grams: float


@dataclass(frozen=True)
class Meal:
    """Meal composition as supplied by the meal collaborator."""

    id: UUID
    name: str
    ingredients: list[IngredientEntry]


@dataclass(frozen=True)
class NutrientInfo:
    """Aggregated nutrient amount for a meal or ingredient."""

    display_name: str
    value: float
    unit: str
    source_id: int | None = None


NutrientMap = dict[str, NutrientInfo]
