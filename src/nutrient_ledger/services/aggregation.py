"""Nutrient aggregation across meal ingredients.

Every nutrient record is scaled from its per-100 g value to the ingredient
quantity. Nutrient names are not unique across food sources: a name that
occurs more than once in the ingredient set is keyed as ``"<name> <unit>"``
so nutrients sharing a display name but measured in different units are
never merged. Key decisions depend on the whole ingredient set, so callers
aggregating a subset must pass the counts of the full set.
"""

from collections import Counter
from uuid import UUID

from nutrient_ledger.domain.nutrients import (
    IngredientEntry,
    NutrientInfo,
    NutrientMap,
    NutrientRecord,
)


def count_nutrient_names(ingredients: list[IngredientEntry]) -> Counter[str]:
    """Count raw nutrient name occurrences across all ingredients."""
    counts: Counter[str] = Counter()
    for ingredient in ingredients:
        for nutrient in ingredient.food_item.nutrients:
            if nutrient.name is not None:
                counts[nutrient.name] += 1
    return counts


def nutrient_key(nutrient: NutrientRecord, name_counts: Counter[str]) -> str:
    """Return the aggregation key for a nutrient record."""
    name = str(nutrient.name)
    if name_counts[name] > 1:
        return f"{name} {nutrient.unit}"
    return name


def aggregate_meal(
    ingredients: list[IngredientEntry], name_counts: Counter[str] | None = None
) -> NutrientMap:
    """Sum scaled nutrient values of all ingredients into one map."""
    counts = name_counts
    if counts is None:
        counts = count_nutrient_names(ingredients)
    totals: NutrientMap = {}
    for ingredient in ingredients:
        _accumulate(totals, ingredient, counts)
    return totals


def aggregate_per_ingredient(
    ingredients: list[IngredientEntry],
) -> dict[UUID, NutrientMap]:
    """Return scaled nutrient maps keyed by food item id."""
    counts = count_nutrient_names(ingredients)
    per_item: dict[UUID, NutrientMap] = {}
    for ingredient in ingredients:
        item_map = per_item.setdefault(ingredient.food_item.id, {})
        _accumulate(item_map, ingredient, counts)
    return per_item


def merge_nutrient_maps(first: NutrientMap, second: NutrientMap) -> NutrientMap:
    """Sum two nutrient maps key by key, keeping the first map's metadata."""
    merged = dict(first)
    for key, info in second.items():
        _add(merged, key, info)
    return merged


def _accumulate(
    target: NutrientMap, ingredient: IngredientEntry, counts: Counter[str]
) -> None:
    factor = ingredient.quantity_grams / 100.0
    for nutrient in ingredient.food_item.nutrients:
        if nutrient.name is None or nutrient.value is None:
            continue
        key = nutrient_key(nutrient, counts)
        _add(
            target,
            key,
            NutrientInfo(
                display_name=key,
                value=nutrient.value * factor,
                unit=nutrient.unit,
                source_id=nutrient.source_id,
            ),
        )


def _add(target: NutrientMap, key: str, info: NutrientInfo) -> None:
    existing = target.get(key)
    if existing is None:
        target[key] = info
        return
    target[key] = NutrientInfo(
        display_name=existing.display_name,
        value=existing.value + info.value,
        unit=existing.unit,
        source_id=existing.source_id,
    )
