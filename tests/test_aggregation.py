"""Tests for meal nutrient aggregation."""

from uuid import uuid4

import pytest

from nutrient_ledger.domain.nutrients import FoodItem, IngredientEntry, NutrientRecord
from nutrient_ledger.services.aggregation import (
    aggregate_meal,
    aggregate_per_ingredient,
    count_nutrient_names,
    merge_nutrient_maps,
)
from tests.conftest import make_food_item


def test_aggregate_scales_per_100g_values() -> None:
    oats = make_food_item(
        NutrientRecord("Protein", 13.0, "G", 1003),
        NutrientRecord("Fiber, total dietary", 10.0, "G", 1079),
    )

    totals = aggregate_meal([IngredientEntry(food_item=oats, quantity_grams=50.0)])

    assert totals["Protein"].value == pytest.approx(6.5)
    assert totals["Protein"].unit == "G"
    assert totals["Protein"].source_id == 1003
    assert totals["Fiber, total dietary"].value == pytest.approx(5.0)


def test_aggregate_disambiguates_repeated_names_by_unit() -> None:
    bread = make_food_item(
        NutrientRecord("Energy", 250.0, "KCAL", 1008),
        NutrientRecord("Energy", 1046.0, "kJ", 1062),
        NutrientRecord("Sodium, Na", 400.0, "MG", 1093),
    )

    totals = aggregate_meal([IngredientEntry(food_item=bread, quantity_grams=100.0)])

    assert set(totals) == {"Energy KCAL", "Energy kJ", "Sodium, Na"}
    assert totals["Energy KCAL"].value == pytest.approx(250.0)
    assert totals["Energy kJ"].value == pytest.approx(1046.0)
    assert totals["Energy KCAL"].display_name == "Energy KCAL"


def test_aggregate_sums_same_key_across_ingredients(chicken_meal) -> None:
    totals = aggregate_meal(chicken_meal.ingredients)

    assert totals["Energy KCAL"].value == pytest.approx(165.0 * 2 + 130.0 * 1.5)
    assert totals["Energy KCAL"].source_id == 1008
    assert totals["Energy kJ"].value == pytest.approx(544.0 * 1.5)
    assert totals["Protein"].value == pytest.approx(62.0)
    assert totals["Carbohydrate, by difference"].value == pytest.approx(42.0)
    assert totals["Iron, Fe"].value == pytest.approx(0.3)


def test_aggregate_keeps_first_seen_metadata() -> None:
    first = make_food_item(NutrientRecord("Energy", 100.0, "KCAL", 1008))
    second = make_food_item(NutrientRecord("Energy", 50.0, "KCAL", 2047))

    totals = aggregate_meal(
        [
            IngredientEntry(food_item=first, quantity_grams=100.0),
            IngredientEntry(food_item=second, quantity_grams=100.0),
        ]
    )

    assert totals["Energy KCAL"].value == pytest.approx(150.0)
    assert totals["Energy KCAL"].source_id == 1008


def test_aggregate_skips_incomplete_records() -> None:
    item = make_food_item(
        NutrientRecord(None, 12.0, "G"),
        NutrientRecord("Protein", None, "G"),
        NutrientRecord("Water", 80.0, "G"),
    )

    totals = aggregate_meal([IngredientEntry(food_item=item, quantity_grams=100.0)])

    assert set(totals) == {"Water"}


def test_aggregate_empty_meal_returns_empty_map() -> None:
    assert aggregate_meal([]) == {}
    assert aggregate_per_ingredient([]) == {}


def test_aggregate_is_additive_over_partitions(chicken_meal) -> None:
    ingredients = chicken_meal.ingredients
    counts = count_nutrient_names(ingredients)

    whole = aggregate_meal(ingredients)
    merged = merge_nutrient_maps(
        aggregate_meal(ingredients[:1], counts),
        aggregate_meal(ingredients[1:], counts),
    )

    assert set(whole) == set(merged)
    for key, info in whole.items():
        assert merged[key].value == pytest.approx(info.value)


def test_partial_views_change_keys_without_full_counts(chicken_meal) -> None:
    partial = aggregate_meal(chicken_meal.ingredients[:1])

    assert "Energy" in partial
    assert "Energy KCAL" not in partial


def test_aggregate_per_ingredient_uses_meal_wide_keys(chicken_meal) -> None:
    chicken, rice = chicken_meal.ingredients

    per_item = aggregate_per_ingredient(chicken_meal.ingredients)

    assert set(per_item) == {chicken.food_item.id, rice.food_item.id}
    assert per_item[chicken.food_item.id]["Energy KCAL"].value == pytest.approx(330.0)
    assert per_item[rice.food_item.id]["Energy KCAL"].value == pytest.approx(195.0)
    assert "Protein" not in per_item[rice.food_item.id]


def test_aggregate_per_ingredient_merges_repeated_food_item() -> None:
    egg = FoodItem(
        id=uuid4(), name="egg", nutrients=[NutrientRecord("Protein", 13.0, "G")]
    )

    per_item = aggregate_per_ingredient(
        [
            IngredientEntry(food_item=egg, quantity_grams=50.0),
            IngredientEntry(food_item=egg, quantity_grams=50.0),
        ]
    )

    assert per_item[egg.id]["Protein G"].value == pytest.approx(13.0)
