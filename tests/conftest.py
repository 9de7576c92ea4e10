"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import date
from uuid import UUID, uuid4

import pytest

from nutrient_ledger.config import Settings
from nutrient_ledger.domain.ledger import DailyLedgerRow
from nutrient_ledger.domain.nutrients import (
    FoodItem,
    IngredientEntry,
    Meal,
    NutrientRecord,
)
from nutrient_ledger.domain.profile import ActivityLevel, BiometricProfile, Gender, Goal
from nutrient_ledger.services.consumption import ConsumeMealService
from nutrient_ledger.services.intake import DailyIntakeService, LedgerRepository
from nutrient_ledger.services.meals import MealNutritionService, MealRepository
from nutrient_ledger.services.profiles import ProfileRepository, ProfileService
from nutrient_ledger.services.projection import ProjectionService

TODAY = date(2024, 5, 15)


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, BiometricProfile] = field(default_factory=dict)

    def get_profile(self, user_id: UUID) -> BiometricProfile | None:
        return self.profiles.get(user_id)


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: dict[UUID, Meal] = field(default_factory=dict)

    def get_meal(self, meal_id: UUID) -> Meal | None:
        return self.meals.get(meal_id)


@dataclass
class InMemoryLedgerRepository(LedgerRepository):
    """In-memory ledger repository with version checks."""

    rows: dict[tuple[UUID, date], DailyLedgerRow] = field(default_factory=dict)
    fail_creates: bool = False
    fail_updates: bool = False
    created: int = 0

    def get_row(self, user_id: UUID, day: date) -> DailyLedgerRow | None:
        return self.rows.get((user_id, day))

    def create_row(
        self, user_id: UUID, day: date, nutrients: dict[str, float | None]
    ) -> DailyLedgerRow:
        if self.fail_creates:
            raise RuntimeError("insert rejected")
        existing = self.rows.get((user_id, day))
        if existing is not None:
            return existing
        row = DailyLedgerRow(
            id=uuid4(), user_id=user_id, day=day, nutrients=dict(nutrients)
        )
        self.rows[(user_id, day)] = row
        self.created += 1
        return row

    def update_nutrients(
        self, row: DailyLedgerRow, nutrients: dict[str, float | None]
    ) -> DailyLedgerRow:
        if self.fail_updates:
            raise RuntimeError("storage unavailable")
        stored = self.rows.get((row.user_id, row.day))
        if stored is None or stored.version != row.version:
            raise RuntimeError("stale daily intake row")
        updated = replace(stored, nutrients=dict(nutrients), version=row.version + 1)
        self.rows[(row.user_id, row.day)] = updated
        return updated

    def list_rows(self, user_id: UUID, start: date, end: date) -> list[DailyLedgerRow]:
        return sorted(
            (
                row
                for (owner, day), row in self.rows.items()
                if owner == user_id and start <= day <= end
            ),
            key=lambda row: row.day,
        )


def make_food_item(*nutrients: NutrientRecord, name: str = "food") -> FoodItem:
    return FoodItem(id=uuid4(), name=name, nutrients=list(nutrients))


def make_profile(**overrides: object) -> BiometricProfile:
    values: dict[str, object] = {
        "weight_kg": 70.0,
        "height_cm": 175.0,
        "age_years": 30,
        "gender": Gender.MALE,
        "activity_level": ActivityLevel.MODERATE,
        "goal": Goal.MAINTENANCE,
    }
    values.update(overrides)
    return BiometricProfile(**values)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
    )


@pytest.fixture
def user_id() -> UUID:
    return uuid4()


@pytest.fixture
def profile_repository(user_id: UUID) -> InMemoryProfileRepository:
    return InMemoryProfileRepository(profiles={user_id: make_profile()})


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def ledger_repository() -> InMemoryLedgerRepository:
    return InMemoryLedgerRepository()


@pytest.fixture
def profile_service(profile_repository: InMemoryProfileRepository) -> ProfileService:
    return ProfileService(profile_repository)


@pytest.fixture
def intake_service(
    profile_service: ProfileService, ledger_repository: InMemoryLedgerRepository
) -> DailyIntakeService:
    return DailyIntakeService(
        profile_service=profile_service,
        repository=ledger_repository,
        clock=lambda: TODAY,
    )


@pytest.fixture
def meal_service(meal_repository: InMemoryMealRepository) -> MealNutritionService:
    return MealNutritionService(meal_repository)


@pytest.fixture
def consume_meal_service(
    profile_service: ProfileService,
    meal_service: MealNutritionService,
    intake_service: DailyIntakeService,
) -> ConsumeMealService:
    return ConsumeMealService(
        profile_service=profile_service,
        meal_service=meal_service,
        intake_service=intake_service,
    )


@pytest.fixture
def projection_service(
    profile_service: ProfileService, ledger_repository: InMemoryLedgerRepository
) -> ProjectionService:
    return ProjectionService(
        profile_service=profile_service,
        repository=ledger_repository,
        clock=lambda: TODAY,
    )


@pytest.fixture
def chicken_meal(meal_repository: InMemoryMealRepository) -> Meal:
    chicken = make_food_item(
        NutrientRecord("Energy", 165.0, "KCAL", 1008),
        NutrientRecord("Protein", 31.0, "G", 1003),
        NutrientRecord("Total lipid (fat)", 3.6, "G", 1004),
        name="chicken breast",
    )
    rice = make_food_item(
        NutrientRecord("Energy", 130.0, "KCAL", 1008),
        NutrientRecord("Energy", 544.0, "kJ", 1062),
        NutrientRecord("Carbohydrate, by difference", 28.0, "G", 1005),
        NutrientRecord("Iron, Fe", 0.2, "MG", 1089),
        name="white rice",
    )
    meal = Meal(
        id=uuid4(),
        name="chicken and rice",
        ingredients=[
            IngredientEntry(food_item=chicken, quantity_grams=200.0),
            IngredientEntry(food_item=rice, quantity_grams=150.0),
        ],
    )
    meal_repository.meals[meal.id] = meal
    return meal
