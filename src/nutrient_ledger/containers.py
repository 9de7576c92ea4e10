"""Dependency container wiring for the engine."""

from dataclasses import dataclass

from supabase import create_client

from nutrient_ledger.adapters.supabase_ledger_repository import (
    SupabaseLedgerRepository,
)
from nutrient_ledger.adapters.supabase_meal_repository import SupabaseMealRepository
from nutrient_ledger.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from nutrient_ledger.app_logging import configure_logging
from nutrient_ledger.config import Settings
from nutrient_ledger.services.consumption import ConsumeMealService
from nutrient_ledger.services.intake import DailyIntakeService
from nutrient_ledger.services.meals import MealNutritionService
from nutrient_ledger.services.profiles import ProfileService
from nutrient_ledger.services.projection import ProjectionService


@dataclass
class AppContainer:
    """Holds engine-wide dependencies."""

    settings: Settings
    profile_service: ProfileService
    meal_service: MealNutritionService
    intake_service: DailyIntakeService
    consume_meal_service: ConsumeMealService
    projection_service: ProjectionService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    profile_repository = SupabaseProfileRepository(
        supabase_client, table_name=resolved_settings.profiles_table
    )
    meal_repository = SupabaseMealRepository(
        supabase_client, table_name=resolved_settings.meals_table
    )
    ledger_repository = SupabaseLedgerRepository(
        supabase_client, table_name=resolved_settings.ledger_table
    )
    profile_service = ProfileService(profile_repository)
    meal_service = MealNutritionService(meal_repository)
    intake_service = DailyIntakeService(
        profile_service=profile_service,
        repository=ledger_repository,
    )
    consume_meal_service = ConsumeMealService(
        profile_service=profile_service,
        meal_service=meal_service,
        intake_service=intake_service,
    )
    projection_service = ProjectionService(
        profile_service=profile_service,
        repository=ledger_repository,
    )

    return AppContainer(
        settings=resolved_settings,
        profile_service=profile_service,
        meal_service=meal_service,
        intake_service=intake_service,
        consume_meal_service=consume_meal_service,
        projection_service=projection_service,
    )
