"""Dependency container wiring for the application."""

from dataclasses import dataclass

from larder.app_logging import configure_logging
from larder.config import Settings
from larder.domain.food_units import FoodUnit, build_food_unit_converter
from larder.domain.measurement import UnitConverter
from larder.services.inventory import InventoryService
from larder.services.nutrition import NutritionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    unit_converter: UnitConverter[FoodUnit]
    nutrition_service: NutritionService
    inventory_service: InventoryService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level.upper())
    unit_converter = build_food_unit_converter()
    nutrition_service = NutritionService(converter=unit_converter)
    inventory_service = InventoryService(
        expiring_soon_days=resolved_settings.expiring_soon_days
    )
    return AppContainer(
        settings=resolved_settings,
        unit_converter=unit_converter,
        nutrition_service=nutrition_service,
        inventory_service=inventory_service,
    )
