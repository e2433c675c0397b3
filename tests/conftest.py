"""Shared test fixtures."""

from datetime import date

import pytest

from larder.config import Settings
from larder.domain.cooking import Food, Ingredient
from larder.domain.food_units import FoodUnit, build_food_unit_converter
from larder.domain.measurement import Measurement, UnitConverter
from larder.domain.nutrition import Nutrition
from larder.services.inventory import InventoryService
from larder.services.nutrition import NutritionService

TODAY = date(2023, 6, 12)


def sample_nutrition() -> Nutrition:
    """Label values for one serving of a sample dish."""
    return Nutrition(
        calories=540,
        total_fat=12,
        saturated_fat=5,
        trans_fat=0,
        cholesterol=90,
        sodium=680,
        carbohydrates=84,
        fiber=6,
        sugar=20,
        protein=28,
    )


def sample_food(name: str = "Sample Food") -> Food:
    return Food(
        name=name,
        nutrition=sample_nutrition(),
        measurement=Measurement(1, FoodUnit.UNIT),
    )


def unit_ingredient(food: Food, count: float = 1) -> Ingredient:
    return Ingredient(food=food, quantity=Measurement(count, FoodUnit.UNIT))


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", log_level="DEBUG", expiring_soon_days=3)


@pytest.fixture
def converter() -> UnitConverter[FoodUnit]:
    return build_food_unit_converter()


@pytest.fixture
def nutrition_service(converter: UnitConverter[FoodUnit]) -> NutritionService:
    return NutritionService(converter=converter)


@pytest.fixture
def inventory_service(settings: Settings) -> InventoryService:
    return InventoryService(expiring_soon_days=settings.expiring_soon_days)
