"""Tests for the nutrition rollup service."""

from datetime import timedelta

import pytest

from larder.domain.cooking import Food, Ingredient, Recipe
from larder.domain.food_units import FoodUnit
from larder.domain.measurement import (
    Measurement,
    UnitConverter,
    UnregisteredUnitError,
)
from larder.domain.nutrition import Nutrition
from larder.domain.planning import Meal, PlannedDay
from larder.services.nutrition import NutritionService
from tests.conftest import sample_food, sample_nutrition, unit_ingredient


@pytest.mark.parametrize(("count", "factor"), [(1, 1), (2, 2), (0.5, 0.5)])
def test_ingredient_nutrition_scales_with_quantity(
    nutrition_service: NutritionService, count: float, factor: float
) -> None:
    ingredient = unit_ingredient(sample_food(), count=count)

    assert nutrition_service.ingredient_nutrition(ingredient) == (
        sample_nutrition() * factor
    )


def test_ingredient_nutrition_doubles_every_field(
    nutrition_service: NutritionService,
) -> None:
    ingredient = unit_ingredient(sample_food(), count=2)

    assert nutrition_service.ingredient_nutrition(ingredient) == Nutrition(
        calories=1080,
        total_fat=24,
        saturated_fat=10,
        trans_fat=0,
        cholesterol=180,
        sodium=1360,
        carbohydrates=168,
        fiber=12,
        sugar=40,
        protein=56,
    )


def test_ingredient_nutrition_converts_units(
    nutrition_service: NutritionService,
) -> None:
    oats = Food(
        "Oats",
        nutrition=Nutrition(calories=380, protein=13, sugar=None),
        measurement=Measurement(100, FoodUnit.GRAM),
    )
    ingredient = Ingredient(food=oats, quantity=Measurement(1, FoodUnit.POUND))

    result = nutrition_service.ingredient_nutrition(ingredient)

    assert result is not None
    assert result.calories == pytest.approx(380 * 4.5359237)
    assert result.protein == pytest.approx(13 * 4.5359237)
    assert result.sugar is None


def test_ingredient_without_label_has_no_nutrition(
    nutrition_service: NutritionService,
) -> None:
    assert nutrition_service.ingredient_nutrition(unit_ingredient(Food("Egg"))) is None
    half_labelled = Food("Egg", nutrition=sample_nutrition())
    assert nutrition_service.ingredient_nutrition(unit_ingredient(half_labelled)) is None


def test_ingredient_nutrition_propagates_conversion_errors() -> None:
    service = NutritionService(converter=UnitConverter(base_unit=FoodUnit.GRAM))
    flour = Food(
        "Flour",
        nutrition=Nutrition(calories=364),
        measurement=Measurement(100, FoodUnit.GRAM),
    )

    with pytest.raises(UnregisteredUnitError):
        service.ingredient_nutrition(
            Ingredient(food=flour, quantity=Measurement(1, FoodUnit.CUP))
        )


@pytest.mark.parametrize(("count", "servings"), [(1, 4), (2, 1), (3, 2)])
def test_recipe_nutrition_and_per_serving(
    nutrition_service: NutritionService, count: float, servings: int
) -> None:
    recipe = Recipe(
        "Sample Recipe",
        instructions=["Make the dish."],
        ingredients=[unit_ingredient(sample_food(), count=count)],
        servings=servings,
        cooking_time=timedelta(minutes=20),
    )

    total = nutrition_service.recipe_nutrition(recipe)

    assert total == sample_nutrition() * count
    assert nutrition_service.recipe_nutrition_per_serving(recipe) == total / servings


def test_recipe_nutrition_sums_ingredients(
    nutrition_service: NutritionService,
) -> None:
    rice = Food(
        "Rice",
        nutrition=Nutrition(calories=130, fiber=None, protein=2.7),
        measurement=Measurement(100, FoodUnit.GRAM),
    )
    beans = Food(
        "Beans",
        nutrition=Nutrition(calories=120, fiber=6, protein=None),
        measurement=Measurement(1, FoodUnit.CUP),
    )
    recipe = Recipe(
        "Rice and beans",
        ingredients=[
            Ingredient(food=rice, quantity=Measurement(200, FoodUnit.GRAM)),
            Ingredient(food=beans, quantity=Measurement(1, FoodUnit.CUP)),
        ],
    )

    total = nutrition_service.recipe_nutrition(recipe)

    assert total is not None
    assert total.calories == pytest.approx(380)
    assert total.fiber == pytest.approx(6)
    assert total.protein == pytest.approx(5.4)
    assert total.sugar is None


@pytest.mark.parametrize(
    "ingredients", [[], [unit_ingredient(Food("Sample Food"))]]
)
def test_recipe_without_known_nutrition(
    nutrition_service: NutritionService, ingredients: list[Ingredient]
) -> None:
    recipe = Recipe("Sample Recipe", ingredients=ingredients)

    assert nutrition_service.recipe_nutrition(recipe) is None
    assert nutrition_service.recipe_nutrition_per_serving(recipe) is None


def test_meal_nutrition(nutrition_service: NutritionService) -> None:
    meal = Meal("Dinner", 800)
    meal.add_food(unit_ingredient(sample_food()))
    meal.add_food(unit_ingredient(Food("Water")))

    assert nutrition_service.meal_nutrition(meal) == sample_nutrition()
    assert nutrition_service.meal_nutrition(Meal("Empty", 0)).is_empty()


def test_day_nutrition(nutrition_service: NutritionService) -> None:
    breakfast = Meal("Breakfast", 300, [unit_ingredient(sample_food())])
    dinner = Meal("Dinner", 800, [unit_ingredient(sample_food(), count=2)])
    day = PlannedDay([breakfast, dinner])

    assert nutrition_service.day_nutrition(day) == sample_nutrition() * 3
    assert nutrition_service.day_nutrition(PlannedDay()).is_empty()


@pytest.mark.parametrize("labelled", [0, -100])
def test_ingredient_nutrition_rejects_non_positive_label(
    nutrition_service: NutritionService, labelled: float
) -> None:
    food = Food(
        "Butter",
        nutrition=Nutrition(calories=10),
        measurement=Measurement(labelled, FoodUnit.GRAM),
    )
    ingredient = Ingredient(food=food, quantity=Measurement(5, FoodUnit.GRAM))

    with pytest.raises(ValueError, match="labelled measurement must be positive"):
        nutrition_service.ingredient_nutrition(ingredient)


def test_ingredient_nutrition_rejects_negative_quantity(
    nutrition_service: NutritionService,
) -> None:
    ingredient = Ingredient(
        food=sample_food(), quantity=Measurement(-5, FoodUnit.UNIT)
    )

    with pytest.raises(ValueError, match="ingredient quantity must be non-negative"):
        nutrition_service.ingredient_nutrition(ingredient)


def test_zero_quantity_ingredient_zeroes_known_fields(
    nutrition_service: NutritionService,
) -> None:
    ingredient = unit_ingredient(sample_food(), count=0)

    assert nutrition_service.ingredient_nutrition(ingredient) == sample_nutrition() * 0
