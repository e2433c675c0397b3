"""Nutrition rollup for ingredients, recipes and planned meals."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from larder.domain.cooking import Ingredient, Recipe
from larder.domain.food_units import FoodUnit
from larder.domain.measurement import UnitConverter
from larder.domain.nutrition import Nutrition, add, divide, multiply
from larder.domain.planning import Meal, PlannedDay

_logger = logging.getLogger(__name__)


@dataclass
class NutritionService:
    """Service that scales and sums nutrition using a food-unit converter."""

    converter: UnitConverter[FoodUnit]

    def ingredient_nutrition(self, ingredient: Ingredient) -> Nutrition | None:
        """Scale the food's labelled nutrition to the ingredient quantity.

        Returns None when the food has no nutrition or no labelled
        measurement. Conversion errors propagate to the caller. A labelled
        measurement that is not positive, or a negative quantity, is a
        ``ValueError``.
        """
        food = ingredient.food
        if food.nutrition is None or food.measurement is None:
            return None
        if food.measurement.value <= 0:
            raise ValueError("The labelled measurement must be positive")
        if ingredient.quantity.value < 0:
            raise ValueError("The ingredient quantity must be non-negative")
        quantity = self.converter.convert(ingredient.quantity, food.measurement.unit)
        ratio = quantity.value / food.measurement.value
        return multiply(food.nutrition, ratio)

    def total_nutrition(self, ingredients: Iterable[Ingredient]) -> Nutrition | None:
        """Sum the known nutrition of several ingredients."""
        total: Nutrition | None = None
        for ingredient in ingredients:
            total = add(total, self.ingredient_nutrition(ingredient))
        return total

    def recipe_nutrition(self, recipe: Recipe) -> Nutrition | None:
        """Return the nutrition of the whole recipe."""
        return self.total_nutrition(recipe.ingredients)

    def recipe_nutrition_per_serving(self, recipe: Recipe) -> Nutrition | None:
        """Return the nutrition of a single serving."""
        total = self.recipe_nutrition(recipe)
        if total is None:
            return None
        return divide(total, recipe.servings)

    def meal_nutrition(self, meal: Meal) -> Nutrition:
        """Return the planned nutrition of a meal, empty when nothing is known."""
        return self.total_nutrition(meal.foods) or Nutrition.empty()

    def day_nutrition(self, day: PlannedDay) -> Nutrition:
        """Return the planned nutrition of every meal in a day."""
        total = self.total_nutrition(food for meal in day for food in meal.foods)
        if total is None:
            _logger.debug("No known nutrition for planned day with %s meals", len(day))
            return Nutrition.empty()
        return total
