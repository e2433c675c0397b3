"""Domain models for foods, ingredients and recipes."""

from dataclasses import dataclass, field
from datetime import timedelta
from uuid import UUID, uuid4

from larder.domain.food_units import FoodUnit
from larder.domain.measurement import Measurement
from larder.domain.nutrition import Nutrition


@dataclass(frozen=True)
class Food:
    """A food that can be used in a recipe, without any quantity.

    ``nutrition`` describes the labelled ``measurement`` of the food, for
    example 540 kcal per 1 UNIT or per 100 GRAM.
    """

    name: str
    nutrition: Nutrition | None = None
    measurement: Measurement[FoodUnit] | None = None
    id: UUID = field(default_factory=uuid4)


@dataclass(frozen=True)
class Ingredient:
    """A quantity of a food."""

    food: Food
    quantity: Measurement[FoodUnit]
    id: UUID = field(default_factory=uuid4)


@dataclass
class Recipe:
    """A set of ingredients and instructions yielding some servings."""

    name: str = "New Recipe"
    description: str | None = None
    instructions: list[str] = field(default_factory=list)
    ingredients: list[Ingredient] = field(default_factory=list)
    servings: int = 1
    preparation_time: timedelta | None = None
    cooking_time: timedelta | None = None
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if self.servings < 1:
            raise ValueError("A recipe must yield at least one serving")

    @property
    def total_time(self) -> timedelta | None:
        """Preparation plus cooking time, or None when both are unknown."""
        if self.preparation_time is None and self.cooking_time is None:
            return None
        return (self.preparation_time or timedelta()) + (
            self.cooking_time or timedelta()
        )
