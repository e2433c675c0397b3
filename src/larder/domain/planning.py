"""Domain models for meal planning."""

from collections.abc import Iterable, Iterator, MutableSequence
from datetime import date, timedelta

from larder.domain.cooking import Ingredient, Recipe

DAYS_PER_WEEK = 7


class Meal:
    """A named meal with a calorie goal and the foods planned for it."""

    def __init__(
        self, name: str, calorie_goal: int, foods: Iterable[Ingredient] | None = None
    ) -> None:
        self.name = name
        self.calorie_goal = calorie_goal
        self._foods: list[Ingredient] = list(foods or [])

    @property
    def foods(self) -> tuple[Ingredient, ...]:
        """Return a read-only view of the planned foods."""
        return tuple(self._foods)

    def add_food(self, food: Ingredient) -> None:
        """Plan a single ingredient."""
        self._foods.append(food)

    def add_recipe(self, recipe: Recipe) -> None:
        """Plan every ingredient of a recipe."""
        self._foods.extend(recipe.ingredients)

    def remove_food(self, food: Ingredient) -> bool:
        """Remove a planned ingredient and report whether it was present."""
        try:
            self._foods.remove(food)
        except ValueError:
            return False
        return True

    def clone(self) -> "Meal":
        """Return a copy whose food list can change independently."""
        return Meal(self.name, self.calorie_goal, self._foods)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Meal):
            return NotImplemented
        return (
            self.name == other.name
            and self.calorie_goal == other.calorie_goal
            and self._foods == other._foods
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Meal(name={self.name!r}, calorie_goal={self.calorie_goal}, "
            f"foods={len(self._foods)})"
        )


class PlannedDay(MutableSequence[Meal]):
    """The meals planned for one day."""

    def __init__(self, meals: Iterable[Meal] | None = None) -> None:
        self._meals: list[Meal] = list(meals or [])

    @property
    def calorie_goal(self) -> int:
        """Return the sum of the meals' calorie goals."""
        return sum(meal.calorie_goal for meal in self._meals)

    def __getitem__(self, index: int) -> Meal:  # type: ignore[override]
        return self._meals[index]

    def __setitem__(self, index: int, value: Meal) -> None:  # type: ignore[override]
        self._meals[index] = value

    def __delitem__(self, index: int) -> None:  # type: ignore[override]
        del self._meals[index]

    def __len__(self) -> int:
        return len(self._meals)

    def insert(self, index: int, value: Meal) -> None:
        self._meals.insert(index, value)

    def clone(self) -> "PlannedDay":
        """Return a copy with every meal cloned."""
        return PlannedDay(meal.clone() for meal in self._meals)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlannedDay):
            return NotImplemented
        return (
            self.calorie_goal == other.calorie_goal and self._meals == other._meals
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PlannedDay(meals={self._meals!r})"


class MealPlan:
    """A week of planned days, starting on the weekday of ``start_date``.

    Days are keyed by ``date.weekday()`` numbers (Monday is 0).
    """

    def __init__(self, start_date: date, template_day: PlannedDay | None = None) -> None:
        self.start_date = start_date
        self._days: dict[int, PlannedDay] = {
            weekday: template_day.clone() if template_day is not None else PlannedDay()
            for weekday in range(DAYS_PER_WEEK)
        }

    def __getitem__(self, weekday: int) -> PlannedDay:
        return self._days[weekday]

    def __iter__(self) -> Iterator[tuple[int, PlannedDay]]:
        first = self.start_date.weekday()
        for offset in range(DAYS_PER_WEEK):
            weekday = (first + offset) % DAYS_PER_WEEK
            yield weekday, self._days[weekday]

    def __len__(self) -> int:
        return DAYS_PER_WEEK

    def dated_days(self) -> Iterator[tuple[date, PlannedDay]]:
        """Yield each calendar date of the plan with its planned day."""
        for offset, (_, day) in enumerate(self):
            yield self.start_date + timedelta(days=offset), day
