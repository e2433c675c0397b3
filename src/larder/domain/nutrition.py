"""Nutrition label records and their arithmetic."""

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat

NUTRITION_FIELDS: tuple[str, ...] = (
    "calories",
    "total_fat",
    "saturated_fat",
    "trans_fat",
    "cholesterol",
    "sodium",
    "carbohydrates",
    "fiber",
    "sugar",
    "protein",
)


class Nutrition(BaseModel):
    """Nutritional information, as found on a food label.

    Every amount is optional: ``None`` means unknown, which is not the same as
    zero. Amounts are validated on construction and on assignment, so a
    negative amount can never be observed. ``id`` identifies the record and is
    ignored by equality and hashing.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: UUID = Field(default_factory=uuid4)
    calories: NonNegativeFloat | None = None  # kcal
    total_fat: NonNegativeFloat | None = None  # g
    saturated_fat: NonNegativeFloat | None = None  # g
    trans_fat: NonNegativeFloat | None = None  # g
    cholesterol: NonNegativeFloat | None = None  # mg
    sodium: NonNegativeFloat | None = None  # mg
    carbohydrates: NonNegativeFloat | None = None  # g
    fiber: NonNegativeFloat | None = None  # g
    sugar: NonNegativeFloat | None = None  # g
    protein: NonNegativeFloat | None = None  # g

    @classmethod
    def empty(cls) -> "Nutrition":
        """Return a record with every amount unknown."""
        return cls()

    def is_empty(self) -> bool:
        """Return True when no amount is known."""
        return all(value is None for value in self._amounts())

    def as_dict(self) -> dict[str, float | None]:
        """Return the amounts keyed by field name."""
        return dict(zip(NUTRITION_FIELDS, self._amounts(), strict=True))

    def _amounts(self) -> tuple[float | None, ...]:
        return tuple(getattr(self, name) for name in NUTRITION_FIELDS)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Nutrition):
            return NotImplemented
        return self._amounts() == other._amounts()

    def __hash__(self) -> int:
        return hash(self._amounts())

    def __add__(self, other: object) -> "Nutrition":
        if other is None or isinstance(other, Nutrition):
            return add(self, other)  # type: ignore[return-value]
        return NotImplemented

    __radd__ = __add__

    def __mul__(self, coefficient: object) -> "Nutrition":
        if isinstance(coefficient, int | float):
            return multiply(self, coefficient)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, divisor: object) -> "Nutrition":
        if isinstance(divisor, int | float):
            return divide(self, divisor)
        return NotImplemented


def add(lhs: Nutrition | None, rhs: Nutrition | None) -> Nutrition | None:
    """Add two records, treating an unknown amount as zero.

    A field stays unknown only when it is unknown on both sides. A missing
    record leaves the other record unchanged.
    """
    if lhs is None:
        return rhs
    if rhs is None:
        return lhs
    return Nutrition(
        **{
            name: _add_optional(getattr(lhs, name), getattr(rhs, name))
            for name in NUTRITION_FIELDS
        }
    )


def multiply(nutrition: Nutrition, coefficient: float) -> Nutrition:
    """Scale every known amount by a non-negative coefficient."""
    if coefficient < 0:
        raise ValueError("The coefficient must be non-negative")
    scaled: dict[str, float | None] = {}
    for name, value in nutrition.as_dict().items():
        scaled[name] = None if value is None else value * coefficient
    return Nutrition(**scaled)


def divide(nutrition: Nutrition, divisor: float) -> Nutrition:
    """Divide every known amount by a strictly positive divisor."""
    if divisor <= 0:
        raise ValueError("The divisor must be positive and nonzero")
    return multiply(nutrition, 1.0 / divisor)


def _add_optional(lhs: float | None, rhs: float | None) -> float | None:
    if lhs is None:
        return rhs
    if rhs is None:
        return lhs
    return lhs + rhs
