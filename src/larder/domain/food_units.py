"""Units used to describe a quantity of food."""

from enum import Enum, auto

from larder.domain.measurement import UnitConverter


class FoodUnit(Enum):
    """Common food quantity units."""

    # A plain count, for foods described by quantity ("1 egg").
    UNIT = auto()
    GRAM = auto()
    MILLIGRAM = auto()
    OUNCE = auto()
    POUND = auto()
    MILLILITER = auto()
    LITER = auto()
    TEASPOON = auto()
    TABLESPOON = auto()
    FLUID_OUNCE = auto()
    CUP = auto()


FOOD_BASE_UNIT = FoodUnit.GRAM

# Grams per unit. Volumes assume the density of water.
FOOD_UNIT_COEFFICIENTS: dict[FoodUnit, float] = {
    FoodUnit.UNIT: 1.0,
    FoodUnit.GRAM: 1.0,
    FoodUnit.MILLIGRAM: 0.001,
    FoodUnit.OUNCE: 28.3495,
    FoodUnit.POUND: 453.59237,
    FoodUnit.MILLILITER: 1.0,
    FoodUnit.LITER: 1000.0,
    FoodUnit.TEASPOON: 4.92892,
    FoodUnit.TABLESPOON: 14.7868,
    FoodUnit.FLUID_OUNCE: 29.574,
    FoodUnit.CUP: 8 * 29.574,
}


def build_food_unit_converter() -> UnitConverter[FoodUnit]:
    """Create a converter with every food unit registered against grams."""
    converter: UnitConverter[FoodUnit] = UnitConverter(base_unit=FOOD_BASE_UNIT)
    for unit, coefficient in FOOD_UNIT_COEFFICIENTS.items():
        converter.register_conversion(unit, coefficient)
    return converter
