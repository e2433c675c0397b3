"""Measurements and conversions between units of a single dimension."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

DEFAULT_TOLERANCE = 1e-6

TUnit = TypeVar("TUnit", bound=Enum)

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Measurement(Generic[TUnit]):
    """A value of some unit.

    Equality requires the same unit and values within ``DEFAULT_TOLERANCE``.
    Physically equivalent measurements in different units (16 oz and 1 lb)
    are not equal.
    """

    value: float
    unit: TUnit

    def equals(self, other: object, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Compare with another measurement using a custom tolerance."""
        if not isinstance(other, Measurement):
            return False
        return self.unit == other.unit and abs(self.value - other.value) < tolerance

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        # Values are compared with a tolerance, so only the unit can be hashed.
        return hash((Measurement, self.unit))

    def __mul__(self, coefficient: object) -> "Measurement[TUnit]":
        if isinstance(coefficient, int | float):
            return Measurement(self.value * coefficient, self.unit)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, divisor: object) -> "Measurement[TUnit]":
        if isinstance(divisor, int | float):
            return Measurement(self.value / divisor, self.unit)
        return NotImplemented

    def __str__(self) -> str:
        return f"{self.value} {self.unit.name}"


@dataclass(frozen=True)
class UnitConversion:
    """Functions converting a unit to and from the base unit."""

    to_base: Callable[[float], float]
    from_base: Callable[[float], float]


class UnregisteredUnitError(ValueError):
    """Raised when a conversion involves a unit with no registered conversion."""

    def __init__(self, unit: Enum, role: str) -> None:
        self.unit = unit
        self.role = role
        super().__init__(f"No conversion registered for {role} unit {unit.name}")


@dataclass
class UnitConverter(Generic[TUnit]):
    """Registry of unit conversions routed through a common base unit."""

    base_unit: TUnit
    _conversions: dict[TUnit, UnitConversion] = field(
        default_factory=dict, init=False, repr=False
    )

    def set_base_unit(self, unit: TUnit) -> None:
        """Change the unit conversions are routed through."""
        self.base_unit = unit

    def register_conversion(
        self,
        unit: TUnit,
        coefficient: float | None = None,
        *,
        to_base: Callable[[float], float] | None = None,
        from_base: Callable[[float], float] | None = None,
    ) -> None:
        """Register or overwrite the conversion for a unit.

        Either give a coefficient scaling the unit to the base unit, or a
        ``to_base``/``from_base`` function pair for non-linear conversions.
        """
        if coefficient is not None:
            if to_base is not None or from_base is not None:
                raise TypeError("Pass either a coefficient or a function pair, not both")
            if coefficient == 0:
                raise ValueError("The coefficient must be nonzero")
            conversion = _linear_conversion(coefficient)
        elif to_base is not None and from_base is not None:
            conversion = UnitConversion(to_base=to_base, from_base=from_base)
        else:
            raise TypeError("Pass a coefficient or both to_base and from_base")

        self._conversions[unit] = conversion
        _logger.debug("Registered conversion for unit=%s", unit.name)

    def is_registered(self, unit: TUnit) -> bool:
        """Return True when a conversion exists for the unit."""
        return unit in self._conversions

    def registered_units(self) -> list[TUnit]:
        """Return the units with registered conversions."""
        return list(self._conversions)

    def convert(
        self, measurement: Measurement[TUnit], desired_unit: TUnit
    ) -> Measurement[TUnit]:
        """Convert a measurement to another unit.

        Raises ``UnregisteredUnitError`` naming the source or destination unit
        when either lacks a registered conversion.
        """
        if measurement.unit == desired_unit:
            return measurement

        if measurement.unit not in self._conversions:
            raise UnregisteredUnitError(measurement.unit, role="source")
        if desired_unit not in self._conversions:
            raise UnregisteredUnitError(desired_unit, role="destination")

        if measurement.unit == self.base_unit:
            value_in_base = measurement.value
        else:
            value_in_base = self._conversions[measurement.unit].to_base(
                measurement.value
            )
        if desired_unit == self.base_unit:
            value = value_in_base
        else:
            value = self._conversions[desired_unit].from_base(value_in_base)

        _logger.debug(
            "Converted %s %s to %s %s",
            measurement.value,
            measurement.unit.name,
            value,
            desired_unit.name,
        )
        return Measurement(value, desired_unit)


def _linear_conversion(coefficient: float) -> UnitConversion:
    return UnitConversion(
        to_base=lambda value: value * coefficient,
        from_base=lambda value: value / coefficient,
    )
