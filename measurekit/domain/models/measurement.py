# measurekit/domain/models/measurement.py
"""
Generic measurement value type.

A Measurement pairs a float value with a Unit. Its behaviour depends on what
the unit can do:

- Units without a conversion family (plain Unit) only combine with equal
  units. Adding or subtracting measurements in different units raises
  UnitMismatchError.
- Dimension units convert through their family's base unit. Adding or
  subtracting measurements in different units of one family returns the
  result in the base unit, not in the left operand's unit:

    >>> Measurement(1, KILOMETERS) + Measurement(500, METERS)
    Measurement(value=1500.0, unit='m')

Equality between unrelated units is simply False, while ordering them raises
IncomparableMeasurementsError.
"""

import math
from numbers import Real
from typing import Any, Generic, TypeVar

import numpy as np

from measurekit.domain.exceptions import (
    IncomparableMeasurementsError,
    UnitMismatchError,
    raise_fatal,
)
from measurekit.domain.models.units import Dimension, Unit
from measurekit.logging_config import get_logger

logger = get_logger(__name__)

UnitT = TypeVar("UnitT", bound=Unit)


def _to_float(number: Real) -> float:
    """Convert a real number to float, saturating integers beyond float range."""
    try:
        return float(number)
    except OverflowError:
        return math.inf if number > 0 else -math.inf


def _ieee_divide(numerator: float, denominator: float) -> float:
    """Divide following IEEE-754: x / 0 is +/-inf and 0 / 0 is nan."""
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def _require_dimension(unit: Unit) -> Dimension:
    dimension = unit.as_dimension()
    if dimension is None:
        raise TypeError(
            f"Unit '{unit.symbol}' ({type(unit).__name__}) is not a Dimension "
            "and cannot be converted"
        )
    return dimension


def _base_unit_values(
    lhs: "Measurement[Any]", rhs: "Measurement[Any]"
) -> tuple[float, float] | None:
    """Express both values in their shared base unit.

    Returns None when either unit is not a Dimension or the two units
    belong to different families.
    """
    lhs_dimension = lhs.unit.as_dimension()
    rhs_dimension = rhs.unit.as_dimension()
    if lhs_dimension is None or rhs_dimension is None:
        return None
    if type(lhs_dimension).base_unit() != type(rhs_dimension).base_unit():
        return None
    return (
        lhs_dimension.converter.base_unit_value(lhs.value),
        rhs_dimension.converter.base_unit_value(rhs.value),
    )


def _less_than(lhs: "Measurement[Any]", rhs: "Measurement[Any]") -> bool:
    if lhs.unit == rhs.unit:
        return lhs.value < rhs.value
    base_values = _base_unit_values(lhs, rhs)
    if base_values is None:
        raise_fatal(
            IncomparableMeasurementsError,
            "Attempt to compare measurements with non-equal dimensions: "
            f"{lhs} and {rhs}",
        )
    lhs_base, rhs_base = base_values
    return lhs_base < rhs_base


class Measurement(Generic[UnitT]):
    """
    A float value associated with a unit.

    The value may be reassigned freely. The unit is read-only and only
    changes through convert(), which replaces value and unit together.
    """

    __slots__ = ("value", "_unit")

    def __init__(self, value: float, unit: UnitT):
        if not isinstance(value, Real):
            raise TypeError(
                f"Measurement value must be a real number, got {type(value).__name__}"
            )
        self.value = _to_float(value)
        self._unit = unit

    @property
    def unit(self) -> UnitT:
        return self._unit

    @property
    def description(self) -> str:
        return f"{self.value} {self._unit.symbol}"

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.value!r}, unit={self._unit.symbol!r})"

    def to_dict(self) -> dict[str, Any]:
        return {"value": self.value, "unit": self._unit.symbol}

    def __hash__(self) -> int:
        # Unit is left out: equal measurements may differ in unit
        return hash(self.value)

    # Conversion (Dimension units only)

    def converted(self, to: UnitT) -> "Measurement[UnitT]":
        """
        Return a new measurement expressed in `to`.

        Conversion always goes through the family's base unit, so every
        unit of a family must agree on the same base.

        Args:
            to: A unit of the same Dimension family

        Raises:
            TypeError: If either unit is not a Dimension, or the units belong
                to different families
        """
        dimension = _require_dimension(self._unit)
        target = _require_dimension(to)
        if dimension == target:
            return Measurement(self.value, to)

        base_unit = type(dimension).base_unit()
        if type(target).base_unit() != base_unit:
            raise TypeError(
                f"Cannot convert '{dimension.symbol}' to '{target.symbol}': "
                "units belong to different dimensions"
            )

        base_value = dimension.converter.base_unit_value(self.value)
        logger.debug(
            "Converting %s %s to %s via base unit %s",
            self.value,
            dimension.symbol,
            target.symbol,
            base_unit.symbol,
        )
        if target == base_unit:
            return Measurement(base_value, to)
        return Measurement(target.converter.value_from_base_unit_value(base_value), to)

    def convert(self, to: UnitT) -> None:
        """Convert this measurement to `to` in place."""
        converted = self.converted(to)
        self.value, self._unit = converted.value, converted.unit

    # Arithmetic

    def __add__(self, other: object) -> "Measurement[UnitT]":
        if not isinstance(other, Measurement):
            return NotImplemented
        if self._unit == other.unit:
            return Measurement(self.value + other.value, self._unit)
        base_values = _base_unit_values(self, other)
        if base_values is None:
            raise_fatal(
                UnitMismatchError,
                f"Attempt to add measurements with non-equal units: {self} and {other}",
            )
        lhs_base, rhs_base = base_values
        return Measurement(lhs_base + rhs_base, type(self._unit).base_unit())

    def __sub__(self, other: object) -> "Measurement[UnitT]":
        if not isinstance(other, Measurement):
            return NotImplemented
        if self._unit == other.unit:
            return Measurement(self.value - other.value, self._unit)
        base_values = _base_unit_values(self, other)
        if base_values is None:
            raise_fatal(
                UnitMismatchError,
                f"Attempt to subtract measurements with non-equal units: {self} and {other}",
            )
        lhs_base, rhs_base = base_values
        return Measurement(lhs_base - rhs_base, type(self._unit).base_unit())

    def __mul__(self, scalar: object) -> "Measurement[UnitT]":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Measurement(self.value * _to_float(scalar), self._unit)

    def __rmul__(self, scalar: object) -> "Measurement[UnitT]":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Measurement(_to_float(scalar) * self.value, self._unit)

    def __truediv__(self, scalar: object) -> "Measurement[UnitT]":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Measurement(_ieee_divide(self.value, _to_float(scalar)), self._unit)

    def __rtruediv__(self, scalar: object) -> "Measurement[UnitT]":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Measurement(_ieee_divide(_to_float(scalar), self.value), self._unit)

    # Comparison

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        if self._unit == other.unit:
            return self.value == other.value
        base_values = _base_unit_values(self, other)
        if base_values is None:
            return False
        lhs_base, rhs_base = base_values
        return lhs_base == rhs_base

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        return _less_than(self, other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        return _less_than(other, self)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        return not _less_than(other, self)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Measurement):
            return NotImplemented
        return not _less_than(self, other)
