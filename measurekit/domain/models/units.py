# measurekit/domain/models/units.py
"""
Unit abstractions consumed by Measurement.

A Unit is an identity with a display symbol. A Dimension is a Unit that
belongs to a family of units sharing one canonical base unit; every member
converts to and from that base through its UnitConverter.

The concrete catalog lives outside this package. A family is declared by
subclassing Dimension and returning its base unit:

Usage:
    class UnitLength(Dimension):
        @classmethod
        def base_unit(cls) -> "UnitLength":
            return METERS

    METERS = UnitLength("m", UnitConverterLinear(1.0))
    KILOMETERS = UnitLength("km", UnitConverterLinear(1000.0))
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class UnitConverter(ABC):
    """Converts values of one unit to and from its family's base unit."""

    __slots__ = ()

    @abstractmethod
    def base_unit_value(self, value: float) -> float:
        """Return `value` expressed in the base unit."""
        pass

    @abstractmethod
    def value_from_base_unit_value(self, base_unit_value: float) -> float:
        """Return a base unit value expressed in this converter's unit."""
        pass


@dataclass(frozen=True, slots=True)
class UnitConverterLinear(UnitConverter):
    """
    Affine converter: base = value * coefficient + constant.

    Covers scale factors (km -> m) and offsets (degrees Celsius -> kelvin).
    """

    coefficient: float
    constant: float = 0.0

    def __post_init__(self):
        if self.coefficient == 0:
            raise ValueError("coefficient must be non-zero")

    def base_unit_value(self, value: float) -> float:
        return value * self.coefficient + self.constant

    def value_from_base_unit_value(self, base_unit_value: float) -> float:
        return (base_unit_value - self.constant) / self.coefficient


@dataclass(frozen=True, slots=True)
class Unit:
    """
    Opaque unit identified by its concrete class and symbol.

    Units are equal only when they are instances of the same class with
    equal fields. A plain Unit has no conversion: measurements in it can
    only be combined with measurements in an equal unit.
    """

    symbol: str

    def as_dimension(self) -> "Dimension | None":
        """Return a convertible view of this unit, or None if it has none."""
        return None

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True, slots=True)
class Dimension(Unit):
    """
    Unit that belongs to a convertible family.

    Subclasses represent one family (length, mass, ...) and must override
    base_unit(). Equality compares both symbol and converter.
    """

    converter: UnitConverter

    def as_dimension(self) -> "Dimension":
        return self

    @classmethod
    def base_unit(cls) -> "Dimension":
        """Canonical unit of the family, shared by every instance of `cls`."""
        raise NotImplementedError(f"{cls.__name__} does not define a base unit")
