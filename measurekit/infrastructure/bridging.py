"""Bridging between Measurement and a type-erased external representation."""

from dataclasses import dataclass
from typing import TypeVar

from measurekit.domain.exceptions import BridgingError, raise_fatal
from measurekit.domain.models.measurement import Measurement
from measurekit.domain.models.units import Unit

UnitT = TypeVar("UnitT", bound=Unit)


@dataclass(frozen=True, slots=True)
class ExternalMeasurement:
    """
    Opaque measurement as exchanged with external code.

    The unit is type-erased: consumers must state which unit type they
    expect when bridging back.
    """

    double_value: float
    unit: Unit

    def to_measurement(self) -> Measurement[Unit]:
        """Type-erased view, used when no unit type is expected."""
        return Measurement(self.double_value, self.unit)


def bridge_to_external(measurement: Measurement[UnitT]) -> ExternalMeasurement:
    return ExternalMeasurement(double_value=measurement.value, unit=measurement.unit)


def force_bridge_from_external(
    source: ExternalMeasurement, unit_type: type[UnitT]
) -> Measurement[UnitT]:
    """
    Bridge back, requiring the carried unit to be a `unit_type`.

    Raises:
        BridgingError: If the carried unit is of another type
    """
    if not isinstance(source.unit, unit_type):
        raise_fatal(
            BridgingError,
            f"Could not cast unit '{source.unit.symbol}' "
            f"({type(source.unit).__name__}) to {unit_type.__name__}",
        )
    return Measurement(source.double_value, source.unit)


def conditionally_bridge_from_external(
    source: ExternalMeasurement, unit_type: type[UnitT]
) -> tuple[bool, Measurement[UnitT] | None]:
    """Bridge back if the carried unit is a `unit_type`; (False, None) otherwise."""
    if isinstance(source.unit, unit_type):
        return True, Measurement(source.double_value, source.unit)
    return False, None


def unconditionally_bridge_from_external(
    source: ExternalMeasurement | None, unit_type: type[UnitT]
) -> Measurement[UnitT]:
    """Like force_bridge_from_external, but a missing source is also fatal."""
    if source is None:
        raise_fatal(BridgingError, "Cannot bridge a missing external measurement")
    return force_bridge_from_external(source, unit_type)
