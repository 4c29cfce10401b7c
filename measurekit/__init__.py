"""Physical measurements: a value paired with a unit, with conversion and arithmetic."""

from measurekit.domain.exceptions import (
    BridgingError,
    IncomparableMeasurementsError,
    MeasurementLogicError,
    UnitMismatchError,
)
from measurekit.domain.models import (
    Dimension,
    Measurement,
    Unit,
    UnitConverter,
    UnitConverterLinear,
)

__all__ = [
    "BridgingError",
    "Dimension",
    "IncomparableMeasurementsError",
    "Measurement",
    "MeasurementLogicError",
    "Unit",
    "UnitConverter",
    "UnitConverterLinear",
    "UnitMismatchError",
]
