"""End-to-end use of the public API with a small external unit catalog"""

import pytest

from measurekit import (
    IncomparableMeasurementsError,
    Measurement,
    MeasurementLogicError,
    UnitMismatchError,
)
from measurekit.config import FormatterSettings
from measurekit.infrastructure import (
    bridge_to_external,
    conditionally_bridge_from_external,
)
from measurekit.infrastructure.output import SymbolMeasurementFormatter, string_from
from tests.mocks import (
    CELSIUS,
    FAHRENHEIT,
    FEET,
    GADGETS,
    KILOMETERS,
    METERS,
    SECONDS,
    WIDGETS,
    UnitDuration,
    UnitLength,
)


def test_route_total_distance():
    legs = [
        Measurement(1.2, KILOMETERS),
        Measurement(350, METERS),
        Measurement(1000, FEET),
    ]

    total = sum(legs[1:], legs[0])

    assert total.unit is METERS
    assert total.value == pytest.approx(1200 + 350 + 304.8)

    total.convert(KILOMETERS)
    formatter = SymbolMeasurementFormatter(FormatterSettings(precision=3))
    assert string_from(formatter, total) == "1.855 km"


def test_temperature_scaling_keeps_unit():
    reading = Measurement(20, CELSIUS)
    doubled = reading * 2
    assert doubled == Measurement(40, CELSIUS)
    assert doubled.converted(FAHRENHEIT).value == pytest.approx(104.0)


def test_error_policies():
    # Equality degrades gracefully, ordering and mismatched addition do not
    assert Measurement(1, METERS) != Measurement(1, SECONDS)
    with pytest.raises(IncomparableMeasurementsError):
        Measurement(1, METERS) < Measurement(1, SECONDS)
    with pytest.raises(UnitMismatchError):
        Measurement(1, WIDGETS) + Measurement(1, GADGETS)
    assert issubclass(UnitMismatchError, MeasurementLogicError)


def test_bridge_round_trip_through_external():
    external = bridge_to_external(Measurement(90, SECONDS))

    ok, as_length = conditionally_bridge_from_external(external, UnitLength)
    assert not ok and as_length is None

    ok, as_duration = conditionally_bridge_from_external(external, UnitDuration)
    assert ok
    assert as_duration == Measurement(90, SECONDS)
