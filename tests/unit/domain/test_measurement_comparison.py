import operator

import pytest

from measurekit.domain.exceptions import IncomparableMeasurementsError
from measurekit.domain.models.measurement import Measurement
from tests.mocks import (
    CELSIUS,
    CENTIMETERS,
    GADGETS,
    KELVIN,
    KILOMETERS,
    METERS,
    SECONDS,
    WIDGETS,
)


class TestEquality:
    def test_same_unit(self):
        assert Measurement(1, WIDGETS) == Measurement(1, WIDGETS)
        assert Measurement(1, WIDGETS) != Measurement(2, WIDGETS)

    def test_same_family_compares_base_values(self):
        assert Measurement(1, KILOMETERS) == Measurement(1000, METERS)
        assert Measurement(0, CELSIUS) == Measurement(273.15, KELVIN)
        assert Measurement(1, KILOMETERS) != Measurement(1, METERS)

    def test_unrelated_dimensions_are_not_equal(self):
        assert (Measurement(1, METERS) == Measurement(1, SECONDS)) is False
        assert Measurement(1, METERS) != Measurement(1, SECONDS)

    def test_unequal_exact_units_are_not_equal(self):
        assert (Measurement(1, WIDGETS) == Measurement(1, GADGETS)) is False
        assert (Measurement(1, WIDGETS) == Measurement(1, METERS)) is False

    def test_non_measurement_is_not_equal(self):
        assert Measurement(1, METERS) != 1.0
        assert Measurement(1, METERS) != "1.0 m"


class TestOrdering:
    def test_same_unit(self):
        assert Measurement(1, WIDGETS) < Measurement(2, WIDGETS)
        assert not Measurement(2, WIDGETS) < Measurement(1, WIDGETS)

    def test_same_family_compares_base_values(self):
        assert Measurement(999, METERS) < Measurement(1, KILOMETERS)
        assert Measurement(1, KILOMETERS) > Measurement(99_999, CENTIMETERS)
        assert Measurement(1, KILOMETERS) <= Measurement(1000, METERS)
        assert Measurement(1, KILOMETERS) >= Measurement(1000, METERS)

    def test_sorting_mixed_units(self):
        measurements = [
            Measurement(1, KILOMETERS),
            Measurement(5, METERS),
            Measurement(20, CENTIMETERS),
        ]
        assert [m.unit for m in sorted(measurements)] == [CENTIMETERS, METERS, KILOMETERS]
        assert max(measurements).unit is KILOMETERS

    @pytest.mark.parametrize("op", [operator.lt, operator.gt, operator.le, operator.ge])
    def test_unrelated_dimensions_are_fatal(self, op):
        with pytest.raises(
            IncomparableMeasurementsError,
            match="Attempt to compare measurements with non-equal dimensions",
        ):
            op(Measurement(1, METERS), Measurement(1, SECONDS))

    def test_unequal_exact_units_are_fatal(self):
        with pytest.raises(IncomparableMeasurementsError):
            Measurement(1, WIDGETS) < Measurement(1, GADGETS)

    def test_non_measurement_is_unsupported(self):
        with pytest.raises(TypeError):
            Measurement(1, METERS) < 1.0
