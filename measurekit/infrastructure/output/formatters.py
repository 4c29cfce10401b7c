"""Text rendering of measurements."""

import math
from typing import Protocol

from measurekit.config import FormatterSettings
from measurekit.domain.models.measurement import Measurement
from measurekit.logging_config import get_logger

logger = get_logger(__name__)


class MeasurementFormatter(Protocol):
    """Protocol for measurement rendering strategies"""

    def string_for(self, obj: object) -> str | None:
        """Render `obj`, or return None if it cannot be rendered"""
        ...


class SymbolMeasurementFormatter:
    """
    Renders measurements as '<value> <unit>' with a fixed number of decimals.

    In the "long" unit style, symbols found in `long_names` are replaced
    by their long name; other symbols are kept as they are.
    """

    def __init__(
        self,
        settings: FormatterSettings | None = None,
        long_names: dict[str, str] | None = None,
    ):
        self.settings = settings or FormatterSettings()
        self.long_names = dict(long_names or {})

    @classmethod
    def from_settings(
        cls, settings: FormatterSettings, long_names: dict[str, str] | None = None
    ) -> "SymbolMeasurementFormatter":
        return cls(settings=settings, long_names=long_names)

    def string_for(self, obj: object) -> str | None:
        if not isinstance(obj, Measurement):
            return None
        if not math.isfinite(obj.value) and not self.settings.render_non_finite:
            return None

        unit_text = obj.unit.symbol
        if self.settings.unit_style == "long":
            unit_text = self.long_names.get(unit_text, unit_text)
        return f"{obj.value:.{self.settings.precision}f} {unit_text}"


def string_from(formatter: MeasurementFormatter, measurement: Measurement) -> str:
    """
    Render a measurement, falling back to an empty string.

    Args:
        formatter: Any object implementing MeasurementFormatter
        measurement: Measurement to render

    Returns:
        Formatted text, or "" when the formatter cannot render it
    """
    result = formatter.string_for(measurement)
    if result is None:
        logger.debug(
            "%s could not render %r", type(formatter).__name__, measurement
        )
        return ""
    return result
