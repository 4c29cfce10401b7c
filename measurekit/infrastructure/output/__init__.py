from .formatters import MeasurementFormatter, SymbolMeasurementFormatter, string_from

__all__ = ["MeasurementFormatter", "SymbolMeasurementFormatter", "string_from"]
