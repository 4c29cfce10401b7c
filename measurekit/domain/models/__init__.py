# measurekit/domain/models/__init__.py
from .units import Unit, Dimension, UnitConverter, UnitConverterLinear
from .measurement import Measurement

__all__ = [
    "Unit",
    "Dimension",
    "UnitConverter",
    "UnitConverterLinear",
    "Measurement",
]
