from typing import NoReturn

from measurekit.logging_config import get_logger

logger = get_logger(__name__)


class MeasurementLogicError(AssertionError):
    """
    Base exception for programmer misuse of measurements.

    These are failed preconditions, not recoverable conditions:
    library code never catches them.
    """


class UnitMismatchError(MeasurementLogicError):
    """
    Raised when adding or subtracting measurements whose units are not equal
    and share no conversion family.
    """


class IncomparableMeasurementsError(MeasurementLogicError):
    """
    Raised when ordering measurements of unrelated dimensions.
    Equality between the same operands returns False instead.
    """


class BridgingError(MeasurementLogicError):
    """
    Raised when an external measurement is forced into a unit type
    it does not carry.
    """


def raise_fatal(error_type: type[MeasurementLogicError], message: str) -> NoReturn:
    """Log a programmer error at CRITICAL and raise it."""
    logger.critical(message)
    raise error_type(message)
