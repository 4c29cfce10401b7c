import logging
import sys
from environs import Env

PACKAGE_LOGGER = "measurekit"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"


def setup_logging(env: Env) -> None:
    """Set up logging configuration.

    Reads LOGGING_LEVEL (default INFO); DEBUG=true forces DEBUG. Does nothing
    when the host application has already configured logging.
    """
    if logging.root.handlers:  # Check if logging is already configured
        return

    log_level_str = env.str("LOGGING_LEVEL", "INFO").upper()

    # DEBUG flag overrides log level when set to True
    if env.bool("DEBUG", default=False):
        log_level_str = "DEBUG"

    numeric_level = getattr(logging, log_level_str, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level_str}")

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, stream=sys.stdout)

    # Conversion hops are logged at DEBUG, programmer errors at CRITICAL
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
