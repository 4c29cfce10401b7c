"""Constants used across the package."""

# Formatter defaults (overridable via environment, see measurekit.config)
DEFAULT_FORMAT_PRECISION = 2
DEFAULT_UNIT_STYLE = "short"
UNIT_STYLES = ("short", "long")
