from .bridging import (
    ExternalMeasurement,
    bridge_to_external,
    conditionally_bridge_from_external,
    force_bridge_from_external,
    unconditionally_bridge_from_external,
)

__all__ = [
    "ExternalMeasurement",
    "bridge_to_external",
    "conditionally_bridge_from_external",
    "force_bridge_from_external",
    "unconditionally_bridge_from_external",
]
