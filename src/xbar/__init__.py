"""xbar: wiring plans for locality preserving one-sided crossbar switches."""

from xbar.crossbar import (
    Connection,
    Crossbar,
    Position,
    Topology,
    enumerate_connections,
    topology,
)

__version__ = "0.1.0"

__all__ = [
    "Connection",
    "Crossbar",
    "Position",
    "Topology",
    "__version__",
    "enumerate_connections",
    "topology",
]
