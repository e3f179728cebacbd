"""Crossbar topology and connection enumeration.

Public API:
- topology / blocks / rows / columns: dimensions for N terminals
- Crossbar / enumerate_connections: the wiring plan, one connection at a time
- Position / Connection: value objects produced by the enumerator
- connection_graph / is_complete / missing_pairs: networkx coverage checks
"""

from xbar.crossbar.enumerator import Crossbar, enumerate_connections
from xbar.crossbar.graph import connection_graph, is_complete, missing_pairs
from xbar.crossbar.model import Connection, Position
from xbar.crossbar.topology import (
    Topology,
    blocks,
    columns,
    rows,
    topology,
    validate_count,
)

__all__ = [
    "Connection",
    "Crossbar",
    "Position",
    "Topology",
    "blocks",
    "columns",
    "connection_graph",
    "enumerate_connections",
    "is_complete",
    "missing_pairs",
    "rows",
    "topology",
    "validate_count",
]
