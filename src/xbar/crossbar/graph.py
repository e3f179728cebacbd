"""Terminal connectivity of a wiring plan as a networkx graph."""

from __future__ import annotations

__all__ = ["connection_graph", "is_complete", "missing_pairs"]

import networkx as nx

from xbar.crossbar.enumerator import Crossbar


def connection_graph(count: int) -> nx.Graph:
    """Build the graph of terminals joined by the wiring plan.

    Nodes are terminal numbers ``0..count-1``. Each connection adds an edge
    carrying its ``col_idx``, start ``block_idx`` and ``order`` in the
    enumeration. A pair wired twice would collapse into one edge, so the
    edge count is also checked by :func:`is_complete`.
    """
    G = nx.Graph()
    G.add_nodes_from(range(count))
    G.graph["wires"] = 0
    for order, conn in enumerate(Crossbar(count)):
        a, b = conn.terminals
        G.add_edge(a, b, col_idx=conn.col_idx, block_idx=conn.start.block_idx,
                   order=order)
        G.graph["wires"] += 1
    return G


def missing_pairs(G: nx.Graph) -> list[tuple[int, int]]:
    """Terminal pairs that no wire connects, sorted."""
    return sorted(tuple(sorted(e)) for e in nx.non_edges(G))


def is_complete(G: nx.Graph) -> bool:
    """Whether the plan realizes K_n: every pair wired, none twice."""
    full = nx.complete_graph(G.nodes)
    expected = full.number_of_edges()
    if G.graph.get("wires", G.number_of_edges()) != expected:
        return False
    return G.number_of_edges() == expected and nx.number_of_selfloops(G) == 0
