"""Tests for the topology calculator."""

import pytest

from xbar.crossbar import Crossbar, Topology, blocks, columns, rows, topology


def test_topology_five_terminals():
    assert topology(5) == Topology(count=5, blocks=4, rows=20, columns=2)


def test_topology_ten_terminals():
    topo = topology(10)
    assert (topo.blocks, topo.rows, topo.columns) == (9, 90, 5)
    assert topo.connections == 45


def test_topology_two_terminals():
    topo = topology(2)
    assert (topo.blocks, topo.rows, topo.columns) == (1, 2, 1)
    assert topo.connections == 1


@pytest.mark.parametrize("n", [2, 3, 7, 8, 31, 64])
def test_formulas(n):
    assert blocks(n) == n - 1
    assert rows(n) == n * (n - 1)
    assert columns(n) == n // 2


def test_rows_fill_blocks():
    """Every block holds one row per terminal."""
    for n in range(2, 40):
        assert rows(n) == blocks(n) * n


def test_crossbar_static_helpers():
    assert Crossbar.blocks(10) == 9
    assert Crossbar.rows(10) == 90
    assert Crossbar.columns(10) == 5


@pytest.mark.parametrize("bad", [0, 1, -3])
def test_small_counts_rejected(bad):
    for fn in (blocks, rows, columns, topology):
        with pytest.raises(ValueError, match="terminal count"):
            fn(bad)


@pytest.mark.parametrize("bad", [2.0, "5", None, True])
def test_non_integer_counts_rejected(bad):
    with pytest.raises(ValueError, match="terminal count"):
        topology(bad)
