import pytest

from planarfive.graph import GraphFormatError, is_proper_coloring
from planarfive.reduction import ReductionColorer

K4 = [[1, 2, 3], [0, 2, 3], [0, 1, 3], [0, 1, 2]]

OCTAHEDRON = [
    [1, 2, 3, 4],
    [0, 2, 4, 5],
    [0, 1, 3, 5],
    [0, 2, 4, 5],
    [0, 1, 3, 5],
    [1, 2, 3, 4],
]


def wheel(rim):
    hub = [list(range(1, rim + 1))]
    spokes = []
    for i in range(1, rim + 1):
        prev = rim if i == 1 else i - 1
        nxt = 1 if i == rim else i + 1
        spokes.append([0, prev, nxt])
    return hub + spokes


def test_k4_colouring():
    assert ReductionColorer(K4).color() == [0, 1, 2, 3]


def test_k4_steps():
    colorer = ReductionColorer(K4)
    colorer.color()
    assert colorer.steps == 12


def test_steps_accumulate():
    colorer = ReductionColorer(K4)
    colorer.color()
    first = colorer.steps
    colorer.color()
    assert colorer.steps == 2 * first


def test_empty_graph():
    assert ReductionColorer([]).color() == []


@pytest.mark.parametrize("graph", [K4, OCTAHEDRON, wheel(5), wheel(7), wheel(8)])
def test_proper_with_five_colours(graph):
    coloring = ReductionColorer(graph).color()
    assert is_proper_coloring(graph, coloring)
    assert all(0 <= colour < 5 for colour in coloring)


def test_isolated_vertices():
    graph = [[] for _ in range(8)]
    coloring = ReductionColorer(graph).color()
    assert len(coloring) == 8
    assert is_proper_coloring(graph, coloring)


def test_wheel_needing_kempe_swap_keeps_neighbour_sets():
    graph = wheel(7)
    colorer = ReductionColorer(graph)
    coloring = colorer.color()
    assert is_proper_coloring(graph, coloring)
    assert [sorted(n) for n in colorer.adjacency] == [sorted(n) for n in graph]


def test_input_not_mutated():
    graph = wheel(7)
    snapshot = [list(n) for n in graph]
    ReductionColorer(graph).color()
    assert graph == snapshot


def test_rejects_out_of_range_neighbour():
    with pytest.raises(GraphFormatError):
        ReductionColorer([[1], [2]])


def test_kempe_chain_swaps_path():
    graph = [[1], [0, 2], [1]]
    original = [9, 0, 1]
    coloring = list(original)
    blocked = ReductionColorer(graph).kempe_chain(0, 1, 0, 0, coloring)
    assert blocked is False
    assert coloring[1] == original[2]
    assert coloring[2] == original[1]
    assert is_proper_coloring(graph, coloring)


def test_kempe_chain_blocked_by_triangle():
    graph = [[1, 2], [0, 2], [0, 1]]
    coloring = [9, 0, 1]
    assert ReductionColorer(graph).kempe_chain(0, 1, 0, 0, coloring) is True