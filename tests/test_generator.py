import random

import pytest

from planarfive.generator import TriangulationGenerator, area_key, decode_area_key


def test_decode_area_key_outer_face():
    assert decode_area_key("1-2-3") == [1, 2, 3]


def test_decode_area_key_multi_digit():
    assert decode_area_key("4-10-12") == [4, 10, 12]


def test_decode_area_key_rejects_garbage():
    with pytest.raises(ValueError):
        decode_area_key("1-x-3")


def test_area_key_sorts_nodes():
    assert area_key(5, 1, 3) == "1-3-5"


def test_area_key_sorts_numerically():
    assert area_key(12, 3, 10) == "3-10-12"


def test_area_key_round_trip():
    assert decode_area_key(area_key(7, 2, 4)) == [2, 4, 7]


def test_three_vertices_is_triangle():
    adjacency = TriangulationGenerator(3, random.Random(0)).generate()
    assert adjacency == [[1, 2], [0, 2], [0, 1]]


def test_four_vertices_is_complete():
    adjacency = TriangulationGenerator(4, random.Random(5)).generate()
    assert adjacency == [[1, 2, 3], [0, 2, 3], [0, 1, 3], [0, 1, 2]]


@pytest.mark.parametrize("count", [0, 1, 2, -4])
def test_too_few_vertices(count):
    with pytest.raises(ValueError):
        TriangulationGenerator(count)


@pytest.mark.parametrize("count", [5, 8, 20, 60])
def test_edge_count_of_triangulation(count):
    adjacency = TriangulationGenerator(count, random.Random(count)).generate()
    assert len(adjacency) == count
    assert sum(len(group) for group in adjacency) == 2 * (3 * count - 6)


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_symmetric_and_loop_free(seed):
    adjacency = TriangulationGenerator(30, random.Random(seed)).generate()
    for vertex, group in enumerate(adjacency):
        assert vertex not in group
        assert len(set(group)) == len(group)
        for other in group:
            assert vertex in adjacency[other]


def test_minimum_degree_three():
    adjacency = TriangulationGenerator(25, random.Random(9)).generate()
    assert min(len(group) for group in adjacency) >= 3


def test_same_seed_same_graph():
    first = TriangulationGenerator(40, random.Random(42)).generate()
    second = TriangulationGenerator(40, random.Random(42)).generate()
    assert first == second


def test_generate_twice_keeps_size():
    generator = TriangulationGenerator(12, random.Random(3))
    generator.generate()
    again = generator.generate()
    assert len(again) == 12
    assert sum(len(group) for group in again) == 2 * (3 * 12 - 6)