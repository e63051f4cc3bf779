"""Five-colouring by repeatedly removing vertices of degree at most five."""

from __future__ import annotations

from typing import MutableSequence, Sequence

from planarfive.graph import GraphFormatError

_PALETTE = 5
_BASE_SIZE = 5


class ReductionColorer:
    """Colours a graph with 0..4 by peeling off low-degree vertices.

    Vertices of degree at most five are removed one at a time until at most
    five wait on the stack; the rest is coloured directly and the removed
    vertices are added back, taking a free colour or one freed by swapping a
    Kempe chain.  ``steps`` counts elementary operations across calls.
    ``adjacency`` is a working copy: after colouring it holds the same
    neighbour sets, possibly in a different order.
    """

    def __init__(self, adjacency: Sequence[Sequence[int]]) -> None:
        self.adjacency = [list(neighbours) for neighbours in adjacency]
        count = len(self.adjacency)
        for neighbours in self.adjacency:
            for neighbour in neighbours:
                if not 0 <= neighbour < count:
                    raise GraphFormatError(
                        f"neighbour index out of range: {neighbour}"
                    )
        self.steps = 0

    def kempe_chain(
        self,
        c1: int,
        c2: int,
        start: int,
        target: int,
        coloring: MutableSequence[int],
    ) -> bool:
        """Swap colours c1/c2 along the chain from ``start``, in place.

        Returns True when the chain runs back into ``target`` with colour
        c1, meaning the swap cannot free a colour for it.
        """
        stack = [(c1, c2, start)]
        while stack:
            self.steps += 1
            col1, col2, vertex = stack.pop()
            coloring[vertex] = col1
            for neighbour in self.adjacency[vertex]:
                self.steps += 1
                if neighbour == target and coloring[target] == col1:
                    return True
                if coloring[neighbour] == col1:
                    stack.append((col2, col1, neighbour))
        return False

    def color(self) -> list[int]:
        """Return a colour in 0..4 for every vertex."""
        adjacency = self.adjacency
        count = len(adjacency)
        coloring = [0] * count
        self.steps += count

        pending = [v for v in range(count) if len(adjacency[v]) <= _PALETTE]
        self.steps += count

        removed: list[tuple[int, list[int]]] = []
        while len(pending) > _BASE_SIZE:
            vertex = pending.pop()
            adjacent = list(adjacency[vertex])
            self.steps += len(adjacent)
            for neighbour in adjacent:
                self.steps += 1
                self._detach(neighbour, vertex, pending)
            adjacency[vertex] = []
            removed.append((vertex, adjacent))

        colour = 0
        for vertex in range(count):
            self.steps += 1
            if adjacency[vertex]:
                coloring[vertex] = colour
                colour += 1

        for vertex, adjacent in reversed(removed):
            for neighbour in adjacent:
                self.steps += 1
                adjacency[neighbour].append(vertex)
            adjacency[vertex] = list(adjacent)
            self.steps += len(adjacent)
            self._place(vertex, adjacent, coloring)

        return coloring

    def _detach(self, neighbour: int, vertex: int, pending: list[int]) -> None:
        neighbours = self.adjacency[neighbour]
        try:
            index = neighbours.index(vertex)
        except ValueError:
            self.steps += len(neighbours)
            return
        self.steps += index + 1
        last = neighbours.pop()
        if index < len(neighbours):
            neighbours[index] = last
        if len(neighbours) == _PALETTE:
            pending.append(neighbour)

    def _place(
        self, vertex: int, adjacent: list[int], coloring: list[int]
    ) -> None:
        used = set()
        for neighbour in adjacent:
            self.steps += 1
            if coloring[neighbour] < _PALETTE:
                used.add(coloring[neighbour])

        colour = 0
        while colour < _PALETTE and colour in used:
            self.steps += 1
            colour += 1
        if colour < _PALETTE:
            coloring[vertex] = colour
            return

        count = len(coloring)
        for c1 in (0, 4):
            self.steps += 1
            for c2 in (1, 2, 3):
                self.steps += 1
                recoloring = list(coloring)
                self.steps += count
                if not self.kempe_chain(c1, c2, vertex, vertex, recoloring):
                    self.steps += count
                    coloring[:] = recoloring
                    return