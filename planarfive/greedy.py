"""Greedy five-colouring with Kempe-chain repair."""

from __future__ import annotations

from typing import MutableSequence, Sequence

from planarfive.graph import ColoringError, GraphFormatError

_COLOURS = range(1, 6)


class GreedyColorer:
    """Colours vertices in index order with colours 1..5.

    A vertex whose neighbours already use all five colours gets one by
    swapping a Kempe chain.  ``steps`` counts elementary operations across
    calls.
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
                if neighbour == target and coloring[target] == col1:
                    return True
                if coloring[neighbour] == col1:
                    stack.append((col2, col1, neighbour))
        return False

    def color(self) -> list[int]:
        """Return a colour in 1..5 for every vertex.

        Raises ColoringError when no Kempe swap frees a colour.
        """
        coloring = [0] * len(self.adjacency)
        for vertex, neighbours in enumerate(self.adjacency):
            self.steps += 1 + len(_COLOURS)
            used = set()
            for neighbour in neighbours:
                self.steps += 1
                if coloring[neighbour] != 0:
                    used.add(coloring[neighbour])
            free = next((c for c in _COLOURS if c not in used), None)
            if free is not None:
                coloring[vertex] = free
            elif not self._recolour(vertex, coloring):
                raise ColoringError(
                    f"no Kempe chain swap frees a colour for vertex {vertex}"
                )
        return coloring

    def _recolour(self, vertex: int, coloring: list[int]) -> bool:
        count = len(coloring)
        for c1 in (1, 5):
            self.steps += 1
            for c2 in (2, 3, 4):
                self.steps += 1
                recoloring = list(coloring)
                self.steps += count
                if not self.kempe_chain(c1, c2, vertex, vertex, recoloring):
                    self.steps += count
                    coloring[:] = recoloring
                    return True
        return False