"""Random planar triangulations grown by inserting vertices into faces."""

from __future__ import annotations

import random
from typing import Optional

MIN_COUNT = 3
OUTER_FACE = "1-2-3"


def decode_area_key(key: str) -> list[int]:
    """Split a face key such as ``"1-2-3"`` into its vertex numbers."""
    try:
        return [int(part) for part in key.split("-")]
    except ValueError as exc:
        raise ValueError(f"invalid face key: {key!r}") from exc


def area_key(new_node: int, node1: int, node2: int) -> str:
    """Build the key of a triangular face from its three vertex numbers."""
    return "-".join(str(node) for node in sorted((new_node, node1, node2)))


class TriangulationGenerator:
    """Grows a triangulation from a triangle, one vertex per step.

    Each new vertex is placed inside a randomly chosen triangular face and
    joined to its three corners, splitting that face into three.  Vertices
    are numbered from 1 while growing; the returned adjacency lists use
    0-based indices and are sorted.
    """

    def __init__(self, node_count: int, rng: Optional[random.Random] = None) -> None:
        if node_count < MIN_COUNT:
            raise ValueError(
                f"a triangulation needs at least {MIN_COUNT} vertices, got {node_count}"
            )
        self.node_count = node_count
        self.rng = rng if rng is not None else random.Random()

    def generate(self) -> list[list[int]]:
        """Return the adjacency lists of a fresh random triangulation."""
        links: dict[int, list[int]] = {1: [2, 3], 2: [3, 1], 3: [1, 2]}
        faces = [OUTER_FACE]

        for _ in range(MIN_COUNT + 1, self.node_count + 1):
            face = faces.pop(self.rng.randrange(len(faces)))
            corners = decode_area_key(face)
            new_node = len(links) + 1
            links[new_node] = list(corners)
            for corner in corners:
                links[corner].append(new_node)
            for first, second in ((0, 1), (1, 2), (0, 2)):
                faces.append(area_key(new_node, corners[first], corners[second]))

        neighbours: list[set[int]] = [set() for _ in range(self.node_count)]
        for node, connected in links.items():
            for other in connected:
                neighbours[node - 1].add(other - 1)
                neighbours[other - 1].add(node - 1)
        return [sorted(group) for group in neighbours]