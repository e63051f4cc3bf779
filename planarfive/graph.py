"""Adjacency-list input and output, plus checks on vertex colourings."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple

_INT_RE = re.compile(r"[+-]?\d+")
_FIRST_TOKEN_RE = re.compile(r"\s*(\S+)")


class GraphFormatError(ValueError):
    """Raised when an adjacency description is malformed."""


class ColoringError(ValueError):
    """Raised when a colouring is not a proper colouring of its graph."""


def _parse_int(token: str, what: str) -> int:
    if not _INT_RE.fullmatch(token):
        raise GraphFormatError(f"invalid {what}: {token!r}")
    return int(token)


def parse_adjacency(text: str) -> list[list[int]]:
    """Parse a vertex count followed by lines of ``vertex neighbour ...``.

    Neighbours listed on several lines for the same vertex are accumulated.
    """
    match = _FIRST_TOKEN_RE.match(text)
    if match is None:
        raise GraphFormatError("missing vertex count")
    count = _parse_int(match.group(1), "vertex count")
    if count <= 0:
        raise GraphFormatError("the number of vertices must be greater than 0")

    adjacency: list[list[int]] = [[] for _ in range(count)]
    # One separator character after the count is skipped; whatever remains
    # of the first line is read as an ordinary vertex line.
    rest = text[match.end() + 1:]
    for line in rest.splitlines():
        tokens = line.split()
        if not tokens:
            continue
        vertex = _parse_int(tokens[0], "vertex number")
        if not 0 <= vertex < count:
            raise GraphFormatError(f"invalid vertex number: {vertex}")
        for token in tokens[1:]:
            neighbour = _parse_int(token, "connected vertex number")
            if not 0 <= neighbour < count:
                raise GraphFormatError(
                    f"invalid connected vertex number: {neighbour}"
                )
            adjacency[vertex].append(neighbour)
    return adjacency


def read_adjacency(path: str | Path) -> list[list[int]]:
    """Read an adjacency description from a file."""
    return parse_adjacency(Path(path).read_text(encoding="utf-8"))


def format_adjacency(adjacency: Iterable[Sequence[int]]) -> str:
    """Render adjacency lists one vertex per line as ``i: a b ``."""
    return "".join(
        f"{vertex}: " + "".join(f"{neighbour} " for neighbour in neighbours) + "\n"
        for vertex, neighbours in enumerate(adjacency)
    )


def find_conflict(
    adjacency: Sequence[Sequence[int]], coloring: Sequence[int]
) -> Optional[Tuple[int, int]]:
    """Return the first edge ``(v, u)`` whose ends share a colour, or None."""
    if len(coloring) != len(adjacency):
        raise ColoringError(
            f"colouring has {len(coloring)} entries for {len(adjacency)} vertices"
        )
    for vertex, neighbours in enumerate(adjacency):
        for neighbour in neighbours:
            if coloring[neighbour] == coloring[vertex]:
                return vertex, neighbour
    return None


def is_proper_coloring(
    adjacency: Sequence[Sequence[int]], coloring: Sequence[int]
) -> bool:
    """Tell whether no edge joins two vertices of the same colour."""
    return find_conflict(adjacency, coloring) is None


def write_coloring(
    path: str | Path,
    adjacency: Sequence[Sequence[int]],
    coloring: Sequence[int],
) -> None:
    """Check a colouring and write it as ``i : colour`` lines."""
    conflict = find_conflict(adjacency, coloring)
    if conflict is not None:
        vertex, neighbour = conflict
        raise ColoringError(
            f"vertices {vertex} and {neighbour} share colour {coloring[vertex]}"
        )
    with open(path, "w", encoding="utf-8") as output:
        for vertex, colour in enumerate(coloring):
            output.write(f"{vertex} : {colour}\n")