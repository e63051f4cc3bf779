"""Interactive menu that generates triangulations and colours them."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Optional, Sequence, TextIO

from planarfive.generator import TriangulationGenerator
from planarfive.graph import ColoringError, find_conflict, format_adjacency
from planarfive.greedy import GreedyColorer
from planarfive.reduction import ReductionColorer

_MENU = (
    "\n"
    "==============================================\n"
    "         Planar graph colouring:\n"
    "==============================================\n"
    "1. Test the base algorithm\n"
    "2. Test the second algorithm\n"
    "3. Test both algorithms\n"
    "4. Exit"
)


def run_reduction(
    adjacency: Sequence[Sequence[int]], out: Optional[TextIO] = None
) -> list[int]:
    """Colour with the reduction algorithm, reporting steps, time and errors."""
    out = out if out is not None else sys.stdout
    colorer = ReductionColorer(adjacency)
    start = time.perf_counter()
    coloring = colorer.color()
    elapsed = (time.perf_counter() - start) * 1000.0
    print(f"Steps of the base version: {colorer.steps}", file=out)
    print(f"Run time of the base version: {elapsed} ms.", file=out)
    if find_conflict(adjacency, coloring) is not None:
        print("error with coloring not optimal version", file=out)
    return coloring


def run_greedy(
    adjacency: Sequence[Sequence[int]], out: Optional[TextIO] = None
) -> Optional[list[int]]:
    """Colour with the greedy algorithm, reporting steps, time and errors.

    Returns None when the greedy colourer cannot finish.
    """
    out = out if out is not None else sys.stdout
    colorer = GreedyColorer(adjacency)
    start = time.perf_counter()
    try:
        coloring = colorer.color()
    except ColoringError as exc:
        print(f"Steps of the second version: {colorer.steps}", file=out)
        print(f"error with coloring optimal version: {exc}", file=out)
        return None
    elapsed = (time.perf_counter() - start) * 1000.0
    print(f"Steps of the second version: {colorer.steps}", file=out)
    print(f"Run time of the second version: {elapsed} ms.", file=out)
    if find_conflict(adjacency, coloring) is not None:
        print("error with coloring optimal version", file=out)
    return coloring


def _read_int(prompt: str) -> Optional[int]:
    """Read one integer; raises EOFError at end of input, None if not a number."""
    line = input(prompt)
    try:
        return int(line.strip())
    except ValueError:
        return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive menu until the user exits."""
    parser = argparse.ArgumentParser(
        prog="planarfive", description="Five-colour random planar triangulations."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    while True:
        print(_MENU)
        try:
            choice = _read_int("Enter your choice: ")
            if choice == 4:
                print("Exiting.")
                return 0
            if choice is None:
                print("Please enter a number from 1 to 4.\n")
                continue
            count = _read_int("Enter the number of vertices: ")
        except EOFError:
            print()
            return 0

        if count is None or count <= 0:
            print("Please enter a natural number.\n")
            return 0

        try:
            adjacency = TriangulationGenerator(count, rng).generate()
        except ValueError as exc:
            print(f"{exc}\n")
            continue

        print(format_adjacency(adjacency), end="")
        print()
        if choice == 1:
            run_reduction(adjacency)
        elif choice == 2:
            run_greedy(adjacency)
        elif choice == 3:
            run_reduction(adjacency)
            print()
            run_greedy(adjacency)
        else:
            print("Invalid choice. Please try again.\n")


if __name__ == "__main__":
    sys.exit(main())