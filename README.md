# planarfive

Colouring of planar graphs with two algorithms that can be compared on the
same graph:

* **Reduction colouring** (`planarfive.reduction.ReductionColorer`): removes
  vertices of degree at most five one at a time, colours what is left, then
  adds each removed vertex back and gives it a free colour from 0 to 4. When
  its neighbours already use all five, a Kempe chain swap is tried to free one.
* **Greedy colouring** (`planarfive.greedy.GreedyColorer`): goes through the
  vertices in index order and gives each one the lowest colour from 1 to 5
  that its neighbours do not use. When none is free, a Kempe chain swap is
  tried; if no swap frees a colour, `ColoringError` is raised.

Both colourers keep a `steps` counter of the elementary operations they
perform, so the work done by each can be compared.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
planarfive
planarfive --seed 7
```

This opens an interactive menu:

1. test the reduction algorithm
2. test the greedy algorithm
3. test both
4. exit

After choosing 1, 2 or 3 you enter a number of vertices. A random planar
triangulation with that many vertices is generated (at least 3 are needed),
its adjacency lists are printed, and each chosen algorithm colours it. The
step count and running time in milliseconds are printed, and an error line is
printed if the colouring gives two neighbours the same colour. The menu then
repeats.

Choosing 4, or reaching the end of input, exits. A vertex count that is not a
positive whole number also ends the program. `--seed` fixes the random
generator so that the same graphs are produced on each run.

The command works only on generated graphs: it does not read adjacency files
or write colourings to disk. Those are available from the library functions
below.

## Library use

```python
import random

from planarfive.generator import TriangulationGenerator
from planarfive.reduction import ReductionColorer
from planarfive.greedy import GreedyColorer
from planarfive.graph import is_proper_coloring, format_adjacency

adjacency = TriangulationGenerator(20, random.Random(1)).generate()
print(format_adjacency(adjacency))

colorer = ReductionColorer(adjacency)
colouring = colorer.color()
print(colorer.steps, is_proper_coloring(adjacency, colouring))

colorer = GreedyColorer(adjacency)
colouring = colorer.color()
print(colorer.steps, is_proper_coloring(adjacency, colouring))
```

`TriangulationGenerator(node_count, rng)` starts from a triangle and places
each further vertex inside a randomly chosen triangular face, joined to its
three corners. `generate()` returns 0-based, sorted adjacency lists. A
`node_count` below 3 raises `ValueError`. The helpers `area_key` and
`decode_area_key` build and split face keys such as `"1-2-3"`.

Both colourers copy the adjacency lists they are given and raise
`GraphFormatError` if a neighbour index is out of range. Each has a
`kempe_chain(c1, c2, start, target, coloring)` method that swaps two colours
along a chain in place and returns `True` when the chain runs back into
`target`.

`planarfive.cli` also offers `run_reduction(adjacency, out)` and
`run_greedy(adjacency, out)`, which colour a graph and print the step count,
time and any error to `out` (standard output by default). `run_greedy`
returns `None` when the greedy colourer cannot finish.

### Adjacency files

`planarfive.graph.read_adjacency(path)` and `parse_adjacency(text)` read this
format: the first number is the vertex count, and each line after it holds a
vertex followed by its neighbours:

```
4
0 1 2 3
1 0 2
2 0 1 3
3 0 2
```

Neighbours are taken exactly as listed; lines for the same vertex add to its
list. A missing or non-positive vertex count, a token that is not an integer,
or a vertex number out of range raises `GraphFormatError`.

`format_adjacency(adjacency)` renders lists as `i: a b ` lines.

`write_coloring(path, adjacency, coloring)` writes one `vertex : colour` line
per vertex. It raises `ColoringError` if the colouring gives two neighbours
the same colour. `find_conflict(adjacency, coloring)` returns the first such
edge `(v, u)`, or `None` if there is none; `is_proper_coloring` returns a
boolean. Both raise `ColoringError` when the colouring's length does not match
the number of vertices.