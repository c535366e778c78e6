# searchlab

Classic artificial-intelligence algorithms, each usable as a library function
and as a small command:

- **Informed search**: A* and greedy best-first search for the 8-puzzle
  (`searchlab.puzzle8`) and for route finding on a grid of free (0) and
  blocked (1) cells (`searchlab.routes`).
- **Uninformed search**: breadth-first and depth-first traversal of an
  undirected graph (`searchlab.traversal`), the missionaries-and-cannibals
  river crossing (`searchlab.missionaries`) and the 4 L / 3 L water-jug
  puzzle (`searchlab.waterjug`).
- **Constraint satisfaction**: N-queens (`searchlab.nqueens`), the
  SEND + MORE = MONEY cryptarithm (`searchlab.cryptarithm`), graph colouring
  (`searchlab.graph_coloring`) and Sudoku (`searchlab.sudoku`).
- **Games**: tic-tac-toe against a rule-based player that detects wins on a
  magic square (`searchlab.magic_square`), against full minimax
  (`searchlab.minimax`) and against alpha-beta search (`searchlab.alphabeta`).

Only the standard library is used; Python 3.10 or later is required.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

8-puzzle: boards are 3 × 3 with 0 for the blank. `solve_astar` and
`solve_best_first` return a `SearchResult` whose `trace` lists the states
taken off the open list, and whose `solved`, `explored`, `moves` and `path`
describe the outcome. Each `PuzzleState` has `board`, `depth`, `heuristic`,
`total_cost`, `move`, `parent`, and the methods `key()`, `format()` and
`path()`.

```python
from searchlab.puzzle8 import parse_board, is_solvable, solve_astar

initial = parse_board("1 2 3 4 0 6 7 5 8")
goal = parse_board("1 2 3 4 5 6 7 8 0")
if is_solvable(initial):
    result = solve_astar(initial, goal)
    print(result.moves, [state.move for state in result.path])
```

Routes: `astar_path` and `best_first_path` return the list of `(row, col)`
points from start to goal, or an empty list when there is no route.

```python
from searchlab.routes import ASTAR_GRID, astar_path

path = astar_path(ASTAR_GRID, (0, 0), (4, 4))
```

Graph traversal over adjacency lists for nodes `0..node_count`:

```python
from searchlab.traversal import build_adjacency, bfs, dfs

adjacency = build_adjacency(4, [(1, 2), (1, 3), (3, 4)])
print(bfs(adjacency, 1), dfs(adjacency, 1))
```

River crossing and water jugs:

```python
import random

from searchlab.missionaries import RiverCrossing
from searchlab.waterjug import bfs_trace, dfs_path

crossing = RiverCrossing(3, 3, 2)
for state in crossing.solve_bfs():
    print(state)

print(bfs_trace())                # states in the order BFS visits them
print(dfs_path(random.Random(1))) # a path found with shuffled move order
```

Constraint satisfaction:

```python
from searchlab.nqueens import solve_nqueens, format_board
from searchlab.cryptarithm import send_more_money_solutions
from searchlab.graph_coloring import color_graph
from searchlab.sudoku import PUZZLE, solve_sudoku

print(format_board(next(solve_nqueens(8))))
print(list(send_more_money_solutions()))
print(color_graph([[0, 1, 1], [1, 0, 1], [1, 1, 0]], 3))   # [1, 2, 3]
print(solve_sudoku(PUZZLE))
```

`solve_nqueens` yields every placement as a tuple of column indices, one per
row. `color_graph` returns `None` when the colours do not suffice;
`solve_sudoku` raises `ValueError` when the board is malformed or unsolvable.

Tic-tac-toe:

```python
from searchlab.alphabeta import find_best_move       # AI plays "O"
from searchlab.minimax import best_move              # returns (row, col, score)
from searchlab.magic_square import X, O, computer_move, check_win
```

## Commands

| Command                    | What it does                                                        |
|----------------------------|---------------------------------------------------------------------|
| `searchlab-puzzle8`        | Reads an initial and a goal board, prints every explored state and the solution; `--method astar` (default) or `--method best-first` |
| `searchlab-routes`         | Prints a route across a built-in grid; `--method astar` (default) or `--method best-first` |
| `searchlab-traversal`      | Reads node and edge counts, the edges and a start node, prints the traversal; `--method bfs` (default) or `--method dfs` |
| `searchlab-missionaries`   | Asks for missionaries, cannibals and boat capacity, prints a solution; `--method bfs` (default) or `--method dfs` |
| `searchlab-waterjug`       | Solves the 4 L / 3 L puzzle; `--method bfs` (default) or `--method dfs`, with `--seed` for the shuffled move order |
| `searchlab-nqueens`        | Asks for N and whether to print one or all solutions                |
| `searchlab-cryptarithm`    | Prints every solution of SEND + MORE = MONEY                        |
| `searchlab-graph-coloring` | Reads a vertex count, an adjacency matrix and a colour count        |
| `searchlab-sudoku`         | Solves a built-in puzzle                                            |
| `searchlab-magic-square`   | Play tic-tac-toe against the rule-based player (cells 1-9)          |
| `searchlab-minimax`        | Play tic-tac-toe against the minimax player (row and column 0-2)    |
| `searchlab-alphabeta`      | Play tic-tac-toe as X against the alpha-beta player (blocks 0-8)    |

For example:

```
searchlab-nqueens
searchlab-puzzle8 --method best-first
```

## Limitations

- `searchlab-routes` and `searchlab-sudoku` only work on their built-in grid
  and puzzle; to search your own, call the library functions.
- `searchlab-minimax` asks for a search depth but does not use it: the search
  always runs to the end of the game.
- The games are played on the terminal only; there is no graphical board and
  nothing is saved between runs.