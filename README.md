# algobox

Classic algorithms and data structures written as plain, readable Python,
for learning, teaching and quick experiments. Each topic lives in its own
module and works on ordinary lists, ints and strings.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

The only runtime dependency is `cryptography`, used by `algobox.aes_gcm`.

## What is inside

| Module | Contents |
| --- | --- |
| `algobox.sorting` | `merge_sort`, `quick_sort`, `selection_sort`, `bubble_sort`, `heap_sort`, `insertion_sort`, `merge`, `is_sorted` |
| `algobox.arrays` | 0/1 `knapsack`, `fractional_knapsack` with `Item`, Kadane's `max_subarray_sum`, Moore's `find_candidate` and `majority_element`, `multiply_matrices` |
| `algobox.searching` | `binary_search`, `exponential_search`, `fibonacci_search`, `jump_search`, `linear_search` |
| `algobox.text` | `is_palindrome`, `is_anagram`, `min_steps_to_anagram`, `edit_distance`, `devowel`, `spellcheck` |
| `algobox.number_theory` | `gcd`, `factorial`, `factorial_recursive`, `fibonacci`, `sum_natural`, `is_prime`, `primes_up_to`, `is_perfect`, `is_harshad`, `is_armstrong`, `reverse_number`, `is_palindrome_number`, `is_buzz` |
| `algobox.backtracking` | N-queens (`n_queens_solutions`, `first_n_queens`, `count_n_queens`, `render_queens`), `solve_sudoku`, `hanoi_moves` yielding `Move` |
| `algobox.linked_list` | `LinkedList`; `ListNode` helpers `from_values`, `to_list`, `reverse_list`, `swap_pairs`, `has_cycle`; `MultilevelNode` and `flatten` |
| `algobox.binary_tree` | `TreeNode`, `preorder`, `inorder`, `postorder`, `height`, `is_balanced`, `is_symmetric`, `max_width`, `bst_search`, `count_in_range` |
| `algobox.containers` | bounded `CircularQueue` and `Stack`, unbounded `Queue`, with `ContainerFullError` and `ContainerEmptyError` |
| `algobox.disjoint_set` | `DisjointSet` with path compression and union by rank |
| `algobox.shortest_paths` | `dijkstra_matrix`, `dijkstra`, `bellman_ford` over `Edge` values, `floyd_warshall`, `NegativeCycleError` |
| `algobox.graph_traversal` | undirected `Graph` with `add_edge`, `neighbors`, `bfs` and `dfs`; `prim_mst` |
| `algobox.maze` | `Maze.generate`, `Maze.solve`, `Maze.render`, and a command |
| `algobox.tictactoe` | two-player `Board` and a command |
| `algobox.aes_gcm` | password-based AES-256-GCM: `derive_key`, `encrypt`, `decrypt`, `Sealed`, and a command |

## Conventions

- Sorting functions accept any iterable and return a new ascending list; the
  input is left alone.
- Search functions return the index of a matching element, or `-1`. All but
  `linear_search` expect ascending input.
- `spellcheck` returns an empty string for a query with no match. A match is
  exact first, then case-insensitive, then case- and vowel-insensitive.
- In the shortest-path functions an unreachable vertex has distance
  `math.inf`. In the weight matrices given to `dijkstra_matrix` and `prim_mst`
  a weight of 0 means "no edge". `floyd_warshall` uses `math.inf` to mean
  "no edge".
- `bellman_ford` raises `NegativeCycleError` when a negative-weight cycle can
  be reached from the source. `prim_mst` raises `ValueError` for a
  disconnected graph.
- `CircularQueue` (default capacity 5) and `Stack` (default capacity 100)
  raise `ContainerFullError` when full. All containers raise
  `ContainerEmptyError` when taking from an empty container.
- `solve_sudoku` returns a new solved 9x9 grid, or `None` when there is no
  solution. Empty cells are written as 0.
- `decrypt` raises `ValueError` if the password is wrong or the data was
  altered.

## Examples

```python
from algobox.sorting import merge_sort
from algobox.arrays import knapsack, max_subarray_sum
from algobox.number_theory import gcd, primes_up_to
from algobox.backtracking import count_n_queens, hanoi_moves
from algobox.disjoint_set import DisjointSet

merge_sort([64, 34, 25, 12, 22, 11, 90, 5])
# [5, 11, 12, 22, 25, 34, 64, 90]

knapsack(50, [10, 20, 30], [60, 100, 120])
# 220

max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])
# 6

gcd(12, 18)
# 6

primes_up_to(20)
# [2, 3, 5, 7, 11, 13, 17, 19]

count_n_queens(8)
# 92

for move in hanoi_moves(2):
    print(move)
# Move disk 1 from A to B
# Move disk 2 from A to C
# Move disk 1 from B to C

sets = DisjointSet(5)
sets.union(0, 1)
sets.connected(0, 1)
# True
```

## Command-line programs

Three modules can be run as commands.

`algobox-maze` generates a random maze and prints it. It then prints the maze
again with the path from the entrance (top row, second column) to the exit
(bottom row, second-to-last column) marked with `.`. Odd sizes give a maze
whose exit is always reachable. `--seed` makes the maze reproducible. If the
size is left out, the command asks for it.

```
algobox-maze 11 21
algobox-maze 11 21 --seed 7
```

`algobox-tictactoe` runs a game for two people at the same terminal. Cells are
numbered 1 to 9 and the board shows each free cell's number. The command asks
whether to play again after each game.

```
algobox-tictactoe
```

`algobox-aes-gcm` encrypts a message with a key derived from a password
(PBKDF2-HMAC-SHA256, 200,000 iterations, random 16-byte salt, random 12-byte
IV). It prints the salt, IV, ciphertext and tag as hex, then decrypts the
result to show the round trip.

```
algobox-aes-gcm "attack at dawn" "password"
```

## What it does not do

Everything is in memory. No module saves or loads data, and the containers
and `LinkedList` do not persist between runs. The only interactive programs
are the three commands above. There are no menu-driven programs for keeping
records or task lists.