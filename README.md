# parlab

Small console exercises built around classic algorithms, each in a
sequential form and a parallel-style form, with the time each run took:

- **Graph traversal** (`parlab.graph`): breadth-first and depth-first
  search over an undirected graph.
- **Sorting** (`parlab.sorting`): bubble sort, odd-even transposition
  sort, merge sort, and a merge sort that sorts its two halves on two
  worker threads.
- **Reductions** (`parlab.reduction`): minimum, maximum, sum and average
  of a list of integers, computed over chunks on a thread pool.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Commands

Every command reads whitespace-separated integers from standard input,
prints prompts as it goes, and takes no options besides `--help`. On
missing or invalid input it prints `error: ...` to standard error and
exits with status 1.

### `parlab-graph`

Reads, in order:

1. the number of vertices;
2. the number of edges;
3. the edges, as `source destination` pairs;
4. the vertex to start from.

It prints the adjacency list, then the BFS order and the DFS order, each
with its running time in milliseconds. A vertex outside the graph is
reported as an error.

```
printf '5 4\n0 1\n0 2\n1 3\n2 4\n0\n' | parlab-graph
```

### `parlab-sort`

Reads the array size and then the elements. It prints the original array
and then the result of each of the four sorts, with the time each took.

```
printf '5\n4 1 3 9 2\n' | parlab-sort
```

### `parlab-reduce`

Reads the element count and then the elements. It prints the minimum,
maximum, sum and average, each with its time. With no elements the
minimum cannot be taken, so the command reports an error.

```
printf '4\n3 8 1 6\n' | parlab-reduce
```

## Library use

```python
from parlab.graph import Graph
from parlab.sorting import format_array, merge_sort, parallel_bubble_sort
from parlab.reduction import parallel_average, parallel_max, parallel_sum

g = Graph(4)
g.add_edge(0, 1)
g.add_edge(1, 2)
g.add_edge(2, 3)
print(g.bfs(0))          # [0, 1, 2, 3]
print(g.dfs(0))
print(g.neighbors(1))    # (0, 2)
print(g.describe())

print(merge_sort([5, 2, 8, 1]))
print(parallel_bubble_sort([5, 2, 8, 1]))
print(format_array([1, 2, 5, 8], "Sorted"))

print(parallel_sum([1, 2, 3]), parallel_max([1, 2, 3]), parallel_average([1, 2, 3]))
```

- `Graph(num_vertices)` holds vertices `0 .. num_vertices - 1`;
  `add_edge`, `neighbors`, `bfs` and `dfs` raise `IndexError` for a vertex
  outside that range, and a negative vertex count raises `ValueError`.
- `bfs` and `dfs` return only the vertices reachable from the start.
  `dfs` uses an explicit stack and marks vertices when they are pushed, so
  the last-added neighbour is explored first.
- All sort functions return a new list and leave their input unchanged.
- `parallel_min`, `parallel_max` and `parallel_average` raise
  `ValueError` for an empty input; `parallel_sum` returns 0.

## What it does not do

- Graph traversal runs on a single thread; the commands do not log which
  thread handled which vertex, element or range.
- `parallel_bubble_sort` performs the odd-even phases one after another on
  a single thread; only `parallel_merge_sort` and the reductions use worker
  threads, and because of Python's global interpreter lock they are not
  expected to run faster than the sequential versions.