"""Undirected graphs with breadth-first and depth-first traversal."""

from __future__ import annotations

import argparse
import sys
import time
from collections import deque
from collections.abc import Iterator
from typing import TextIO


class Graph:
    """An undirected graph over vertices ``0 .. num_vertices - 1``."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError(f"number of vertices must not be negative: {num_vertices}")
        self.num_vertices = num_vertices
        self._adjacency: list[list[int]] = [[] for _ in range(num_vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.num_vertices:
            raise IndexError(
                f"vertex {vertex} out of range for graph with {self.num_vertices} vertices"
            )

    def add_edge(self, src: int, dest: int) -> None:
        """Connect ``src`` and ``dest`` in both directions."""
        self._check(src)
        self._check(dest)
        self._adjacency[src].append(dest)
        self._adjacency[dest].append(src)

    def neighbors(self, vertex: int) -> tuple[int, ...]:
        """Return the neighbours of ``vertex`` in the order their edges were added."""
        self._check(vertex)
        return tuple(self._adjacency[vertex])

    def describe(self) -> str:
        """Return the adjacency list as printable text."""
        lines = ["Graph:"]
        for vertex, adjacent in enumerate(self._adjacency):
            lines.append(f"Vertex {vertex} -> " + "".join(f"{n} " for n in adjacent))
        return "\n".join(lines) + "\n"

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        visited = {start}
        queue = deque([start])
        order: list[int] = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbor in self._adjacency[current]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        return order

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in stack-based depth-first order.

        A vertex is marked visited when pushed, so the most recently pushed
        neighbour is explored first.
        """
        self._check(start)
        visited = {start}
        stack = [start]
        order: list[int] = []
        while stack:
            current = stack.pop()
            order.append(current)
            for neighbor in self._adjacency[current]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append(neighbor)
        return order


def _tokens(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _next_int(tokens: Iterator[int], what: str) -> int:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"missing input: {what}") from None


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def main(argv: list[str] | None = None) -> int:
    """Read a graph from standard input and print its BFS and DFS orders."""
    parser = argparse.ArgumentParser(
        description="Build an undirected graph and traverse it breadth- and depth-first."
    )
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    try:
        _prompt("Enter the number of vertices in the graph: ")
        graph = Graph(_next_int(tokens, "number of vertices"))

        _prompt("Enter the number of edges in the graph: ")
        num_edges = _next_int(tokens, "number of edges")
        print("Enter the edges (source destination):")
        for _ in range(num_edges):
            src = _next_int(tokens, "edge source")
            dest = _next_int(tokens, "edge destination")
            graph.add_edge(src, dest)

        print(graph.describe(), end="")

        _prompt("Enter the starting vertex for BFS and DFS: ")
        start = _next_int(tokens, "starting vertex")

        for title, short, traverse in (
            ("Breadth First Search", "BFS", graph.bfs),
            ("Depth First Search", "DFS", graph.dfs),
        ):
            print(f"{title} ({short}): ", end="")
            began = time.perf_counter()
            order = traverse(start)
            elapsed = (time.perf_counter() - began) * 1000
            print(f"\n{title} ({short}) Order: " + "".join(f"{v} " for v in order))
            print(f"Parallel {short} completed in {elapsed:g} milliseconds")
            print()
    except (ValueError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())