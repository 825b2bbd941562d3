"""Bubble sort, odd-even transposition sort and merge sort."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable, Iterable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any, TextIO


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``values`` using sequential bubble sort."""
    result = list(values)
    n = len(result)
    for end in range(n - 1, 0, -1):
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def parallel_bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy of ``values`` using odd-even transposition sort.

    Each of the ``n`` phases compares disjoint neighbouring pairs, starting at
    index 0 on even phases and index 1 on odd phases.
    """
    result = list(values)
    n = len(result)
    for phase in range(n):
        start = phase % 2
        pairs = [
            (b, a) if a > b else (a, b)
            for a, b in zip(result[start::2], result[start + 1 :: 2])
        ]
        if not pairs:
            continue
        stop = start + 2 * len(pairs)
        result[start:stop:2] = [low for low, _ in pairs]
        result[start + 1 : stop : 2] = [high for _, high in pairs]
    return result


def _merge(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sort(items: list[Any]) -> list[Any]:
    if len(items) < 2:
        return items
    middle = (len(items) + 1) // 2
    return _merge(_merge_sort(items[:middle]), _merge_sort(items[middle:]))


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a stably sorted copy of ``values`` using sequential merge sort."""
    return _merge_sort(list(values))


def parallel_merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a stably sorted copy of ``values``, sorting the two halves concurrently."""
    items = list(values)
    if len(items) < 2:
        return items
    middle = (len(items) + 1) // 2
    with ThreadPoolExecutor(max_workers=2) as pool:
        left = pool.submit(_merge_sort, items[:middle])
        right = pool.submit(_merge_sort, items[middle:])
        return _merge(left.result(), right.result())


def format_array(values: Iterable[Any], label: str) -> str:
    """Format ``values`` as ``label: v1 v2 ...`` with a trailing space per value."""
    return f"{label}: " + "".join(f"{v} " for v in values)


def _tokens(stream: TextIO) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _next_int(tokens: Iterator[int], what: str) -> int:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"missing input: {what}") from None


def main(argv: list[str] | None = None) -> int:
    """Read integers from standard input and sort them with every algorithm."""
    parser = argparse.ArgumentParser(
        description="Compare sequential and parallel bubble and merge sorts."
    )
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    try:
        print("Enter the size of the array: ", end="", flush=True)
        n = _next_int(tokens, "array size")
        if n < 0:
            raise ValueError(f"array size must not be negative: {n}")
        original = []
        for position in range(1, n + 1):
            print(f"Enter element {position}: ", end="", flush=True)
            original.append(_next_int(tokens, f"element {position}"))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print("\nOriginal array: " + "".join(f"{v} " for v in original) + "\n")

    algorithms: list[tuple[str, Callable[[Iterable[Any]], list[Any]]]] = [
        ("Sequential Bubble Sorted array", bubble_sort),
        ("Parallel Bubble Sorted array", parallel_bubble_sort),
        ("Sequential Merge Sorted array", merge_sort),
        ("Parallel Merge Sorted array", parallel_merge_sort),
    ]
    for label, algorithm in algorithms:
        if algorithm is parallel_merge_sort:
            print("Starting parallel merge sort...")
        began = time.perf_counter()
        result = algorithm(original)
        elapsed = (time.perf_counter() - began) * 1000
        print(format_array(result, label))
        print(f"Time taken: {elapsed:g} milliseconds\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())