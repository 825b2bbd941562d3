"""Chunked parallel reductions: minimum, maximum, sum and average."""

from __future__ import annotations

import argparse
import math
import os
import sys
import time
from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from typing import TextIO


def _reduce(values: list[int], operation: Callable[[list[int]], int]) -> int:
    workers = min(os.cpu_count() or 1, len(values))
    size = math.ceil(len(values) / workers)
    chunks = [values[i : i + size] for i in range(0, len(values), size)]
    with ThreadPoolExecutor(max_workers=len(chunks)) as pool:
        partials = list(pool.map(operation, chunks))
    return operation(partials)


def _nonempty(values: Iterable[int], what: str) -> list[int]:
    data = list(values)
    if not data:
        raise ValueError(f"{what} of an empty sequence")
    return data


def parallel_min(values: Iterable[int]) -> int:
    """Return the smallest value; raise ValueError when there is none."""
    return _reduce(_nonempty(values, "minimum"), min)


def parallel_max(values: Iterable[int]) -> int:
    """Return the largest value; raise ValueError when there is none."""
    return _reduce(_nonempty(values, "maximum"), max)


def parallel_sum(values: Iterable[int]) -> int:
    """Return the sum of the values, 0 for none."""
    data = list(values)
    return _reduce(data, sum) if data else 0


def parallel_average(values: Iterable[int]) -> float:
    """Return the arithmetic mean; raise ValueError when there are no values."""
    data = _nonempty(values, "average")
    return parallel_sum(data) / len(data)


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
    """Read integers from standard input and print their reductions."""
    parser = argparse.ArgumentParser(
        description="Compute minimum, maximum, sum and average in parallel."
    )
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    try:
        print("Enter number of elements: ", end="", flush=True)
        n = _next_int(tokens, "number of elements")
        if n < 0:
            raise ValueError(f"number of elements must not be negative: {n}")
        print(f"Enter {n} elements: ", end="", flush=True)
        values = [_next_int(tokens, f"element {i + 1}") for i in range(n)]

        reductions: list[tuple[str, str, Callable[[list[int]], float]]] = [
            ("Minimum", "Minimum value", parallel_min),
            ("Maximum", "Maximum value", parallel_max),
            ("Sum", "Sum", parallel_sum),
            ("Average", "Average", parallel_average),
        ]
        print()
        for title, label, reduction in reductions:
            print(f"\n--- Parallel Execution for {title} ---")
            began = time.perf_counter()
            result = reduction(values)
            elapsed = (time.perf_counter() - began) * 1000
            shown = f"{result:g}" if isinstance(result, float) else str(result)
            print(f"{label}: {shown}")
            print(f"Time taken: {elapsed:g} milliseconds")
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())