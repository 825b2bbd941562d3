"""Graph traversal, sorting and reduction exercises in sequential and parallel-style variants."""

__version__ = "0.1.0"
__all__ = ["graph", "sorting", "reduction"]