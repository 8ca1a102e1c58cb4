"""Classic algorithm drills as small, plain Python functions."""

__version__ = "0.1.0"
__all__ = ["greedy", "dp", "graph", "arrays", "stacks", "printer_queue", "strings", "tree"]