"""Classic data structures and algorithms: containers, trees, graphs, searching, sorting, and arithmetic expression tokens and evaluation."""

__version__ = "1.0.0"