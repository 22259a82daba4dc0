"""Data-structure drills: a bounded stack and queue, binary trees, recursive arithmetic and exercises."""

__version__ = "0.1.0"