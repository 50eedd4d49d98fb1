# src/tabledrag_tree/__init__.py
"""Weight-ordered parent/child item trees for draggable tables."""

__version__ = "0.1.0"
