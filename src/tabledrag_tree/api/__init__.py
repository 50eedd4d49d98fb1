# src/tabledrag_tree/api/__init__.py
