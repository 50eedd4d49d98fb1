# src/tabledrag_tree/core/__init__.py
from .exceptions import ItemNotFoundError, NotFoundError, StorageFault, TreeStoreError
from .reorder_committer import ReorderCommitter
from .tree_builder import TreeBuilder, TreeEntry
from .tree_store import SqlAlchemyTreeStore, TreeStore

__all__ = [
    "ItemNotFoundError",
    "NotFoundError",
    "StorageFault",
    "TreeStoreError",
    "ReorderCommitter",
    "TreeBuilder",
    "TreeEntry",
    "SqlAlchemyTreeStore",
    "TreeStore",
]
