# src/tabledrag_tree/core/exceptions.py


class TreeStoreError(Exception):
    """Base class for errors raised by tree storage."""


class ItemNotFoundError(TreeStoreError):
    """Raised when an update targets an item id that is not in the store."""

    def __init__(self, item_id: int):
        self.item_id = item_id
        super().__init__(f"Item {item_id} not found")


class StorageFault(TreeStoreError):
    """Raised when the underlying storage fails to read or write."""


NotFoundError = ItemNotFoundError
