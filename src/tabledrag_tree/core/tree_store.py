# src/tabledrag_tree/core/tree_store.py

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tabledrag_tree.core.exceptions import ItemNotFoundError, StorageFault
from tabledrag_tree.crud import item as crud_item
from tabledrag_tree.models.item import Item
from tabledrag_tree.schemas.item import ItemEdit


class TreeStore(ABC):
    """
    Abstract base class for the flat item table a tree is built from.

    Implementations return rows ordered by ascending weight and raise
    ``ItemNotFoundError`` or ``StorageFault`` from ``update_item``.
    """

    @abstractmethod
    def fetch_root_items(self) -> Sequence[Item]:
        """Items with no parent, lightest first."""
        pass

    @abstractmethod
    def fetch_children(self, parent_id: int) -> Sequence[Item]:
        """Items whose parent is ``parent_id``, lightest first."""
        pass

    @abstractmethod
    def update_item(self, item_id: int, fields: ItemEdit) -> Item:
        """Persist weight, parent and description for a single item."""
        pass


class SqlAlchemyTreeStore(TreeStore):
    """TreeStore over the ``tabledrag_items`` table.

    Every ``update_item`` call is committed on its own, so a batch of
    updates is not atomic.
    """

    def __init__(self, db: Session, id_limit: Optional[int] = None):
        self.db = db
        self.id_limit = id_limit

    def fetch_root_items(self) -> List[Item]:
        try:
            return crud_item.get_root_items(self.db, id_limit=self.id_limit)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageFault(f"Failed to read root items: {e}") from e

    def fetch_children(self, parent_id: int) -> List[Item]:
        try:
            return crud_item.get_children(self.db, parent_id, id_limit=self.id_limit)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageFault(f"Failed to read children of item {parent_id}: {e}") from e

    def update_item(self, item_id: int, fields: ItemEdit) -> Item:
        try:
            db_item = crud_item.update_item(
                self.db,
                item_id,
                weight=fields.weight,
                pid=fields.pid,
                description=fields.description,
            )
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageFault(f"Failed to update item {item_id}: {e}") from e
        if db_item is None:
            raise ItemNotFoundError(item_id)
        return db_item
