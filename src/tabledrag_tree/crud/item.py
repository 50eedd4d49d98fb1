# src/tabledrag_tree/crud/item.py
from typing import List, Optional

from sqlalchemy.orm import Session

from tabledrag_tree.models.item import ROOT_PID, Item
from tabledrag_tree.schemas.item import ItemCreate


def _limited(query, id_limit: Optional[int]):
    if id_limit is not None:
        query = query.filter(Item.id < id_limit)
    return query


def get_item(db: Session, item_id: int) -> Optional[Item]:
    return db.query(Item).filter(Item.id == item_id).first()


def list_items(db: Session) -> List[Item]:
    return db.query(Item).order_by(Item.id).all()


def get_root_items(db: Session, id_limit: Optional[int] = None) -> List[Item]:
    return get_children(db, ROOT_PID, id_limit=id_limit)


def get_children(db: Session, parent_id: int, id_limit: Optional[int] = None) -> List[Item]:
    # Ties on weight fall back to id, which is SQLite's row order for integer keys.
    query = db.query(Item).filter(Item.pid == parent_id)
    return _limited(query, id_limit).order_by(Item.weight, Item.id).all()


def create_item(db: Session, item: ItemCreate) -> Item:
    db_item = Item(**item.model_dump())
    db.add(db_item)
    db.commit()
    db.refresh(db_item)
    return db_item


def update_item(db: Session, item_id: int, weight: int, pid: int, description: str) -> Optional[Item]:
    """Write the mutable fields of one row. Returns None when the row does not exist."""
    db_item = get_item(db, item_id)
    if db_item is None:
        return None
    db_item.weight = weight
    db_item.pid = pid
    db_item.description = description
    db.commit()
    return db_item
