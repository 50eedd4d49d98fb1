# src/tabledrag_tree/api/dependencies.py
from fastapi import Depends
from sqlalchemy.orm import Session

from tabledrag_tree.config import settings
from tabledrag_tree.core.tree_store import SqlAlchemyTreeStore, TreeStore
from tabledrag_tree.db.session import SessionLocal


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_tree_store(db: Session = Depends(get_db)) -> TreeStore:
    return SqlAlchemyTreeStore(db, id_limit=settings.item_id_limit)
