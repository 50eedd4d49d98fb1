# src/tabledrag_tree/db/init_db.py
from importlib import resources
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from tabledrag_tree.core.csv_parser import CSVParser
from tabledrag_tree.crud import item as crud_item
from tabledrag_tree.db.session import Base
from tabledrag_tree.models import item as item_model  # noqa: F401  registers the table
from tabledrag_tree.schemas.item import ItemCreate
from tabledrag_tree.utils.logger import log_info


def init_db(engine):
    """Creates all tables that do not exist yet."""
    Base.metadata.create_all(bind=engine)
    log_info("🗄️ Database tables are ready.")


def seed_items(db: Session, rows: Iterable[dict]) -> int:
    """Inserts rows whose id is not already stored. Returns how many were added."""
    existing = {item.id for item in crud_item.list_items(db)}
    added = 0
    for row in rows:
        if row["id"] in existing:
            continue
        crud_item.create_item(db, ItemCreate(**row))
        existing.add(row["id"])
        added += 1
    log_info(f"🌱 Seeded {added} item(s).")
    return added


def load_items_csv(db: Session, csv_path: Optional[str] = None) -> int:
    """Seeds the table from a CSV file, or from the bundled demo rows."""
    if csv_path is None:
        with resources.files("tabledrag_tree.data").joinpath("demo_items.csv").open("r") as f:
            data = CSVParser.parse_csv(f)
    else:
        data = CSVParser.parse_csv(csv_path)
    return seed_items(db, CSVParser.to_records(data))
