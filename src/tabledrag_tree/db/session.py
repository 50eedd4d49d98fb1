# src/tabledrag_tree/db/session.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from tabledrag_tree.config import settings


def make_engine(database_url: str):
    """Create an engine, allowing SQLite connections to cross threads for FastAPI."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


# ✅ Create database engine
engine = make_engine(settings.database_url)

# ✅ SessionLocal is the DB session for FastAPI dependencies
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# ✅ Base class for models
Base = declarative_base()
