# conftest.py
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tabledrag_tree.core.tree_store import SqlAlchemyTreeStore
from tabledrag_tree.db.session import Base
from tabledrag_tree.models.item import Item


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests against fakes or in-memory SQLite")
    config.addinivalue_line("markers", "integration: tests that go through the HTTP API")


@pytest.fixture
def engine():
    """A fresh in-memory SQLite database shared across connections."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def add_items(db):
    """Insert rows given as (id, pid, weight) or (id, pid, weight, name)."""

    def _add(*rows):
        for row in rows:
            item_id, pid, weight = row[:3]
            name = row[3] if len(row) > 3 else f"Item {item_id}"
            db.add(Item(id=item_id, pid=pid, weight=weight, name=name, description=f"{name} description"))
        db.commit()

    return _add


@pytest.fixture
def store(db):
    return SqlAlchemyTreeStore(db)


@pytest.fixture
def example_tree(add_items):
    """Roots A(w=1), B(w=0); B has children C(w=0), D(w=1)."""
    add_items(
        (1, 0, 1, "A"),
        (2, 0, 0, "B"),
        (3, 2, 0, "C"),
        (4, 2, 1, "D"),
    )
