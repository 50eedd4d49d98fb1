import pytest
from sqlalchemy import text

from tabledrag_tree.core.exceptions import ItemNotFoundError, StorageFault
from tabledrag_tree.core.tree_store import SqlAlchemyTreeStore, TreeStore
from tabledrag_tree.schemas.item import ItemEdit


@pytest.mark.unit
def test_tree_store_is_abstract():
    with pytest.raises(TypeError):
        TreeStore()


@pytest.mark.unit
def test_fetch_root_items_orders_by_weight(store, example_tree):
    assert [item.name for item in store.fetch_root_items()] == ["B", "A"]


@pytest.mark.unit
def test_fetch_children_orders_by_weight(store, example_tree):
    assert [item.name for item in store.fetch_children(2)] == ["C", "D"]
    assert store.fetch_children(3) == []


@pytest.mark.unit
def test_id_limit_is_exclusive(db, add_items):
    add_items((9, 0, 0), (10, 0, 0), (11, 0, 0))
    assert [item.id for item in SqlAlchemyTreeStore(db, id_limit=11).fetch_root_items()] == [9, 10]
    assert [item.id for item in SqlAlchemyTreeStore(db).fetch_root_items()] == [9, 10, 11]


@pytest.mark.unit
def test_update_item_persists_fields(session_factory, store, example_tree):
    store.update_item(3, ItemEdit(weight=-5, pid=1, description="moved"))

    other = session_factory()
    try:
        row = other.execute(text("SELECT pid, weight, description FROM tabledrag_items WHERE id = 3")).one()
    finally:
        other.close()
    assert tuple(row) == (1, -5, "moved")


@pytest.mark.unit
def test_update_missing_item_raises(store, example_tree):
    with pytest.raises(ItemNotFoundError, match="Item 42 not found"):
        store.update_item(42, ItemEdit(weight=0, pid=0, description="nope"))


@pytest.mark.unit
@pytest.mark.parametrize(
    "read",
    [
        lambda store: store.fetch_root_items(),
        lambda store: store.fetch_children(1),
    ],
)
def test_read_failure_becomes_storage_fault(db, store, read):
    db.execute(text("DROP TABLE tabledrag_items"))
    with pytest.raises(StorageFault):
        read(store)


@pytest.mark.unit
def test_write_failure_becomes_storage_fault(db, store):
    db.execute(text("DROP TABLE tabledrag_items"))
    with pytest.raises(StorageFault):
        store.update_item(1, ItemEdit(weight=0, pid=0, description="d"))
