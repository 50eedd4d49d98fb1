# src/tabledrag_tree/core/reorder_committer.py

from typing import Iterable, Iterator, Mapping, Tuple, Union

from tabledrag_tree.core.exceptions import TreeStoreError
from tabledrag_tree.core.tree_store import TreeStore
from tabledrag_tree.schemas.item import ItemEdit, ItemUpdate
from tabledrag_tree.utils.logger import log_debug, log_error, log_info

Edits = Union[Mapping[int, ItemEdit], Iterable[ItemUpdate]]


def _iter_edits(edits: Edits) -> Iterator[Tuple[int, ItemEdit]]:
    if isinstance(edits, Mapping):
        yield from edits.items()
        return
    for edit in edits:
        yield edit.id, edit


class ReorderCommitter:
    """Writes submitted weight/parent/description edits back to the store."""

    def __init__(self, store: TreeStore):
        self.store = store

    def commit(self, edits: Edits) -> int:
        """
        Apply one update per edit, in the order given.

        Stops at the first failing update and re-raises it. Updates applied
        before the failure are kept. No check is made that the edits still
        describe a valid tree.

        Returns the number of items updated.
        """
        applied = 0
        for item_id, fields in _iter_edits(edits):
            try:
                self.store.update_item(item_id, fields)
            except TreeStoreError as e:
                log_error(f"❌ Commit stopped at item {item_id} after {applied} update(s): {e}")
                raise
            log_debug(f"💾 Item {item_id}: weight={fields.weight} pid={fields.pid}")
            applied += 1

        log_info(f"✅ Saved {applied} item(s).")
        return applied
