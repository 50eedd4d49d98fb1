# src/tabledrag_tree/core/tree_builder.py

from typing import List, NamedTuple

from tabledrag_tree.core.tree_store import TreeStore
from tabledrag_tree.models.item import Item
from tabledrag_tree.utils.logger import log_debug, log_info


class TreeEntry(NamedTuple):
    item: Item
    depth: int


class TreeBuilder:
    """
    Orders a flat item table into a depth-annotated list.

    Children directly follow their parent and siblings are sorted by
    weight, so the list can be rendered top to bottom with indentation
    taken from each entry's depth. Items that cannot be reached from a
    root (orphans, cycles) are left out, and an item reachable twice is
    only listed the first time.
    """

    def __init__(self, store: TreeStore):
        self.store = store

    def build_tree(self) -> List[TreeEntry]:
        """Walk the hierarchy depth first and return it as ordered entries."""
        log_info("🌳 Building item tree...")
        tree: List[TreeEntry] = []
        visited = set()

        # Frames are pushed in reverse so the lightest sibling is popped first.
        stack = [(root, 0) for root in reversed(list(self.store.fetch_root_items()))]
        while stack:
            item, depth = stack.pop()
            if item.id in visited:
                continue
            visited.add(item.id)
            tree.append(TreeEntry(item, depth))

            children = self.store.fetch_children(item.id)
            log_debug(f"🔍 Item {item.id} has {len(children)} child row(s)")
            stack.extend((child, depth + 1) for child in reversed(list(children)))

        log_info(f"✅ Tree built with {len(tree)} item(s).")
        return tree
