# src/tabledrag_tree/api/routes/tree.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from tabledrag_tree.api.dependencies import get_tree_store
from tabledrag_tree.core.exceptions import ItemNotFoundError, StorageFault
from tabledrag_tree.core.reorder_committer import ReorderCommitter
from tabledrag_tree.core.tree_builder import TreeBuilder
from tabledrag_tree.core.tree_store import TreeStore
from tabledrag_tree.schemas.item import Item, TreeRow, TreeSubmission
from tabledrag_tree.utils.logger import log_info

router = APIRouter(prefix="/tree", tags=["Tree"])


@router.get("", response_model=List[TreeRow])
def read_tree(store: TreeStore = Depends(get_tree_store)):
    """Rows in display order, each with the depth to indent it by."""
    try:
        entries = TreeBuilder(store).build_tree()
    except StorageFault as e:
        raise HTTPException(status_code=503, detail=str(e))
    return [TreeRow(**Item.model_validate(item).model_dump(), depth=depth) for item, depth in entries]


@router.put("")
def save_tree(submission: TreeSubmission, store: TreeStore = Depends(get_tree_store)):
    """Save the weight, parent and description of every submitted row."""
    log_info(f"🔄 Saving {len(submission.rows)} submitted row(s)")
    try:
        saved = ReorderCommitter(store).commit(submission.rows)
    except ItemNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StorageFault as e:
        raise HTTPException(status_code=503, detail=str(e))
    return {"message": f"✅ Saved {saved} item(s).", "saved": saved}
