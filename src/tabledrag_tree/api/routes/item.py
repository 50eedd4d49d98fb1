# src/tabledrag_tree/api/routes/item.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from tabledrag_tree.api.dependencies import get_db
from tabledrag_tree.crud import item as crud_item
from tabledrag_tree.schemas.item import Item

router = APIRouter(tags=["Items"])


@router.get("/items/{item_id}", response_model=Item)
def read_item(item_id: int, db: Session = Depends(get_db)):
    db_item = crud_item.get_item(db=db, item_id=item_id)
    if db_item is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return db_item
