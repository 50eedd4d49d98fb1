# src/tabledrag_tree/schemas/item.py
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class ItemBase(BaseModel):
    name: str
    description: str = ""
    weight: int = 0
    pid: int = Field(default=0, ge=0)


class ItemCreate(ItemBase):
    # 0 is the parent id of roots, so stored ids start at 1
    id: int = Field(ge=1)


class Item(ItemBase):
    model_config = ConfigDict(from_attributes=True)

    id: int


class ItemEdit(BaseModel):
    """The three fields a drag-and-drop submission may change on a row."""

    weight: int
    pid: int = Field(ge=0)
    description: str = Field(min_length=1)


class ItemUpdate(ItemEdit):
    id: int


class TreeRow(Item):
    depth: int = Field(ge=0)


class TreeSubmission(BaseModel):
    """Submitted table state, keyed by item id in table order."""

    rows: Dict[int, ItemEdit]
