# src/tabledrag_tree/models/item.py
from sqlalchemy import CheckConstraint, Column, Integer, String, Text

from tabledrag_tree.db.session import Base

ROOT_PID = 0


class Item(Base):
    __tablename__ = "tabledrag_items"
    __table_args__ = (CheckConstraint("id > 0", name="ck_tabledrag_items_id_positive"),)

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(32), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    weight = Column(Integer, nullable=False, default=0, index=True)
    pid = Column(Integer, nullable=False, default=ROOT_PID, index=True)

    def __repr__(self):
        return f"<Item id={self.id} pid={self.pid} weight={self.weight} name={self.name!r}>"
