from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class PantryItem(Base):
    __tablename__ = "pantry_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Uniqueness is case/whitespace-insensitive, so it is checked in crud, not here.
    name: Mapped[str] = mapped_column(String(200))
    # False means "known but out of stock".
    available: Mapped[bool] = mapped_column(Boolean, default=True, index=True)


class ShoppingItem(Base):
    __tablename__ = "shopping_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200))
