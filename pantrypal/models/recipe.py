import datetime as dt

from sqlalchemy import JSON, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Recipe(Base):
    __tablename__ = "recipes"
    # Ids of deleted recipes are never handed out again; planned meals rely on it.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(300))
    category: Mapped[str] = mapped_column(String(120), default="")
    # Ordered list of {"name", "qty", "unit"}; qty/unit are free text for display only.
    ingredients: Mapped[list] = mapped_column(JSON, default=list)
    instructions: Mapped[str] = mapped_column(Text, default="")

    created: Mapped[dt.datetime] = mapped_column(DateTime, default=lambda: dt.datetime.utcnow())
