from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class PlannedMeal(Base):
    __tablename__ = "planned_meals"

    # "<YYYY-MM-DD>_<Meal>", e.g. "2026-01-05_Dinner"
    slot: Mapped[str] = mapped_column(String(40), primary_key=True)
    # No FK: a slot outlives its recipe and renders as "Deleted recipe".
    recipe_id: Mapped[int] = mapped_column(Integer, index=True)
