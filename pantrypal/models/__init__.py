from .base import Base
from .pantry import PantryItem, ShoppingItem
from .planner import PlannedMeal
from .recipe import Recipe

__all__ = [
    "Base",
    "PantryItem",
    "ShoppingItem",
    "Recipe",
    "PlannedMeal",
]
