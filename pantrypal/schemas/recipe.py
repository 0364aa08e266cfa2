from __future__ import annotations

import datetime as dt
from pydantic import BaseModel, Field, field_validator, model_validator

from pantrypal.schemas.pantry import ShoppingItemOut
from pantrypal.services.ingredients import parse_ingredient_block


class IngredientIn(BaseModel):
    name: str = Field(default="", max_length=200)
    qty: str = Field(default="", max_length=50)
    unit: str = Field(default="", max_length=50)

    @field_validator("name", "qty", "unit")
    @classmethod
    def _strip(cls, v: str) -> str:
        return v.strip()


class IngredientOut(BaseModel):
    name: str = ""
    qty: str = ""
    unit: str = ""

    class Config:
        from_attributes = True


class RecipeIn(BaseModel):
    name: str = Field(min_length=1, max_length=300)
    category: str = Field(default="", max_length=120)
    ingredients: list[IngredientIn] = Field(default_factory=list)
    # Editor form: one "name|qty|unit" or "2 cups flour" line per ingredient.
    ingredients_text: str | None = None
    instructions: str | list[str] = ""

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be empty")
        return v

    @field_validator("category")
    @classmethod
    def _category(cls, v: str) -> str:
        return v.strip()

    @field_validator("instructions")
    @classmethod
    def _instructions(cls, v: str | list[str]) -> str:
        if isinstance(v, list):
            return "\n\n".join(v)
        return v.strip()

    @model_validator(mode="after")
    def _parse_text(self) -> "RecipeIn":
        if self.ingredients_text is not None and not self.ingredients:
            self.ingredients = [
                IngredientIn(**i.to_dict()) for i in parse_ingredient_block(self.ingredients_text)
            ]
        self.ingredients = [i for i in self.ingredients if i.name]
        return self


class RecipeSummaryOut(BaseModel):
    id: int
    name: str
    category: str
    can_make: bool


class IngredientStatusOut(BaseModel):
    name: str
    qty: str
    unit: str
    available: bool
    matched: str | None

    class Config:
        from_attributes = True


class RecipeOut(BaseModel):
    id: int
    name: str
    category: str
    ingredients: list[IngredientOut]
    instructions: str
    created: dt.datetime

    class Config:
        from_attributes = True


class RecipeDetailOut(RecipeOut):
    can_make: bool
    ingredient_status: list[IngredientStatusOut]
    ingredients_text: str


class ShopMissingOut(BaseModel):
    added: int
    items: list[ShoppingItemOut]
