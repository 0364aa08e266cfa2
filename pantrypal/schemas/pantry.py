from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


def _strip_name(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("name must not be empty")
    return v


class PantryItemCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    available: bool = True

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        return _strip_name(v)


class PantryItemUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    available: bool | None = None

    @field_validator("name")
    @classmethod
    def _name(cls, v: str | None) -> str | None:
        return _strip_name(v)


class PantryItemOut(BaseModel):
    id: int
    name: str
    available: bool
    in_shopping: bool = False

    class Config:
        from_attributes = True


class ShoppingItemCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)

    @field_validator("name")
    @classmethod
    def _name(cls, v: str) -> str:
        return _strip_name(v)


class ShoppingItemOut(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True


class ImportResult(BaseModel):
    imported: int
    skipped: int


class PantryImportIn(BaseModel):
    # One item name per line.
    text: str = Field(max_length=100_000)
