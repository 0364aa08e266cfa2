from __future__ import annotations

from pydantic import BaseModel, Field


class PlanMealIn(BaseModel):
    recipe_id: int = Field(ge=1)


class PlannedMealOut(BaseModel):
    slot: str
    recipe_id: int

    class Config:
        from_attributes = True


class SlotOut(BaseModel):
    slot: str
    meal: str
    recipe_id: int | None
    recipe_name: str | None

    class Config:
        from_attributes = True


class DayOut(BaseModel):
    date: str
    name: str
    slots: list[SlotOut]

    class Config:
        from_attributes = True


class WeekOut(BaseModel):
    week_start: str
    days: list[DayOut]


class PickerEntryOut(BaseModel):
    id: int
    name: str
    category: str
    can_make: bool
