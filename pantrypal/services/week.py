from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Iterable, Optional
from zoneinfo import ZoneInfo

from pantrypal.services.ingredients import read_field
from pantrypal.settings import settings

MEALS = ("Breakfast", "Lunch", "Dinner")
DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
DELETED_RECIPE = "Deleted recipe"


@dataclass(frozen=True)
class WeekDay:
    date: str
    name: str


@dataclass(frozen=True)
class SlotView:
    slot: str
    meal: str
    recipe_id: Optional[int] = None
    recipe_name: Optional[str] = None


@dataclass(frozen=True)
class DayView:
    date: str
    name: str
    slots: list[SlotView] = field(default_factory=list)


def today_local() -> dt.date:
    return dt.datetime.now(ZoneInfo(settings.TZ)).date()


def week_days(today: dt.date) -> list[WeekDay]:
    """Monday..Sunday of the week containing ``today``."""
    monday = today - dt.timedelta(days=today.weekday())
    return [
        WeekDay(date=(monday + dt.timedelta(days=i)).isoformat(), name=DAY_NAMES[i])
        for i in range(7)
    ]


def slot_key(day: dt.date | str, meal: str) -> str:
    date_str = day.isoformat() if isinstance(day, dt.date) else str(day)
    return f"{date_str}_{meal}"


def parse_slot_key(slot: str) -> tuple[dt.date, str]:
    date_part, sep, meal = (slot or "").partition("_")
    if not sep or meal not in MEALS:
        raise ValueError(f"slot must look like YYYY-MM-DD_<{'|'.join(MEALS)}>")
    return dt.date.fromisoformat(date_part), meal


def build_week(today: dt.date, planned: Iterable, recipes: Iterable) -> list[DayView]:
    by_slot = {read_field(p, "slot"): read_field(p, "recipe_id") for p in planned}
    names = {read_field(r, "id"): read_field(r, "name") for r in recipes}

    days = []
    for day in week_days(today):
        slots = []
        for meal in MEALS:
            key = slot_key(day.date, meal)
            recipe_id = by_slot.get(key)
            recipe_name = None
            if recipe_id is not None:
                recipe_name = names.get(recipe_id, DELETED_RECIPE)
            slots.append(SlotView(slot=key, meal=meal, recipe_id=recipe_id, recipe_name=recipe_name))
        days.append(DayView(date=day.date, name=day.name, slots=slots))
    return days
