from __future__ import annotations

from typing import Iterable

from pantrypal.services.ingredients import read_field
from pantrypal.services.matching import normalize_text

PANTRY_SORTS = ("alpha", "available", "none")


def filter_pantry(items: Iterable, search: str = "", sort: str = "alpha") -> list:
    """Pantry list view: substring search on name, then sort.

    ``alpha`` orders by name; ``available`` puts in-stock items first, each
    group by name; ``none`` keeps store order.
    """
    term = normalize_text(search)
    out = [i for i in items if not term or term in normalize_text(read_field(i, "name"))]
    if sort == "alpha":
        out.sort(key=lambda i: normalize_text(read_field(i, "name")))
    elif sort == "available":
        out.sort(key=lambda i: (not read_field(i, "available", False), normalize_text(read_field(i, "name"))))
    return out


def queued_names(shopping: Iterable) -> set[str]:
    return {normalize_text(read_field(s, "name")) for s in shopping}
