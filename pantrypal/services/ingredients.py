from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import asdict, dataclass

QTY_PREFIX_RE = re.compile(r"^([\d/.]+)\s*([a-zA-Z]+)?\s+(.*)$")


def read_field(obj, key: str, default=None):
    """Read ``key`` from a mapping, ORM row or pydantic model alike."""
    if obj is None:
        return default
    if isinstance(obj, Mapping):
        return obj.get(key, default)
    return getattr(obj, key, default)


@dataclass(frozen=True)
class Ingredient:
    name: str = ""
    qty: str = ""
    unit: str = ""

    @classmethod
    def coerce(cls, obj) -> "Ingredient":
        if isinstance(obj, cls):
            return obj
        return cls(
            name=str(read_field(obj, "name") or ""),
            qty=str(read_field(obj, "qty") or ""),
            unit=str(read_field(obj, "unit") or ""),
        )

    def to_dict(self) -> dict:
        return asdict(self)


def parse_ingredient_line(line: str | None) -> Ingredient | None:
    """Parse one editor line into an ingredient.

    Accepted forms:
      "flour|2|cups"   -> explicit name|qty|unit
      "2 cups flour"   -> leading quantity with optional unit
      "1/2 onion"      -> leading quantity, no unit
      "salt"           -> name only
    Blank lines give None.
    """
    line = (line or "").strip()
    if not line:
        return None

    if "|" in line:
        parts = [p.strip() for p in line.split("|")]
        parts += [""] * (3 - len(parts))
        return Ingredient(name=parts[0], qty=parts[1], unit=parts[2])

    m = QTY_PREFIX_RE.match(line)
    if m:
        return Ingredient(name=m.group(3) or line, qty=m.group(1) or "", unit=m.group(2) or "")
    return Ingredient(name=line)


def parse_ingredient_block(text: str | None) -> list[Ingredient]:
    out = []
    for line in (text or "").splitlines():
        ingredient = parse_ingredient_line(line)
        if ingredient is not None:
            out.append(ingredient)
    return out


def format_ingredient_line(ingredient) -> str:
    ing = Ingredient.coerce(ingredient)
    return f"{ing.name}|{ing.qty}|{ing.unit}"
