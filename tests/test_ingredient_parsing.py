from pantrypal.services.ingredients import (
    Ingredient,
    format_ingredient_line,
    parse_ingredient_block,
    parse_ingredient_line,
)


def test_parse_pipe_form():
    assert parse_ingredient_line(" flour | 2 | cups ") == Ingredient(name="flour", qty="2", unit="cups")
    assert parse_ingredient_line("salt|pinch") == Ingredient(name="salt", qty="pinch", unit="")


def test_parse_leading_quantity():
    assert parse_ingredient_line("2 cups flour") == Ingredient(name="flour", qty="2", unit="cups")
    assert parse_ingredient_line("1/2 onion") == Ingredient(name="onion", qty="1/2", unit="")
    assert parse_ingredient_line("2 eggs") == Ingredient(name="eggs", qty="2", unit="")
    assert parse_ingredient_line("250g butter") == Ingredient(name="butter", qty="250", unit="g")


def test_parse_plain_name_and_blank():
    assert parse_ingredient_line("fresh basil") == Ingredient(name="fresh basil")
    assert parse_ingredient_line("   ") is None
    assert parse_ingredient_line(None) is None


def test_parse_block_skips_blank_lines():
    block = "flour|2|cups\n\n  \n3 eggs\nsalt"
    assert [i.name for i in parse_ingredient_block(block)] == ["flour", "eggs", "salt"]


def test_format_line_from_dict():
    assert format_ingredient_line({"name": "milk", "qty": "1", "unit": "l"}) == "milk|1|l"
    assert format_ingredient_line({"name": "salt"}) == "salt||"


def test_coerce_tolerates_missing_fields():
    assert Ingredient.coerce({}) == Ingredient()
    assert Ingredient.coerce(None) == Ingredient()
    assert Ingredient.coerce({"name": None, "qty": 2}) == Ingredient(name="", qty="2", unit="")
