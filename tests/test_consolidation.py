from fractions import Fraction

import pytest

from chef_utils.shopping import ShoppingItem, consolidate


@pytest.fixture
def weekly_items():
    return [
        ShoppingItem("2 cups flour", "Pancakes", recipe_id="r1"),
        ShoppingItem("3 eggs", "Pancakes", recipe_id="r1"),
        ShoppingItem("Salt to taste", "Pancakes", recipe_id="r1"),
        ShoppingItem("1 cup flour", "Banana Bread", recipe_id="r2"),
        ShoppingItem("2 Eggs", "Banana Bread", recipe_id="r2"),
        ShoppingItem("1/2 cup sugar", "Banana Bread", recipe_id="r2"),
        ShoppingItem("salt to taste", "Omelette", recipe_id="r3"),
        ShoppingItem("1 egg", "Omelette", recipe_id="r3"),
    ]


def test_consolidate_sums_compatible_entries():
    entries = consolidate([("2 cups flour", "Recipe A"), ("1 cup flour", "Recipe B")])
    assert len(entries) == 1
    flour = entries[0]
    assert flour.normalized_key == "cup flour"
    assert flour.combined_quantity == 3
    assert flour.combined_text == "3 cups flour"
    assert flour.recipes == ("Recipe A", "Recipe B")
    assert flour.lines == ("2 cups flour", "1 cup flour")


def test_consolidate_pluralizes_unit_of_first_entry():
    entries = consolidate([("1 cup flour", "A"), ("2 cups flour", "B")])
    assert entries[0].combined_text == "3 cups flour"


def test_consolidate_never_merges_incompatible_units():
    entries = consolidate([("1 cup flour", "A"), ("1 gram flour", "B")])
    assert [e.combined_text for e in entries] == ["1 cup flour", "1 gram flour"]
    assert [e.recipes for e in entries] == [("A",), ("B",)]


def test_consolidate_groups_in_first_seen_order(weekly_items):
    entries = consolidate(weekly_items)
    assert [e.normalized_key for e in entries] == [
        "cup flour",
        "egg",
        "salt to taste",
        "cup sugar",
    ]


def test_consolidate_weekly_list(weekly_items):
    entries = {e.normalized_key: e for e in consolidate(weekly_items)}

    assert entries["cup flour"].combined_text == "3 cups flour"
    assert entries["egg"].combined_quantity == 6
    assert entries["egg"].combined_text == "6 eggs"
    assert entries["egg"].recipes == ("Pancakes", "Banana Bread", "Omelette")
    assert entries["cup sugar"].combined_text == "1/2 cup sugar"


def test_consolidate_entries_without_quantity(weekly_items):
    salt = {e.normalized_key: e for e in consolidate(weekly_items)}["salt to taste"]
    assert salt.combined_quantity is None
    assert salt.combined_text == "Salt to taste"
    assert salt.recipes == ("Pancakes", "Omelette")


def test_consolidate_unquantified_entry_does_not_change_sum():
    entries = consolidate([("eggs", "A"), ("2 eggs", "B"), ("1 egg", "C")])
    assert len(entries) == 1
    assert entries[0].combined_quantity == 3
    assert entries[0].combined_text == "3 eggs"
    assert entries[0].recipes == ("A", "B", "C")


def test_consolidate_deduplicates_recipes():
    entries = consolidate(
        [("1 cup milk", "Porridge"), ("1/2 cup milk", "Porridge"), ("1/4 cup milk", "Latte")]
    )
    assert entries[0].combined_quantity == Fraction(7, 4)
    assert entries[0].combined_text == "1 3/4 cups milk"
    assert entries[0].recipes == ("Porridge", "Latte")


def test_consolidate_is_deterministic(weekly_items):
    assert consolidate(weekly_items) == consolidate(weekly_items)


def test_consolidate_empty():
    assert consolidate([]) == []


def test_consolidate_sum_beyond_float_range():
    big = "1" + "0" * 308
    entries = consolidate([(big + " cups flour", "A"), (big + " cups flour", "B")])
    assert entries[0].combined_quantity == 2 * 10**308
    assert entries[0].combined_text == "2" + "0" * 308 + " cups flour"


def test_consolidate_merges_pound_abbreviations():
    entries = consolidate([("2 lbs beef", "Chili"), ("1 lb beef", "Tacos")])
    assert len(entries) == 1
    assert entries[0].normalized_key == "lb beef"
    assert entries[0].combined_text == "3 lbs beef"
