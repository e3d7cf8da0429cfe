import pytest

from studio.core.naming import generate_tag, generate_unique_name


@pytest.mark.parametrize("name,tag", [
    ("Red Dress", "red-dress"),
    ("  Red Dress!! 2 ", "red-dress-2"),
    ("Summer -- Collection", "summer-collection"),
    ("-Leading and trailing-", "leading-and-trailing"),
    ("Café Noir", "caf-noir"),
])
def test_generate_tag(name, tag):
    assert generate_tag(name) == tag


def test_unique_name_kept_when_free():
    assert generate_unique_name("  Red Dress ", ["Blue Dress", "Red Dresses"]) == "Red Dress"


def test_unique_name_suffixed_on_case_insensitive_match():
    assert generate_unique_name("red dress", ["Red Dress"]) == "red dress 2"


def test_unique_name_uses_highest_suffix():
    existing = ["Red Dress", "Red Dress 2", "red dress 7", "Red Dress Long"]
    assert generate_unique_name("Red Dress", existing) == "Red Dress 8"


def test_unique_name_escapes_regex_characters():
    assert generate_unique_name("Bag (large)", ["Bag (large)", "Bag (large) 3"]) == "Bag (large) 4"
