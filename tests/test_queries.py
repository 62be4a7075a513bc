"""Tests for parsing.queries: absent-tolerant lookups."""

import pytest

from parsing.queries import attribute_value, descendants, inner_html, inner_text, input_values


@pytest.fixture
def soup(parse):
    return parse(
        '<a href="/x" class="a b">Link &amp; more</a>'
        '<input name="user" value="bob">'
        '<input name="pw" value=" ">'
        '<input value="orphan">'
        '<input name="user" value="alice">'
    )


def test_attribute_value(soup):
    assert attribute_value(soup, "//a", "HREF") == "/x"


def test_multi_valued_attribute_is_joined(soup):
    assert attribute_value(soup, "//a", "class") == "a b"


def test_missing_attribute_returns_default(soup):
    assert attribute_value(soup, "//a", "title") is None
    assert attribute_value(soup, "//a", "title", "none") == "none"


def test_missing_node_returns_default(soup):
    assert attribute_value(soup, "//img", "src", "none") == "none"
    assert attribute_value(None, "//a", "href", "d") == "d"


def test_inner_text_and_html(soup):
    assert inner_text(soup, "//a") == "Link & more"
    assert inner_html(soup, "//a") == "Link &amp; more"


def test_inner_lookups_without_match(soup):
    assert inner_text(soup, "//table") is None
    assert inner_html(soup, "//table") is None
    assert inner_text(None, "//a") is None


def test_input_values_skip_blank_and_last_wins(soup):
    assert input_values(soup) == {"user": "alice"}


def test_input_values_custom_keys(parse):
    soup = parse('<input id="q" placeholder="Search"><input id="" placeholder="x">')
    assert input_values(soup, key="id", value="placeholder") == {"q": "Search"}


def test_descendants(soup):
    assert [el.get("value") for el in descendants(soup, "INPUT")] == [
        "bob",
        " ",
        "orphan",
        "alice",
    ]
