"""Read-only lookups on a parsed document.

All helpers return ``None`` (or the caller's default) when the node or
attribute is absent instead of raising.
"""

from __future__ import annotations

from bs4 import Tag

from parsing.paths import select, select_one


def _attr_to_str(value) -> str:  # noqa: ANN001
    """BS4 returns lists for multi-valued attributes like ``class``."""
    if isinstance(value, list):
        return " ".join(str(item) for item in value)
    return str(value)


def descendants(node: Tag, tag_name: str) -> list[Tag]:
    """Every element named *tag_name* below *node*, in document order."""
    return node.find_all(tag_name.lower())


def inner_html(node: Tag | None, path: str) -> str | None:
    """Trimmed inner markup of the first match of *path*."""
    if node is None:
        return None
    el = select_one(node, path)
    if not isinstance(el, Tag):
        return None
    return el.decode_contents().strip()


def inner_text(node: Tag | None, path: str) -> str | None:
    """Trimmed, entity-decoded text of the first match of *path*."""
    if node is None:
        return None
    el = select_one(node, path)
    if el is None:
        return None
    if isinstance(el, Tag):
        return el.get_text().strip()
    return str(el).strip()


def attribute_value(
    node: Tag | None, path: str, name: str, default: str | None = None
) -> str | None:
    """Value of attribute *name* on the first match of *path*, else *default*."""
    if node is None:
        return default
    el = select_one(node, path)
    if not isinstance(el, Tag):
        return default
    value = el.get(name.lower())
    if value is None:
        return default
    return _attr_to_str(value)


def input_values(node: Tag, key: str = "name", value: str = "value") -> dict[str, str]:
    """Map each ``<input>``'s *key* attribute to its *value* attribute.

    Inputs where either attribute is missing or blank are skipped; a later
    input overwrites an earlier one with the same key.
    """
    result: dict[str, str] = {}
    for el in select(node, "//input"):
        k = el.get(key.lower())
        v = el.get(value.lower())
        if k is None or v is None:
            continue
        k, v = _attr_to_str(k), _attr_to_str(v)
        if k.strip() and v.strip():
            result[k] = v
    return result
