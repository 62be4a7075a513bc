"""Tree pruning: subtree removal and attribute stripping.

Every operation mutates the tree in place, returns how many nodes or
attributes it removed, treats zero matches as a normal outcome and is
idempotent.

Match sets are always materialized before anything is detached.  A match
that sits inside an earlier match is already gone with its ancestor and is
skipped rather than detached a second time.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from bs4 import BeautifulSoup, Tag

from parsing.paths import select

logger = logging.getLogger("htmlclean")

# Subtrees dropped at load time.
SCRIPT_LINK_STYLE_TAGS = frozenset({"script", "style", "link"})


def detach(node):  # noqa: ANN001, ANN201
    """Unlink *node* from its parent and return it."""
    return node.extract()


def _is_attached(node, root: Tag) -> bool:  # noqa: ANN001
    return any(parent is root for parent in node.parents)


def detach_all(root: Tag, nodes: Iterable) -> int:
    """Detach each of *nodes* that is still attached below *root*."""
    removed = 0
    for node in list(nodes):
        if _is_attached(node, root):
            detach(node)
            removed += 1
    return removed


def _elements(root: Tag) -> Iterator[Tag]:
    """Yield *root* itself (unless it is the document) and every element below it."""
    if not isinstance(root, BeautifulSoup):
        yield root
    yield from root.find_all(True)


def remove_comments(root: Tag) -> int:
    """Detach every comment node below *root*."""
    removed = detach_all(root, select(root, "//comment()"))
    logger.debug("removed comments", extra={"removed": removed})
    return removed


def remove_tags(root: Tag, tag_names: Iterable[str]) -> int:
    """Detach the whole subtree of every element whose tag is in *tag_names*."""
    names = sorted({name.lower() for name in tag_names})
    if not names:
        return 0
    removed = detach_all(root, root.find_all(names))
    logger.debug("removed tags", extra={"tag": ",".join(names), "removed": removed})
    return removed


def remove_nodes_by_path(root: Tag, *paths: str) -> int:
    """Detach every node matching any of *paths*, one path at a time."""
    removed = 0
    for path in paths:
        count = detach_all(root, select(root, path))
        logger.debug("removed nodes", extra={"path": path, "removed": count})
        removed += count
    return removed


def strip_attribute_by_exact_name(root: Tag, name: str) -> int:
    """Remove attribute *name* (case-insensitive) from every element."""
    target = name.lower()
    removed = 0
    for tag in _elements(root):
        for attr in list(tag.attrs):
            if attr.lower() == target:
                del tag[attr]
                removed += 1
    logger.debug("stripped attribute", extra={"attr": target, "removed": removed})
    return removed


def strip_attributes_by_prefix(root: Tag, prefix: str, case_insensitive: bool = True) -> int:
    """Remove every attribute whose name starts with *prefix*.

    Used with ``data-`` and ``on``.  A bare ``data`` attribute does not
    match ``data-``.
    """
    wanted = prefix.lower() if case_insensitive else prefix
    removed = 0
    for tag in _elements(root):
        attrs_to_remove = []
        for attr in tag.attrs:
            candidate = attr.lower() if case_insensitive else attr
            if candidate.startswith(wanted):
                attrs_to_remove.append(attr)
        for attr in attrs_to_remove:
            del tag[attr]
        removed += len(attrs_to_remove)
    logger.debug("stripped attribute prefix", extra={"attr": prefix, "removed": removed})
    return removed
