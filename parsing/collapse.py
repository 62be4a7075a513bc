"""Fixed-point removal of empty elements."""

from __future__ import annotations

import logging

from bs4 import Tag

from parsing.pruning import detach_all

logger = logging.getLogger("htmlclean")


def _has_no_children(el: Tag) -> bool:
    return len(el.contents) == 0


# ASCII whitespace only: a non-breaking space counts as content.
_BLANK = " \t\n\r\f\v"


def _has_blank_content(el: Tag) -> bool:
    return not el.decode_contents().strip(_BLANK)


def _detach_matching(root: Tag, tag_name: str, predicate) -> int:  # noqa: ANN001
    return detach_all(root, [el for el in root.find_all(tag_name) if predicate(el)])


def collapse_empty(root: Tag, tag_name: str) -> list[int]:
    """Remove *tag_name* elements that are empty, until none are left.

    Phase one detaches elements with no child nodes at all.  Phase two
    repeatedly detaches elements whose inner markup is blank, because
    removing a nested empty element can leave its parent empty in turn.
    The loop stops after the first pass that removes nothing.

    Returns:
        Per-pass removal counts, phase one first and the final ``0`` last.
        ``<div><div></div></div>`` yields ``[1, 1, 0]``.
    """
    tag_name = tag_name.lower()
    passes = [_detach_matching(root, tag_name, _has_no_children)]
    while True:
        removed = _detach_matching(root, tag_name, _has_blank_content)
        passes.append(removed)
        if removed == 0:
            break

    logger.debug(
        "collapsed empty elements",
        extra={"tag": tag_name, "passes": passes, "removed": sum(passes)},
    )
    return passes
