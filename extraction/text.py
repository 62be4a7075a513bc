"""Block-aware plain-text extraction."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from bs4 import Tag

from extraction.blocks import (
    BLOCK_TAGS,
    MEDIA_TAGS,
    mark_blocks,
    mark_line_breaks,
    strip_tags,
)
from extraction.normalize import normalize
from models.options import TextOptions
from parsing.pruning import remove_nodes_by_path

logger = logging.getLogger("htmlclean")


def extract_text(
    element: Tag,
    options: TextOptions | None = None,
    block_tags: Iterable[str] = BLOCK_TAGS,
) -> str:
    """Render *element* as line-oriented plain text.

    Media elements are removed from the tree first (this mutates
    *element*).  The inner markup then gets a line break for every
    ``<br>`` and before every opening block tag, loses its tags, and is
    normalized.  Tags are stripped before entities are decoded, so
    ``&lt;b&gt;`` in the source comes out as the literal text ``<b>``.
    """
    options = options or TextOptions()
    remove_nodes_by_path(element, *(f"//{tag}" for tag in MEDIA_TAGS))

    markup = element.decode_contents()
    markup = mark_line_breaks(markup)
    markup = mark_blocks(markup, block_tags)
    text = normalize(
        strip_tags(markup),
        line_break=options.line_break,
        blank_lines=options.blank_lines,
    )

    logger.debug("extracted text", extra={"chars": len(text)})
    return text
