"""Clean-HTML assembly: prune, collapse empty divs, serialize."""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup, Tag

from extraction.normalize import collapse_whitespace, decode_entities, normalize
from models.options import CleanHtmlOptions
from parsing.collapse import collapse_empty
from parsing.pruning import (
    remove_nodes_by_path,
    strip_attribute_by_exact_name,
    strip_attributes_by_prefix,
)

logger = logging.getLogger("htmlclean")

_RE_LINE_BREAKS = re.compile(r"\r\n|\r|\n")


def _serialize(element: Tag) -> str:
    # The document object has no markup of its own.
    if isinstance(element, BeautifulSoup):
        return element.decode_contents()
    return element.decode()


def _to_single_line(markup: str) -> str:
    flat = collapse_whitespace(_RE_LINE_BREAKS.sub(" ", markup))
    return decode_entities(flat.replace("> <", "><")).strip()


def clean_html(element: Tag, options: CleanHtmlOptions | None = None) -> str:
    """Strip noise attributes and elements from *element* and serialize it.

    Mutates *element*.  Empty ``<div>`` elements are always collapsed.  A
    document serializes as its contents, any other element as itself.

    With ``single_line`` every line break becomes a space, whitespace runs
    collapse, and ``"> <"`` between tags closes up to ``"><"``.  Otherwise
    the markup keeps its lines, each one trimmed.

    Entities are decoded in the output, so escaped text such as
    ``&lt;script&gt;`` comes back as live markup. The result is not
    sanitized HTML and must not be embedded as if it were.
    """
    options = options or CleanHtmlOptions()

    if options.remove_inline_style:
        strip_attribute_by_exact_name(element, "style")
    if options.remove_data_attrs:
        strip_attributes_by_prefix(element, "data-")
    if options.remove_event_attrs:
        strip_attributes_by_prefix(element, "on")
    if options.remove_meta:
        remove_nodes_by_path(element, "//meta")

    collapse_empty(element, "div")

    markup = _serialize(element)
    if options.single_line:
        result = _to_single_line(markup)
    else:
        result = normalize(markup, line_break=options.line_break)

    logger.debug("cleaned html", extra={"chars": len(result)})
    return result
