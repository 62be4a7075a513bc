"""Block-level tag catalogue and markup-level line-break marking.

Every tag in ``BLOCK_TAGS`` is assumed to start a new line.  There is no
CSS box model behind this; the catalogue is the whole policy.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

BLOCK_TAGS: tuple[str, ...] = (
    "address", "article", "aside",
    "blockquote",
    "caption", "code", "cite",
    "div", "dl", "details",
    "footer",
    "h1", "h2", "h3", "h4", "h5", "h6", "header",
    "label", "ul", "ol", "li",
    "nav",
    "p", "pre",
    "q",
    "table", "tr", "textarea",
    "select", "section",
)

# Elements that carry no text and are dropped before extraction.
MEDIA_TAGS: tuple[str, ...] = ("img", "map", "audio", "canvas")

LINE_MARKER = "\n"

# <br>, <br/>, <br />, <br class="x">, and the stray closing form </br>
_RE_BR = re.compile(r"<\s*/?\s*br\b[^>]*>", re.IGNORECASE)
# Whole comments first, since their bodies may contain ">"; then anything tag-shaped
_RE_TAGS = re.compile(r"<!--.*?-->|<[^>]+>", re.DOTALL)


def compile_block_pattern(tags: Iterable[str] = BLOCK_TAGS) -> re.Pattern[str]:
    """Regex matching the start of an opening tag for any of *tags*.

    The name must end at whitespace, ``/`` or ``>``, so ``p`` never
    matches ``<pre>`` or ``<param>``.
    """
    names = "|".join(re.escape(tag.lower()) for tag in tags)
    return re.compile(rf"<(?:{names})(?=[\s/>])", re.IGNORECASE)


_DEFAULT_BLOCK_PATTERN = compile_block_pattern(BLOCK_TAGS)


def mark_line_breaks(markup: str, marker: str = LINE_MARKER) -> str:
    """Replace every line-break tag with *marker*."""
    return _RE_BR.sub(marker, markup)


def mark_blocks(
    markup: str, tags: Iterable[str] = BLOCK_TAGS, marker: str = LINE_MARKER
) -> str:
    """Insert *marker* immediately before every opening block tag."""
    pattern = _DEFAULT_BLOCK_PATTERN if tags is BLOCK_TAGS else compile_block_pattern(tags)
    return pattern.sub(lambda m: marker + m.group(0), markup)


def strip_tags(markup: str) -> str:
    """Remove all remaining tag markup, leaving bare text."""
    return _RE_TAGS.sub("", markup)
