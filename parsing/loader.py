"""Parse raw HTML into a pruned ``BeautifulSoup`` document."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, ParserRejectedMarkup

from models.options import LoadOptions
from parsing.errors import MalformedHtmlError
from parsing.pruning import SCRIPT_LINK_STYLE_TAGS, remove_comments, remove_tags

logger = logging.getLogger("htmlclean")


def load_html(raw_html: str | bytes, options: LoadOptions | None = None) -> BeautifulSoup:
    """Parse *raw_html* and apply load-time pruning.

    Removes comments and ``<script>``, ``<style>`` and ``<link>`` subtrees
    unless *options* turns those steps off.

    Raises:
        MalformedHtmlError: If the input is not text/bytes or the parser
            rejects it.
    """
    options = options or LoadOptions()
    if not isinstance(raw_html, (str, bytes)):
        raise MalformedHtmlError(
            f"expected HTML as str or bytes, got {type(raw_html).__name__}"
        )

    try:
        soup = BeautifulSoup(raw_html, options.parser)
    except ParserRejectedMarkup as exc:
        raise MalformedHtmlError(f"parser rejected markup: {exc}") from exc

    if options.remove_comments:
        remove_comments(soup)
    if options.remove_script_link_style:
        remove_tags(soup, SCRIPT_LINK_STYLE_TAGS)

    logger.debug("loaded document", extra={"chars": len(raw_html)})
    return soup
