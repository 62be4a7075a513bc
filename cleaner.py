"""Public entry points: raw HTML string in, cleaned HTML or text out.

Each call parses its own tree, so calls share no state and independent
documents can be processed from separate threads.
"""

from __future__ import annotations

import logging

from config import configure_logging
from extraction.markup import clean_html
from extraction.text import extract_text
from models.options import CleanHtmlOptions, LoadOptions, TextOptions
from parsing.loader import load_html

configure_logging()

logger = logging.getLogger("htmlclean")


def clean_html_document(
    raw_html: str | bytes,
    load_options: LoadOptions | None = None,
    clean_options: CleanHtmlOptions | None = None,
) -> str:
    """Parse, prune and re-serialize *raw_html*.

    Raises:
        MalformedHtmlError: If the input cannot be parsed.
    """
    soup = load_html(raw_html, load_options)
    result = clean_html(soup, clean_options)
    logger.info("clean html", extra={"chars": len(result)})
    return result


def html_to_text(
    raw_html: str | bytes,
    load_options: LoadOptions | None = None,
    text_options: TextOptions | None = None,
) -> str:
    """Parse *raw_html* and return its block-aware plain text.

    Raises:
        MalformedHtmlError: If the input cannot be parsed.
    """
    soup = load_html(raw_html, load_options)
    result = extract_text(soup, text_options)
    logger.info("clean text", extra={"chars": len(result)})
    return result
