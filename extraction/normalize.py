"""Plain-string normalization shared by both output paths."""

from __future__ import annotations

import html
import re

from models.options import BlankLinePolicy

LINE_BREAK = "\n"

# Whitespace runs that do not contain a line break
_RE_INLINE_WS = re.compile(r"[^\S\r\n]+")
_RE_LINE_SPLIT = re.compile(r"\r\n|\r|\n")


def collapse_whitespace(text: str) -> str:
    """Collapse spaces, tabs and other non-break whitespace to one space."""
    return _RE_INLINE_WS.sub(" ", text)


def split_lines(text: str) -> list[str]:
    """Split on ``\\r\\n``, ``\\r`` or ``\\n``."""
    return _RE_LINE_SPLIT.split(text)


def decode_entities(text: str) -> str:
    """Decode numeric and named HTML character references."""
    return html.unescape(text)


def _apply_blank_line_policy(lines: list[str], policy: BlankLinePolicy) -> list[str]:
    start, end = 0, len(lines)
    while start < end and not lines[start]:
        start += 1
    while end > start and not lines[end - 1]:
        end -= 1
    lines = lines[start:end]

    if policy is BlankLinePolicy.DROP:
        return [line for line in lines if line]
    if policy is BlankLinePolicy.COLLAPSE:
        result: list[str] = []
        for line in lines:
            if line or (result and result[-1]):
                result.append(line)
        return result
    return lines


def normalize(
    text: str,
    line_break: str = LINE_BREAK,
    blank_lines: BlankLinePolicy = BlankLinePolicy.PRESERVE,
) -> str:
    """Collapse whitespace, trim every line, decode entities and rejoin.

    Leading and trailing blank lines are dropped; interior blank lines follow
    *blank_lines*.
    """
    lines = [decode_entities(line.strip()) for line in split_lines(collapse_whitespace(text))]
    return line_break.join(_apply_blank_line_policy(lines, BlankLinePolicy(blank_lines)))
