"""Public re-exports of all option types."""

from models.options import (
    BlankLinePolicy,
    CleanHtmlOptions,
    LoadOptions,
    TextOptions,
)

__all__ = [
    "BlankLinePolicy",
    "CleanHtmlOptions",
    "LoadOptions",
    "TextOptions",
]
