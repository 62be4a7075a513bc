"""Option models for loading, cleaning and text extraction (Pydantic v2).

Every flag accepts its snake_case field name or the camelCase name used by
callers that configure the cleaner from JSON (``allInOneLine`` and so on).
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from config import load_settings


class BlankLinePolicy(str, Enum):
    """How interior blank lines survive normalization.

    Leading and trailing blank lines are always dropped.
    """

    PRESERVE = "preserve"
    COLLAPSE = "collapse"
    DROP = "drop"


def _default_parser() -> str:
    return load_settings().parser


def _default_line_break() -> str:
    return load_settings().line_break


class LoadOptions(BaseModel):
    """Pruning applied while the document is parsed."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    remove_comments: bool = Field(True, alias="removeComment")
    remove_script_link_style: bool = Field(True, alias="removeScriptLinkStyle")
    parser: str = Field(default_factory=_default_parser)


class CleanHtmlOptions(BaseModel):
    """Flags for the clean-HTML output path."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    remove_data_attrs: bool = Field(False, alias="removeDataAttribute")
    remove_meta: bool = Field(True, alias="removeMeta")
    remove_inline_style: bool = Field(True, alias="removeInlineStyle")
    remove_event_attrs: bool = Field(True, alias="removeEventAttribute")
    single_line: bool = Field(True, alias="allInOneLine")
    line_break: str = Field(default_factory=_default_line_break, alias="lineBreak")


class TextOptions(BaseModel):
    """Formatting of the clean-text output path."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    blank_lines: BlankLinePolicy = Field(BlankLinePolicy.PRESERVE, alias="blankLines")
    line_break: str = Field(default_factory=_default_line_break, alias="lineBreak")
