"""Shared fixtures: clean environment and a document factory."""

import pytest

from models.options import LoadOptions
from parsing.loader import load_html


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep a developer's HTMLCLEAN_* variables out of the tests."""
    for name in ("HTMLCLEAN_PARSER", "HTMLCLEAN_LINE_BREAK", "HTMLCLEAN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def parse():
    """Parse HTML without any load-time pruning unless asked for."""

    def _parse(html, **flags):
        flags.setdefault("remove_comments", False)
        flags.setdefault("remove_script_link_style", False)
        return load_html(html, LoadOptions(**flags))

    return _parse
