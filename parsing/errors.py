"""Exceptions raised by the cleaner.

Empty selections and missing attributes are not errors and have no
exception type; they surface as empty lists, ``None`` or a caller default.
"""


class MalformedHtmlError(ValueError):
    """The input could not be turned into a document tree."""


class InvalidPathError(ValueError):
    """A path expression does not follow the supported grammar."""
