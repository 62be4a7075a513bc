"""Path-expression node selection over a parsed document.

Supports the XPath subset the cleaner needs::

    //tag  //*                  elements by (case-insensitive) tag name
    //@attr                     any element carrying ``attr``
    //tag[@attr]                combination, predicates may repeat
    //tag[@attr='value']        attribute equality
    //comment()  //text()       comment and text nodes
    //a|//b                     union, returned in document order

``//`` (or ``.//``) always means "any descendant of the context node".
Results are materialized lists, so callers may detach nodes while walking
them.

Attribute equality follows BeautifulSoup: for multi-valued attributes such
as ``class`` it matches any single token, so ``//p[@class='a']`` also
matches ``class="a b"``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from bs4 import Comment, NavigableString, Tag
from bs4.element import PreformattedString

from parsing.errors import InvalidPathError

_NAME = r"[A-Za-z_][\w:.-]*"

_STEP_RE = re.compile(
    rf"""^\.?//(?:
        (?P<func>comment|text)\(\)
      | @(?P<attr_only>{_NAME})
      | (?P<tag>\*|{_NAME})(?P<preds>(?:\[[^\]]*\])*)
    )$""",
    re.VERBOSE,
)

_PRED_RE = re.compile(rf"""\[\s*@(?P<name>{_NAME})\s*(?:=\s*(?P<q>['"])(?P<value>.*?)(?P=q)\s*)?\]""")


@dataclass(frozen=True)
class PathStep:
    """One compiled ``//...`` step of a path expression."""

    kind: str  # "element", "comment" or "text"
    tag: str | None = None
    attrs: dict[str, str | bool] = field(default_factory=dict)


def _compile_step(raw: str, path: str) -> PathStep:
    m = _STEP_RE.match(raw.strip())
    if m is None:
        raise InvalidPathError(f"unsupported path expression: {path!r}")

    if m.group("func"):
        return PathStep(kind=m.group("func"))

    if m.group("attr_only"):
        return PathStep(kind="element", attrs={m.group("attr_only").lower(): True})

    attrs: dict[str, str | bool] = {}
    preds = m.group("preds") or ""
    consumed = 0
    for pm in _PRED_RE.finditer(preds):
        if pm.start() != consumed:
            break
        value = pm.group("value")
        attrs[pm.group("name").lower()] = True if value is None else value
        consumed = pm.end()
    if consumed != len(preds):
        raise InvalidPathError(f"unsupported predicate in path expression: {path!r}")

    tag = m.group("tag").lower()
    return PathStep(kind="element", tag=None if tag == "*" else tag, attrs=attrs)


def compile_path(path: str) -> tuple[PathStep, ...]:
    """Parse *path* into its union of steps.

    Raises:
        InvalidPathError: If any part of the expression is not supported.
    """
    if not path or not path.strip():
        raise InvalidPathError("empty path expression")
    return tuple(_compile_step(part, path) for part in path.split("|"))


def _is_text(node) -> bool:  # noqa: ANN001
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def _evaluate(node: Tag, step: PathStep) -> list:
    if step.kind == "comment":
        return [d for d in node.descendants if isinstance(d, Comment)]
    if step.kind == "text":
        return [d for d in node.descendants if _is_text(d)]
    return node.find_all(step.tag or True, attrs=dict(step.attrs))


def select(node: Tag, path: str) -> list:
    """Return every node under *node* matching *path*, in document order.

    An empty list is the normal "no match" outcome.
    """
    steps = compile_path(path)
    if len(steps) == 1:
        return _evaluate(node, steps[0])

    matched: set[int] = set()
    for step in steps:
        matched.update(id(n) for n in _evaluate(node, step))
    return [d for d in node.descendants if id(d) in matched]


def select_one(node: Tag, path: str):  # noqa: ANN201
    """Return the first match of *path* under *node*, or ``None``."""
    matches = select(node, path)
    return matches[0] if matches else None
