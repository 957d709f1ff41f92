#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoc2confluence/utils/tags.py
"""Markup element construction.

Attribute values are written as given. Callers escape values before handing
them over; the storage-format pipeline already escapes text elsewhere and
escaping again here would double-escape entities.

"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from adoc2confluence.constants import VOID_ELEMENTS

ContentFactory = Callable[[], str]


def _is_blank(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (str, list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


def render_attributes(attributes: Optional[Mapping[str, Any]]) -> str:
    """Serialize an attribute mapping, preserving its order.

    Parameters
    ----------
    attributes : Mapping[str, Any] or None
        Attribute names to values. ``None``, ``False`` and empty values are
        skipped, ``True`` renders a bare attribute and sequences are joined
        with single spaces.

    Returns
    -------
    str
        Attribute string with a leading space, or ``""`` when nothing survives

    Examples
    --------
        >>> render_attributes({"class": ["lead", None, "big"], "hidden": True, "id": None})
        ' class="lead big" hidden'

    """
    if not attributes:
        return ""

    parts: list[str] = []
    for name, value in attributes.items():
        if isinstance(value, (list, tuple)):
            value = " ".join(str(item) for item in value if item is not None)
        if _is_blank(value):
            continue
        if value is True:
            parts.append(str(name))
        else:
            parts.append(f'{name}="{value}"')

    return " " + " ".join(parts) if parts else ""


def html_tag(
    name: str,
    attributes: Optional[Mapping[str, Any]] = None,
    content: Optional[str] = None,
    content_factory: Optional[ContentFactory] = None,
) -> str:
    """Render a single markup element.

    Void elements (``img``, ``br``...) render as an open tag only; content
    and factory are ignored for them. For any other element the body is
    ``content``, or, when ``content`` is ``None``, the result of calling
    ``content_factory``. The factory is never called when it is not needed.

    Parameters
    ----------
    name : str
        Element name, e.g. ``"a"`` or ``"ac:image"``
    attributes : Mapping[str, Any] or None, default = None
        Element attributes, see :func:`render_attributes`
    content : str or None, default = None
        Element body
    content_factory : callable or None, default = None
        Zero-argument callable producing the body lazily

    Returns
    -------
    str
        Rendered element

    Examples
    --------
        >>> html_tag("img", {"src": "x.png"}, "ignored")
        '<img src="x.png">'
        >>> html_tag("a", {"href": "#top"}, content_factory=lambda: "Top")
        '<a href="#top">Top</a>'

    """
    attrs_str = render_attributes(attributes)

    if name in VOID_ELEMENTS:
        return f"<{name}{attrs_str}>"

    if content is None and content_factory is not None:
        content = content_factory()
    return f"<{name}{attrs_str}>{content or ''}</{name}>"


def html_tag_if(
    condition: Any,
    name: str,
    attributes: Optional[Mapping[str, Any]],
    content_factory: ContentFactory,
) -> str:
    """Wrap the factory's output in an element only when ``condition`` holds.

    Examples
    --------
        >>> html_tag_if(False, "a", {"href": "http://example.org"}, lambda: "<b>x</b>")
        '<b>x</b>'

    """
    if condition:
        return html_tag(name, attributes, content_factory=content_factory)
    return content_factory()
