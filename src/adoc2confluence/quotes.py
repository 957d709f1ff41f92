#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoc2confluence/quotes.py
"""Inline quoted text (emphasis, strong, code, mark...) rendering.

Each span type maps to an ``(open, close, native)`` triple in
:data:`~adoc2confluence.constants.QUOTE_TAGS`. Native tags are real elements
whose opening tag can carry ``id``/``class`` attributes; the others are
delimiters or typographic entities that need a ``<span>`` to carry them.

Rendering order:

1. an id goes onto the native tag, or onto a wrapping ``<span>``
2. a role goes onto the native tag as its class
3. ``strike-through``, ``line-through`` and ``underline`` roles on spans
   without a native tag become ``<s>``, ``<del>`` and ``<u>``
4. any other role wraps the span in ``<span class="...">``
5. otherwise the span renders with its own tags

"""

from __future__ import annotations

from typing import Optional

from adoc2confluence.constants import DEFAULT_QUOTE_TAG, QUOTE_TAGS, ROLE_ALIAS_TAGS


def quote_tags(span_type: Optional[str]) -> tuple[str, str, bool]:
    """Return the ``(open, close, native)`` triple for ``span_type``.

    Unknown types get empty, non-native tags.
    """
    if span_type is None:
        return DEFAULT_QUOTE_TAG
    return QUOTE_TAGS.get(span_type, DEFAULT_QUOTE_TAG)


def _splice(open_tag: str, attrs: str) -> str:
    # "<strong>" -> "<strong id=... class=...>"
    return f"{open_tag[:-1]}{attrs}>"


def format_inline_quoted(
    span_type: Optional[str],
    text: str,
    id: Optional[str] = None,
    role: Optional[str] = None,
) -> str:
    """Render an inline quoted span.

    Parameters
    ----------
    span_type : str or None
        Span kind (``"strong"``, ``"emphasis"``, ``"monospaced"``...)
    text : str
        Already-rendered span content
    id : str or None, default = None
        Anchor id of the span
    role : str or None, default = None
        Role (class) of the span

    Returns
    -------
    str
        Rendered span

    Examples
    --------
        >>> format_inline_quoted("strong", "bold")
        '<strong>bold</strong>'
        >>> format_inline_quoted("strong", "bold", role="strike-through")
        '<strong class="strike-through">bold</strong>'
        >>> format_inline_quoted("unquoted", "gone", role="line-through")
        '<del>gone</del>'

    """
    open_tag, close_tag, native = quote_tags(span_type)
    class_attr = f' class="{role}"' if role else ""

    if id:
        id_attr = f' id="{id}"'
        if native:
            return f"{_splice(open_tag, id_attr + class_attr)}{text}{close_tag}"
        return f"<span{id_attr}{class_attr}>{open_tag}{text}{close_tag}</span>"

    if role and native:
        return f"{_splice(open_tag, class_attr)}{text}{close_tag}"

    if role in ROLE_ALIAS_TAGS:
        tag = ROLE_ALIAS_TAGS[role]
        return f"<{tag}>{text}</{tag}>"

    if role:
        return f"<span{class_attr}>{open_tag}{text}{close_tag}</span>"

    return f"{open_tag}{text}{close_tag}"
