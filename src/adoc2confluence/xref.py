#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoc2confluence/xref.py
"""Cross-reference classification and display text.

A cross-reference target takes one of these shapes:

    - ``#anchor`` or ``anchor``: an anchor in the current page
    - ``other.html``: another rendered page
    - ``other.html#anchor``: an anchor inside another page
    - a URI (``https://...``, ``file:///...``)

The three classifications below are computed independently of each other.

"""

from __future__ import annotations

import logging
import re
from typing import Optional

from adoc2confluence.ast.nodes import DocumentContext, DocumentNode
from adoc2confluence.constants import ANCHOR_SEPARATOR, CROSS_PAGE_MARKER, URI_SNIFF_PATTERN

logger = logging.getLogger(__name__)

_NEWLINES = re.compile(r"\n+")


def is_cross_page_xref(target: str) -> bool:
    """Check whether ``target`` points to another rendered page.

    Examples
    --------
        >>> is_cross_page_xref("page.html#section")
        True
        >>> is_cross_page_xref("#local")
        False

    """
    return CROSS_PAGE_MARKER in target


def is_cross_page_anchor_xref(target: str) -> bool:
    """Check whether ``target`` points to an anchor inside another page."""
    return CROSS_PAGE_MARKER in target and ANCHOR_SEPARATOR in target


def anchor_name(target: str) -> str:
    """Strip everything up to and including the first ``#``.

    Examples
    --------
        >>> anchor_name("page.html#section")
        'section'
        >>> anchor_name("#local")
        'local'
        >>> anchor_name("plain")
        'plain'

    """
    _, sep, anchor = target.partition(ANCHOR_SEPARATOR)
    return anchor if sep else target


def page_reference(target: str) -> str:
    """Return the page part of a cross-page target (everything before ``#``).

    Examples
    --------
        >>> page_reference("chapters/intro.html#setup")
        'chapters/intro.html'

    """
    return target.partition(ANCHOR_SEPARATOR)[0]


def looks_like_uri(value: Optional[str]) -> bool:
    """Check whether ``value`` starts with a URI scheme.

    The scheme needs at least two characters, so Windows drive letters
    (``c:/sample.adoc``, ``c:\\sample.adoc``) are not URIs.

    Examples
    --------
        >>> looks_like_uri("http://x")
        True
        >>> looks_like_uri("file:///tmp")
        True
        >>> looks_like_uri("c:/sample.adoc")
        False

    """
    if not value or ":" not in value:
        return False
    return URI_SNIFF_PATTERN.match(value) is not None


def _collapse_newlines(text: str) -> str:
    return _NEWLINES.sub(" ", text)


def xref_text(node: DocumentNode, context: Optional[DocumentContext] = None) -> Optional[str]:
    """Resolve the display text of a cross-reference.

    Text the parser filled in automatically equals the reference id; in that
    case (and when the node has no text at all) the document's reference
    lookup supplies the real text. Explicit text always wins otherwise.

    Parameters
    ----------
    node : DocumentNode
        Cross-reference node
    context : DocumentContext or None, default = None
        Render context holding the reference lookup

    Returns
    -------
    str or None
        Display text with newline runs collapsed to single spaces, or None
        when no text is available

    """
    context = context or DocumentContext()
    refid = node.refid

    if node.text is not None:
        text: Optional[str] = node.text
        if refid is not None and node.text == refid:
            text = context.reference_text(refid) or node.text
    else:
        text = context.reference_text(refid or node.target)

    if text is None:
        logger.debug("No cross-reference text for %r", refid or node.target)
        return None
    return _collapse_newlines(text)
