#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoc2confluence/utils/escape.py
"""Escaping helpers for the Confluence storage format.

The formatting helpers never escape on their own; these functions are for
callers (and macro templates) that place raw text into markup.

"""

from __future__ import annotations

import html

from adoc2confluence.constants import CDATA_END


def escape_xml_text(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` for use as element content.

    Examples
    --------
        >>> escape_xml_text("a < b && c")
        'a &lt; b &amp;&amp; c'

    """
    if not text:
        return text
    return html.escape(text, quote=False)


def escape_xml_attribute(value: str) -> str:
    """Escape a value for use inside a double-quoted attribute.

    Examples
    --------
        >>> escape_xml_attribute('say "hi"')
        'say &quot;hi&quot;'

    """
    if not value:
        return value
    return html.escape(value, quote=True)


def cdata(text: str) -> str:
    """Wrap ``text`` in a CDATA section.

    A ``]]>`` sequence inside the text would end the section early, so it is
    split across two adjacent sections.

    Examples
    --------
        >>> cdata("a]]>b")
        '<![CDATA[a]]]]><![CDATA[>b]]>'

    """
    return "<![CDATA[" + text.replace(CDATA_END, "]]]]><![CDATA[>") + "]]>"
