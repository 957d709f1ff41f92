#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoc2confluence/macros.py
"""Confluence structured-macro and link templates.

Every generator interpolates its parameters into a fixed storage-format
skeleton. Parameter values are written as given (callers escape them, as for
:func:`~adoc2confluence.utils.tags.html_tag`); link and code bodies go into
CDATA sections. Optional parameters are left out entirely when absent.

"""

from __future__ import annotations

from typing import Optional, Union

from adoc2confluence.constants import ADMONITION_MACRO_NAMES, ADMONITION_MACROS, JIRA_SCHEMA_VERSION
from adoc2confluence.utils.escape import cdata
from adoc2confluence.utils.tags import render_attributes


def _parameter(name: str, value: object) -> str:
    return f'<ac:parameter ac:name="{name}">{value}</ac:parameter>'


def _optional_parameter(name: str, value: object) -> str:
    return "" if value is None else _parameter(name, value)


def _structured_macro(name: str, inner: str, schema_version: Optional[int] = None) -> str:
    attrs = render_attributes({"ac:name": name, "ac:schema-version": schema_version})
    return f"<ac:structured-macro{attrs}>{inner}</ac:structured-macro>"


def _plain_text_link_body(body: str) -> str:
    return f"<ac:plain-text-link-body>{cdata(body)}</ac:plain-text-link-body>"


def anchor_macro(name: str) -> str:
    """Render an anchor macro.

    Examples
    --------
        >>> anchor_macro("install")
        '<ac:structured-macro ac:name="anchor"><ac:parameter ac:name="">install</ac:parameter></ac:structured-macro>'

    """
    return _structured_macro("anchor", _parameter("", name))


def anchor_link_macro(anchor: str, body: str) -> str:
    """Render a link to an anchor of the current page.

    Parameters
    ----------
    anchor : str
        Anchor name, without a leading ``#``
    body : str
        Literal link text

    Examples
    --------
        >>> anchor_link_macro("install", "Installation")
        '<ac:link ac:anchor="install"><ac:plain-text-link-body><![CDATA[Installation]]></ac:plain-text-link-body></ac:link>'

    """
    return f'<ac:link ac:anchor="{anchor}">{_plain_text_link_body(body)}</ac:link>'


def page_link_macro(page: str, body: str, anchor: Optional[str] = None) -> str:
    """Render a link to another page, optionally to an anchor on it.

    ``page`` is the referenced page's file (``other.html``); the publisher
    swaps it for the page title once all titles are known.
    """
    attrs = render_attributes({"ac:anchor": anchor})
    return (
        f"<ac:link{attrs}>"
        f'<ri:page ri:content-title="{page}"></ri:page>'
        f"{_plain_text_link_body(body)}"
        "</ac:link>"
    )


def jira_issue_macro(key: str, server: Optional[str] = None) -> str:
    """Render a reference to an issue in an external tracker.

    Examples
    --------
        >>> macro = jira_issue_macro("PROJ-42")
        >>> macro.startswith('<ac:structured-macro ac:name="jira" ac:schema-version="1">')
        True
        >>> '<ac:parameter ac:name="key">PROJ-42</ac:parameter>' in macro
        True

    """
    inner = _parameter("key", key) + _optional_parameter("server", server)
    return _structured_macro("jira", inner, schema_version=JIRA_SCHEMA_VERSION)


def code_macro(code: str, language: Optional[str] = None, title: Optional[str] = None) -> str:
    """Render a code macro with an optional title and highlighting language."""
    inner = (
        _optional_parameter("title", title)
        + _optional_parameter("language", language)
        + f"<ac:plain-text-body>{cdata(code)}</ac:plain-text-body>"
    )
    return _structured_macro("code", inner)


def noformat_macro(code: str) -> str:
    """Render a preformatted block without highlighting."""
    return _structured_macro("noformat", f"<ac:plain-text-body>{cdata(code)}</ac:plain-text-body>")


def admonition_macro_name(style: str) -> str:
    """Map an admonition style (``NOTE``, ``TIP``...) to its panel macro.

    Examples
    --------
        >>> admonition_macro_name("WARNING")
        'note'

    """
    return ADMONITION_MACROS.get(style.upper(), "info")


def admonition_macro(macro_name: str, body: str, title: Optional[str] = None) -> str:
    """Render an info/note/tip/warning panel.

    Parameters
    ----------
    macro_name : str
        Panel macro (``info``, ``note``, ``tip`` or ``warning``); anything
        else renders as ``info``
    body : str
        Rendered rich-text content
    title : str or None, default = None
        Panel title

    """
    if macro_name not in ADMONITION_MACRO_NAMES:
        macro_name = "info"
    inner = _optional_parameter("title", title) + f"<ac:rich-text-body>{body}</ac:rich-text-body>"
    return _structured_macro(macro_name, inner)


def attachment_image_macro(
    filename: str,
    width: Optional[Union[int, str]] = None,
    height: Optional[Union[int, str]] = None,
) -> str:
    """Render an image stored as a page attachment.

    Examples
    --------
        >>> attachment_image_macro("sunset.jpg", width=300, height=200)
        '<ac:image ac:height="200" ac:width="300"><ri:attachment ri:filename="sunset.jpg"></ri:attachment></ac:image>'

    """
    attrs = render_attributes({"ac:height": height, "ac:width": width})
    return f'<ac:image{attrs}><ri:attachment ri:filename="{filename}"></ri:attachment></ac:image>'


def url_image_macro(
    url: str,
    width: Optional[Union[int, str]] = None,
    height: Optional[Union[int, str]] = None,
) -> str:
    """Render an image loaded from an external URL."""
    attrs = render_attributes({"ac:height": height, "ac:width": width})
    return f'<ac:image{attrs}><ri:url ri:value="{url}"></ri:url></ac:image>'
