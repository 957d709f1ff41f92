#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoc2confluence/renderers/confluence.py
"""Confluence storage-format rendering of individual document nodes.

This module provides the ConfluenceRenderer class, which maps the attributes
of a single node (inline span, anchor, footnote, listing, admonition, image,
section heading) to a Confluence storage-format fragment. The renderer keeps
no state between calls beyond its immutable options and document context, so
one instance can serve every node of a document, from several threads.

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from adoc2confluence.ast.nodes import DocumentContext, DocumentNode, SectionNode
from adoc2confluence.ast.sections import section_level, section_title
from adoc2confluence.constants import MAX_HEADING_LEVEL
from adoc2confluence.exceptions import ValidationError
from adoc2confluence.languages import normalize_language, resolve_code_language
from adoc2confluence.macros import (
    admonition_macro,
    admonition_macro_name,
    anchor_link_macro,
    anchor_macro,
    attachment_image_macro,
    code_macro,
    jira_issue_macro,
    noformat_macro,
    page_link_macro,
    url_image_macro,
)
from adoc2confluence.options.confluence import ConfluenceRendererOptions
from adoc2confluence.quotes import format_inline_quoted
from adoc2confluence.renderers.base import BaseRenderer
from adoc2confluence.utils.footnotes import footnote_def_id, footnote_ref_id
from adoc2confluence.utils.styles import style_value
from adoc2confluence.utils.tags import html_tag, html_tag_if
from adoc2confluence.xref import (
    anchor_name,
    is_cross_page_anchor_xref,
    is_cross_page_xref,
    looks_like_uri,
    page_reference,
    xref_text,
)

logger = logging.getLogger(__name__)


class ConfluenceRenderer(BaseRenderer):
    """Render document nodes to Confluence storage-format fragments.

    Parameters
    ----------
    options : ConfluenceRendererOptions or None, default = None
        Confluence rendering options
    context : DocumentContext or None, default = None
        Per-document context; when omitted, an empty context numbering up to
        ``options.sectnumlevels`` is used

    Examples
    --------
    Basic usage:

        >>> from adoc2confluence.ast import DocumentNode
        >>> from adoc2confluence.renderers.confluence import ConfluenceRenderer
        >>> renderer = ConfluenceRenderer()
        >>> renderer.render_inline_quoted(DocumentNode(text="Bold", type="strong"))
        '<strong>Bold</strong>'

    """

    def __init__(
        self,
        options: ConfluenceRendererOptions | None = None,
        context: DocumentContext | None = None,
    ):
        """Initialize the Confluence renderer with options and context."""
        BaseRenderer._validate_options_type(options, ConfluenceRendererOptions, "confluence")
        options = options or ConfluenceRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: ConfluenceRendererOptions = options
        self.context = context or DocumentContext(sectnumlevels=options.sectnumlevels)

    def render_node(self, kind: str, node: Any, **kwargs: Any) -> str:
        """Dispatch to ``render_<kind>``.

        Raises
        ------
        ValidationError
            If no renderer method exists for ``kind``

        """
        method: Optional[Callable[..., str]] = getattr(self, f"render_{kind}", None)
        if method is None or kind == "node":
            raise ValidationError(f"Unknown node kind: {kind!r}", parameter_name="kind", parameter_value=kind)
        return method(node, **kwargs)

    # -------------------------------------------------------------------------
    # Inline nodes
    # -------------------------------------------------------------------------

    def render_inline_quoted(self, node: DocumentNode) -> str:
        """Render an emphasis/strong/code/... span."""
        fragment = format_inline_quoted(node.type, node.text or "", id=node.id, role=node.role)
        return self._finish(fragment, "inline_quoted")

    def render_inline_anchor(self, node: DocumentNode) -> str:
        """Render a cross-reference, inline anchor, bibliography anchor or link.

        Parameters
        ----------
        node : DocumentNode
            Anchor node; ``type`` is one of ``xref``, ``ref``, ``bibref`` or
            ``link``. Other types render as their plain text.

        Returns
        -------
        str
            Storage-format fragment

        """
        if node.type == "xref":
            fragment = self._render_xref(node)
        elif node.type == "ref":
            fragment = anchor_macro(node.id or node.target or "")
        elif node.type == "bibref":
            bib_id = node.id or node.target or ""
            fragment = f"{anchor_macro(bib_id)}[{node.text or bib_id}]"
        elif node.type == "link":
            fragment = self._render_link(node)
        else:
            logger.debug("Unknown inline anchor type %r, rendering text only", node.type)
            fragment = node.text or ""
        return self._finish(fragment, "inline_anchor")

    def _render_xref(self, node: DocumentNode) -> str:
        target = node.target or ""
        text = xref_text(node, self.context)

        if looks_like_uri(target):
            return html_tag("a", {"href": target}, text or target)

        if is_cross_page_xref(target):
            anchor = anchor_name(target) if is_cross_page_anchor_xref(target) else None
            page = page_reference(target)
            return page_link_macro(page, text or page, anchor=anchor)

        anchor = anchor_name(target) if target else (node.refid or "")
        return anchor_link_macro(anchor, text or f"[{anchor}]")

    def _render_link(self, node: DocumentNode) -> str:
        target = node.target or ""
        window = node.attr("window")
        if window is None and looks_like_uri(target):
            window = self.options.external_link_target

        attrs = {
            "href": target,
            "class": node.roles,
            "title": node.attr("title"),
            "target": window,
        }
        return html_tag("a", attrs, node.text or target)

    def render_jira_issue(self, node: DocumentNode) -> str:
        """Render an issue-tracker reference (``jira:KEY[server]``)."""
        return self._finish(jira_issue_macro(node.target or "", node.attr("server")), "jira_issue")

    # -------------------------------------------------------------------------
    # Footnotes
    # -------------------------------------------------------------------------

    def _superscript(self, content: str) -> str:
        return html_tag("sup", None, content) if self.options.footnote_superscript else content

    def render_footnote_reference(self, node: DocumentNode) -> str:
        """Render a footnote marker in the running text.

        The node carries the footnote number in its ``index`` attribute. The
        first reference (``type`` other than ``xref``) also gets the anchor the
        definition links back to. Without an index the footnote is unresolved
        and only its text is shown.

        Raises
        ------
        ValidationError
            If the ``index`` attribute is not a positive integer

        """
        index_attr = node.attr("index")
        if index_attr is None:
            logger.debug("Unresolved footnote reference %r", node.text)
            return self._finish(f"[{node.text or ''}]", "footnote_reference")

        try:
            index = int(index_attr)
            def_id, ref_id = footnote_def_id(index), footnote_ref_id(index)
        except ValueError as e:
            raise ValidationError(
                f"Footnote index must be a positive integer, got {index_attr!r}",
                parameter_name="index",
                parameter_value=index_attr,
                original_error=e,
            ) from e

        marker = self._superscript(f"[{anchor_link_macro(def_id, str(index))}]")
        if node.type != "xref":
            marker = anchor_macro(ref_id) + marker
        return self._finish(marker, "footnote_reference")

    def render_footnote_definition(self, index: int, body: str) -> str:
        """Render a footnote definition with a link back to its first reference."""
        backlink = self._superscript(f"[{anchor_link_macro(footnote_ref_id(index), str(index))}]")
        fragment = html_tag("p", None, f"{anchor_macro(footnote_def_id(index))}{backlink} {body}")
        return self._finish(fragment, "footnote_definition")

    # -------------------------------------------------------------------------
    # Blocks
    # -------------------------------------------------------------------------

    def code_language(self, language: Optional[str]) -> Optional[str]:
        """Return the code macro language for a listing, per the options."""
        resolved = resolve_code_language(language, normalize=self.options.normalize_languages)
        if resolved is None and language and self.options.unsupported_language_mode == "pass-through":
            return normalize_language(language) if self.options.normalize_languages else language
        return resolved

    def render_listing(self, node: DocumentNode) -> str:
        """Render a listing block.

        Source listings (``type == "source"``) become a ``code`` macro, with a
        language parameter when one can be resolved; other listings become a
        ``noformat`` macro.
        """
        code = node.text or ""
        if node.type == "source":
            fragment = code_macro(code, self.code_language(node.attr("language")), title=node.attr("title"))
        else:
            fragment = noformat_macro(code)
        return self._finish(fragment, "listing")

    def render_admonition(self, node: DocumentNode, body: str = "") -> str:
        """Render an admonition block (NOTE, TIP...) as a panel macro."""
        style = node.attr("name") or node.type or "NOTE"
        fragment = admonition_macro(admonition_macro_name(style), body, title=node.attr("title"))
        return self._finish(fragment, "admonition")

    def render_image(self, node: DocumentNode) -> str:
        """Render a block image stored as an attachment or loaded from a URL."""
        target = node.target or ""
        width, height = node.attr("width"), node.attr("height")
        link = node.attr("link")
        style = style_value({"text_align": node.attr("align"), "float": node.attr("float")})

        def image() -> str:
            if looks_like_uri(target):
                return url_image_macro(target, width=width, height=height)
            return attachment_image_macro(target, width=width, height=height)

        def linked_image() -> str:
            return html_tag_if(link, "a", {"href": link}, image)

        fragment = html_tag_if(style, "p", {"style": style}, linked_image)
        return self._finish(fragment, "image")

    def render_section_heading(self, section: SectionNode, body: str = "") -> str:
        """Render a section heading followed by its already-rendered body."""
        level = max(1, min(section_level(section), MAX_HEADING_LEVEL))
        anchor = anchor_macro(section.id) if section.id else ""
        heading = html_tag(f"h{level}", None, f"{anchor}{section_title(section, self.context)}")
        return self._finish(heading + body, "section_heading")
