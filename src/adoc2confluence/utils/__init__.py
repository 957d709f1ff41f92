#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Markup building blocks shared by the Confluence formatting helpers."""

from adoc2confluence.utils.escape import cdata, escape_xml_attribute, escape_xml_text
from adoc2confluence.utils.footnotes import footnote_def_id, footnote_ref_id
from adoc2confluence.utils.styles import style_value
from adoc2confluence.utils.tags import html_tag, html_tag_if, render_attributes
from adoc2confluence.utils.validation import is_well_formed, validate_fragment

__all__ = [
    "cdata",
    "escape_xml_attribute",
    "escape_xml_text",
    "footnote_def_id",
    "footnote_ref_id",
    "html_tag",
    "html_tag_if",
    "is_well_formed",
    "render_attributes",
    "style_value",
    "validate_fragment",
]
