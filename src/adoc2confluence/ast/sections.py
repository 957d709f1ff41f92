#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoc2confluence/ast/sections.py
"""Section level and title helpers.

Functions
---------
section_level : Rendering level of a section, memoized on the node
section_title : Section title, prefixed with its number when numbering applies

"""

from __future__ import annotations

from adoc2confluence.ast.nodes import DocumentContext, SectionNode


def section_level(section: SectionNode) -> int:
    """Return the corrected level of ``section``.

    Level-0 special sections (appendices, prefaces in a book) render as
    level 1. The value is computed once per node instance.

    Parameters
    ----------
    section : SectionNode
        Section to inspect

    Returns
    -------
    int
        Level used for the heading

    """
    return section.corrected_level


def section_title(section: SectionNode, context: DocumentContext | None = None) -> str:
    """Return the section title, numbered when the document asks for it.

    A number is shown only for numbered sections without a caption whose
    level does not exceed the context's ``sectnumlevels``.

    Parameters
    ----------
    section : SectionNode
        Section to title
    context : DocumentContext or None, default = None
        Render context; the default context numbers levels 1 to 3

    Returns
    -------
    str
        Title text, e.g. ``"2.1. Installation"``

    Examples
    --------
        >>> sec = SectionNode(level=2, title="Installation", numbered=True, sectnum="2.1.")
        >>> section_title(sec)
        '2.1. Installation'

    """
    sectnumlevels = (context or DocumentContext()).sectnumlevels

    if section.numbered and not section.caption and section.level <= sectnumlevels and section.sectnum:
        return f"{section.sectnum} {section.captioned_title}"
    return section.captioned_title
