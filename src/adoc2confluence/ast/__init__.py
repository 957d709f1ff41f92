#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoc2confluence/ast/__init__.py
"""Node views and section helpers consumed by the Confluence renderer.

Examples
--------
    >>> from adoc2confluence.ast import DocumentNode
    >>> node = DocumentNode(text="bold", type="strong", role="lead")
    >>> node.has_role("lead")
    True

"""

from adoc2confluence.ast.nodes import DocumentContext, DocumentNode, SectionNode
from adoc2confluence.ast.sections import section_level, section_title

__all__ = [
    "DocumentContext",
    "DocumentNode",
    "SectionNode",
    "section_level",
    "section_title",
]
