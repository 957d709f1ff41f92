#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/adoc2confluence/renderers/__init__.py
"""Node renderers producing Confluence storage-format fragments.

Examples
--------
    >>> from adoc2confluence.ast import DocumentNode
    >>> from adoc2confluence.renderers import ConfluenceRenderer
    >>> ConfluenceRenderer().render_node("inline_quoted", DocumentNode(text="Note", type="emphasis"))
    '<em>Note</em>'

"""

from adoc2confluence.renderers.base import BaseRenderer
from adoc2confluence.renderers.confluence import ConfluenceRenderer

__all__ = ["BaseRenderer", "ConfluenceRenderer"]
