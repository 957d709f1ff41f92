#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoc2confluence/ast/nodes.py
"""Read-only node views consumed by the Confluence formatting helpers.

The parsing stage (outside this library) produces the document tree and
computes its structure. The renderer only ever sees the attributes of one
node at a time, exposed through the small typed views defined here:

    - DocumentNode: an inline span, anchor, listing or block with its
      text, kind, role, id, target and attribute mapping
    - SectionNode: a section heading with its precomputed numbering
    - DocumentContext: per-render configuration and the cross-reference
      text lookup shared by every node of one document

All three are frozen dataclasses. Mappings handed in by the caller are
copied into read-only proxies so the same context can be read from several
worker threads while a document renders.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from types import MappingProxyType
from typing import Mapping, Optional

from adoc2confluence.constants import DEFAULT_SECTNUMLEVELS


def _freeze(mapping: Mapping[str, str] | None) -> Mapping[str, str]:
    if isinstance(mapping, MappingProxyType):
        return mapping
    return MappingProxyType(dict(mapping or {}))


@dataclass(frozen=True)
class DocumentNode:
    """Attributes of a single document node.

    Parameters
    ----------
    text : str or None, default = None
        Raw inline content of the node
    type : str or None, default = None
        Node kind: the inline span kind for quoted text (``"strong"``,
        ``"emphasis"``...), the anchor kind for anchors (``"xref"``,
        ``"link"``...) or the block style for listings (``"source"``)
    role : str or None, default = None
        Free-form style/class token(s), space separated
    id : str or None, default = None
        Stable identifier, unique within the document
    target : str or None, default = None
        URI, bare ``#anchor``, file reference or file-plus-anchor reference
    attributes : Mapping[str, str], default = empty mapping
        Remaining named attributes (``refid``, ``language``, ``index``...)

    """

    text: Optional[str] = None
    type: Optional[str] = None
    role: Optional[str] = None
    id: Optional[str] = None
    target: Optional[str] = None
    attributes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Replace the attribute mapping with a read-only copy."""
        object.__setattr__(self, "attributes", _freeze(self.attributes))

    def attr(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the named attribute, or ``default`` when it is missing."""
        return self.attributes.get(name, default)

    @property
    def refid(self) -> Optional[str]:
        """Explicit reference id of a cross-reference, if any."""
        return self.attributes.get("refid")

    @property
    def roles(self) -> list[str]:
        """Individual role tokens."""
        return self.role.split() if self.role else []

    def has_role(self, name: str) -> bool:
        """Check whether ``name`` is one of the node's role tokens."""
        return name in self.roles


@dataclass(frozen=True)
class SectionNode:
    """A section heading whose numbering was computed upstream.

    Parameters
    ----------
    level : int
        Nesting level as reported by the parser (0 for the document title
        and for special top-level sections such as appendices)
    title : str
        Section title without any number or caption
    id : str or None, default = None
        Anchor identifier of the section
    special : bool, default = False
        Whether the section is a special section (preface, appendix...)
    numbered : bool, default = False
        Whether the section participates in numbering
    sectnum : str or None, default = None
        Section number, e.g. ``"2.1."``
    caption : str or None, default = None
        Caption prefix, e.g. ``"Appendix A: "``

    """

    level: int
    title: str
    id: Optional[str] = None
    special: bool = False
    numbered: bool = False
    sectnum: Optional[str] = None
    caption: Optional[str] = None

    @property
    def captioned_title(self) -> str:
        """Title prefixed with the caption, when the section has one."""
        return f"{self.caption}{self.title}" if self.caption else self.title

    @cached_property
    def corrected_level(self) -> int:
        """Level used for rendering: special level-0 sections count as level 1.

        Cached on this instance only.
        """
        return 1 if self.level == 0 and self.special else self.level


@dataclass(frozen=True)
class DocumentContext:
    """Per-render configuration shared by every node of a document.

    Parameters
    ----------
    sectnumlevels : int, default = 3
        Deepest section level that still shows its section number
    references : Mapping[str, str], default = empty mapping
        Identifier to cross-reference text lookup

    """

    sectnumlevels: int = DEFAULT_SECTNUMLEVELS
    references: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate the numbering depth and freeze the reference lookup."""
        if self.sectnumlevels < 0:
            raise ValueError(f"sectnumlevels must be non-negative, got {self.sectnumlevels}")
        object.__setattr__(self, "references", _freeze(self.references))

    @classmethod
    def build(
        cls,
        references: Mapping[str, str] | None = None,
        sectnumlevels: int | str | None = None,
    ) -> DocumentContext:
        """Create a context from raw document attributes.

        Parameters
        ----------
        references : Mapping[str, str] or None
            Identifier to text lookup collected by the parser
        sectnumlevels : int, str or None
            Value of the ``sectnumlevels`` document attribute; document
            attributes arrive as strings, ``None`` selects the default

        Returns
        -------
        DocumentContext
            Immutable context ready to be shared across rendering threads

        """
        levels = DEFAULT_SECTNUMLEVELS if sectnumlevels in (None, "") else int(sectnumlevels)
        return cls(sectnumlevels=levels, references=references or {})

    def reference_text(self, refid: Optional[str]) -> Optional[str]:
        """Return the cross-reference text registered for ``refid``."""
        if refid is None:
            return None
        return self.references.get(refid)
