"""Identifiers for footnote definitions and their back-references.

Footnote indices are assigned by the upstream numbering pass; these helpers
only format them. Both the definition anchor and every link pointing at it
go through :func:`footnote_def_id`, so generation and lookup agree.
"""

from __future__ import annotations

from adoc2confluence.constants import FOOTNOTE_DEF_PREFIX, FOOTNOTE_REF_PREFIX


def _check_index(index: int) -> int:
    if isinstance(index, bool) or not isinstance(index, int) or index < 1:
        raise ValueError(f"footnote index must be a positive integer, got {index!r}")
    return index


def footnote_def_id(index: int) -> str:
    """Return the anchor id of footnote definition ``index``.

    Examples
    --------
        >>> footnote_def_id(3)
        '_footnotedef_3'

    """
    return f"{FOOTNOTE_DEF_PREFIX}{_check_index(index)}"


def footnote_ref_id(index: int) -> str:
    """Return the anchor id of the first reference to footnote ``index``.

    Examples
    --------
        >>> footnote_ref_id(3)
        '_footnoteref_3'

    """
    return f"{FOOTNOTE_REF_PREFIX}{_check_index(index)}"
