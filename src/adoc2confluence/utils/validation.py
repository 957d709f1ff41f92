#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoc2confluence/utils/validation.py
"""Well-formedness checks for storage-format fragments."""

from __future__ import annotations

import logging
import re

import defusedxml.ElementTree as ET

from adoc2confluence.constants import VOID_ELEMENTS
from adoc2confluence.exceptions import RenderingError

logger = logging.getLogger(__name__)

STORAGE_NAMESPACES = {
    "ac": "http://atlassian.com/content",
    "ri": "http://atlassian.com/resource/identifier",
}

# Void elements are emitted HTML-style (<br>); close them before parsing as XML
_VOID_OPEN_TAG = re.compile(
    r"<(" + "|".join(sorted(VOID_ELEMENTS)) + r")\b((?:[^>\"']|\"[^\"]*\"|'[^']*')*?)(?<!/)>"
)


def _wrap_fragment(fragment: str) -> str:
    xmlns = " ".join(f'xmlns:{prefix}="{uri}"' for prefix, uri in STORAGE_NAMESPACES.items())
    closed = _VOID_OPEN_TAG.sub(r"<\1\2/>", fragment)
    return f"<fragment {xmlns}>{closed}</fragment>"


def is_well_formed(fragment: str) -> bool:
    """Check whether ``fragment`` parses as XML in the storage-format namespaces.

    Parameters
    ----------
    fragment : str
        Concatenable markup fragment (no surrounding document element)

    Returns
    -------
    bool
        True if the fragment is well-formed

    """
    try:
        ET.fromstring(_wrap_fragment(fragment))
    except ET.ParseError as exc:
        logger.debug("Fragment is not well-formed: %s", exc)
        return False
    return True


def validate_fragment(fragment: str, rendering_stage: str | None = None) -> str:
    """Return ``fragment`` unchanged, or raise if it is not well-formed.

    Raises
    ------
    RenderingError
        If the fragment cannot be parsed

    """
    try:
        ET.fromstring(_wrap_fragment(fragment))
    except ET.ParseError as exc:
        raise RenderingError(
            f"Rendered fragment is not well-formed XML: {exc}",
            rendering_stage=rendering_stage,
            fragment=fragment,
            original_error=exc,
        ) from exc
    return fragment
