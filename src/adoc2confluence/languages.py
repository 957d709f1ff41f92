#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoc2confluence/languages.py
"""Source-language normalization for the Confluence code macro.

Syntax highlighters report languages by many names (``python``, ``py3``,
``c++``...), while the code macro accepts a fixed, closed vocabulary. Callers
normalize a token first and then check support before asking Confluence to
highlight a listing.

"""

from __future__ import annotations

import logging
from typing import Optional

from adoc2confluence.constants import LANGUAGE_ALIASES, SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)


def is_supported_language(token: Optional[str]) -> bool:
    """Check whether the code macro accepts ``token`` as-is.

    Examples
    --------
        >>> is_supported_language("py")
        True
        >>> is_supported_language("python")
        False

    """
    return token in SUPPORTED_LANGUAGES


def normalize_language(token: str) -> str:
    """Map a language token onto the code macro vocabulary.

    The lookup is exact and case-sensitive. Tokens without an alias are
    returned unchanged, whether or not the code macro supports them.

    Parameters
    ----------
    token : str
        Language reported by the highlighter or the listing's attributes

    Returns
    -------
    str
        Supported language token, or ``token`` itself

    Examples
    --------
        >>> normalize_language("javascript")
        'js'
        >>> normalize_language("hpp")
        'cpp'
        >>> normalize_language("unknown-lang")
        'unknown-lang'

    """
    return LANGUAGE_ALIASES.get(token, token)


def resolve_code_language(token: Optional[str], normalize: bool = True) -> Optional[str]:
    """Return the code macro language for ``token``, or None if unsupported.

    Parameters
    ----------
    token : str or None
        Listing language
    normalize : bool, default True
        Apply :func:`normalize_language` before the support check

    Returns
    -------
    str or None
        Supported language token

    """
    if not token:
        return None

    language = normalize_language(token) if normalize else token
    if is_supported_language(language):
        return language

    logger.debug("Language %r is not supported by the code macro", token)
    return None
