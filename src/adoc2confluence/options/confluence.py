#  Copyright (c) 2025 Tom Villani, Ph.D.
# adoc2confluence/options/confluence.py
"""Configuration options for Confluence storage-format rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import get_args

from adoc2confluence.constants import (
    DEFAULT_FOOTNOTE_SUPERSCRIPT,
    DEFAULT_NORMALIZE_LANGUAGES,
    DEFAULT_SECTNUMLEVELS,
    DEFAULT_UNSUPPORTED_LANGUAGE_MODE,
    UnsupportedLanguageMode,
)
from adoc2confluence.options.base import BaseRendererOptions


@dataclass(frozen=True)
class ConfluenceRendererOptions(BaseRendererOptions):
    """Configuration options for Confluence storage-format rendering.

    Parameters
    ----------
    sectnumlevels : int, default 3
        Deepest numbered section level, used when the renderer is created
        without a DocumentContext.
    normalize_languages : bool, default True
        Map source languages onto the code macro vocabulary (``python`` to
        ``py``, ``hpp`` to ``cpp``...) before checking support.
    unsupported_language_mode : {"omit", "pass-through"}, default "omit"
        What to do with a listing language the code macro does not know:
        - "omit": render the code macro without a language parameter
        - "pass-through": emit the language anyway and let Confluence decide
    footnote_superscript : bool, default True
        Wrap footnote markers in ``<sup>``.
    external_link_target : str or None, default None
        ``target`` attribute added to links whose target looks like a URI,
        unless the node asks for a window of its own.

    Examples
    --------
        >>> from adoc2confluence.renderers.confluence import ConfluenceRenderer
        >>> options = ConfluenceRendererOptions(unsupported_language_mode="pass-through")
        >>> renderer = ConfluenceRenderer(options)

    """

    sectnumlevels: int = field(
        default=DEFAULT_SECTNUMLEVELS,
        metadata={"help": "Deepest section level that shows its number", "importance": "core"},
    )
    normalize_languages: bool = field(
        default=DEFAULT_NORMALIZE_LANGUAGES,
        metadata={
            "help": "Map listing languages onto the code macro vocabulary",
            "importance": "core",
        },
    )
    unsupported_language_mode: UnsupportedLanguageMode = field(
        default=DEFAULT_UNSUPPORTED_LANGUAGE_MODE,
        metadata={
            "help": "Unsupported listing languages: omit the parameter or pass it through",
            "importance": "core",
        },
    )
    footnote_superscript: bool = field(
        default=DEFAULT_FOOTNOTE_SUPERSCRIPT,
        metadata={"help": "Render footnote markers as superscript", "importance": "advanced"},
    )
    external_link_target: str | None = field(
        default=None,
        metadata={"help": "Target window for links to external URIs (e.g. _blank)", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if self.sectnumlevels < 0:
            raise ValueError(f"sectnumlevels must be non-negative, got {self.sectnumlevels}")

        if self.unsupported_language_mode not in get_args(UnsupportedLanguageMode):
            raise ValueError(
                f"unsupported_language_mode must be one of {get_args(UnsupportedLanguageMode)}, "
                f"got {self.unsupported_language_mode!r}"
            )
