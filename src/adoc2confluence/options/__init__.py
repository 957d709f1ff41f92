#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the adoc2confluence renderers.

Options are frozen dataclasses; use ``create_updated`` (or
``create_updated_options``) to derive a modified copy.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from adoc2confluence.options.base import BaseRendererOptions, CloneFrozenMixin
from adoc2confluence.options.confluence import ConfluenceRendererOptions


def create_updated_options(options: Any, **kwargs: Any) -> Any:
    """Create a new options instance with updated values.

    Parameters
    ----------
    options : Any
        The original options instance (must be a dataclass)
    **kwargs
        Field values to override

    Returns
    -------
    Any
        A new options instance of the same class

    """
    return replace(options, **kwargs)


__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "ConfluenceRendererOptions",
    "create_updated_options",
]
