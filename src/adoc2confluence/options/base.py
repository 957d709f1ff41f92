"""Base classes for renderer options.

This module defines the foundation classes for the format-specific options
used by the adoc2confluence renderers.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from adoc2confluence.constants import DEFAULT_VALIDATE_FRAGMENTS


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    validate_fragments : bool, default=False
        Parse every rendered fragment as XML and raise RenderingError when it
        is not well-formed. Meant for test suites and debugging; it costs a
        parse per fragment.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """

    validate_fragments: bool = field(
        default=DEFAULT_VALIDATE_FRAGMENTS,
        metadata={
            "help": "Raise RenderingError when a rendered fragment is not well-formed XML",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate base renderer options."""
        pass
