#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adoc2confluence/renderers/base.py
"""Base class for node renderers.

Renderers turn one node at a time into a markup fragment; the driver that
walks the document tree decides the order and concatenates the results.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from adoc2confluence.exceptions import InvalidOptionsError
from adoc2confluence.options.base import BaseRendererOptions
from adoc2confluence.utils.validation import validate_fragment


class BaseRenderer(ABC):
    """Abstract base class for all node renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from adoc2confluence.renderers.base import BaseRenderer
        >>>
        >>> class UpperRenderer(BaseRenderer):
        ...     def render_node(self, kind, node, **kwargs):
        ...         return (node.text or "").upper()

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options or BaseRendererOptions()

    @abstractmethod
    def render_node(self, kind: str, node: Any, **kwargs: Any) -> str:
        """Render a single node of the given kind.

        Parameters
        ----------
        kind : str
            Node kind, e.g. ``"inline_quoted"`` or ``"listing"``
        node : Any
            Node to render
        **kwargs : Any
            Extra inputs some kinds need (rendered body, footnote index...)

        Returns
        -------
        str
            Markup fragment

        """
        pass

    def _finish(self, fragment: str, rendering_stage: str) -> str:
        """Return ``fragment``, validating it first when options ask for it.

        Raises
        ------
        RenderingError
            If validation is enabled and the fragment is not well-formed

        """
        if self.options.validate_fragments:
            return validate_fragment(fragment, rendering_stage=rendering_stage)
        return fragment

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
