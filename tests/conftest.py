"""Pytest configuration and shared fixtures for the adoc2confluence test suite."""

import os

import pytest

from adoc2confluence.ast import DocumentContext
from adoc2confluence.options import ConfluenceRendererOptions
from adoc2confluence.renderers.confluence import ConfluenceRenderer

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def document_context() -> DocumentContext:
    """Provide a context with a few registered cross-reference texts.

    Returns
    -------
    DocumentContext
        Context numbering sections down to level 2.

    """
    return DocumentContext.build(
        references={
            "install": "Installation",
            "multi": "Getting\n\nStarted\nNow",
            "_usage": "Usage",
        },
        sectnumlevels="2",
    )


@pytest.fixture
def renderer(document_context) -> ConfluenceRenderer:
    """Provide a renderer that validates every fragment it produces."""
    return ConfluenceRenderer(ConfluenceRendererOptions(validate_fragments=True), context=document_context)
