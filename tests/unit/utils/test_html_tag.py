#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for markup element construction."""

import pytest

from adoc2confluence.utils.tags import html_tag, html_tag_if, render_attributes


@pytest.mark.unit
class TestRenderAttributes:
    """Tests for attribute serialization."""

    def test_blank_values_are_dropped(self) -> None:
        """Test that None, False and empty values produce no attribute string."""
        assert render_attributes({"id": None, "class": [], "title": "", "hidden": False}) == ""

    def test_true_renders_bare_attribute(self) -> None:
        """Test that boolean True renders the attribute name alone."""
        assert render_attributes({"controls": True}) == " controls"

    def test_sequences_are_space_joined(self) -> None:
        """Test that list values are joined with single spaces, skipping None."""
        assert render_attributes({"class": ["a", None, "b"]}) == ' class="a b"'

    def test_order_is_preserved(self) -> None:
        """Test that attributes keep the mapping order."""
        assert render_attributes({"b": "2", "a": "1"}) == ' b="2" a="1"'

    def test_values_are_not_escaped(self) -> None:
        """Test that pre-escaped values pass through untouched."""
        assert render_attributes({"title": "a &amp; b"}) == ' title="a &amp; b"'

    def test_numbers_are_quoted(self) -> None:
        """Test that non-string scalar values are stringified and quoted."""
        assert render_attributes({"width": 300}) == ' width="300"'


@pytest.mark.unit
class TestHtmlTag:
    """Tests for html_tag."""

    def test_element_with_content(self) -> None:
        """Test a regular element with attributes and content."""
        assert html_tag("a", {"href": "#top"}, "Top") == '<a href="#top">Top</a>'

    def test_element_without_attributes(self) -> None:
        """Test a regular element without attributes."""
        assert html_tag("p", {"class": None}, "x") == "<p>x</p>"

    def test_void_element_ignores_content(self) -> None:
        """Test that void elements render an open tag only."""
        assert html_tag("img", {"src": "x.png"}, "ignored") == '<img src="x.png">'

    def test_void_element_never_calls_factory(self) -> None:
        """Test that the content factory is not invoked for void elements."""

        def factory() -> str:
            raise AssertionError("factory must not be called")

        assert html_tag("br", None, content_factory=factory) == "<br>"

    @pytest.mark.parametrize("name", ["command", "keygen", "wbr", "hr", "param"])
    def test_legacy_and_other_void_elements(self, name: str) -> None:
        """Test that legacy void elements also render without a closing tag."""
        assert html_tag(name, {}) == f"<{name}>"

    def test_factory_provides_content_lazily(self) -> None:
        """Test that the factory output becomes the body when no content is given."""
        calls = []

        def factory() -> str:
            calls.append(1)
            return "<em>x</em>"

        assert html_tag("span", None, content_factory=factory) == "<span><em>x</em></span>"
        assert calls == [1]

    def test_explicit_content_wins_over_factory(self) -> None:
        """Test that explicit content skips the factory."""

        def factory() -> str:
            raise AssertionError("factory must not be called")

        assert html_tag("span", None, "body", content_factory=factory) == "<span>body</span>"

    def test_no_content_at_all(self) -> None:
        """Test an element with neither content nor factory."""
        assert html_tag("div", {"id": "x"}) == '<div id="x"></div>'


@pytest.mark.unit
class TestHtmlTagIf:
    """Tests for conditional wrapping."""

    def test_wraps_when_condition_holds(self) -> None:
        """Test that a truthy condition wraps the content."""
        result = html_tag_if("http://example.org", "a", {"href": "http://example.org"}, lambda: "<b>x</b>")
        assert result == '<a href="http://example.org"><b>x</b></a>'

    def test_returns_content_alone_otherwise(self) -> None:
        """Test that a falsy condition returns only the content."""
        assert html_tag_if(None, "a", {"href": "x"}, lambda: "<b>x</b>") == "<b>x</b>"
