#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for inline quoted text rendering."""

import pytest

from adoc2confluence.quotes import format_inline_quoted, quote_tags


@pytest.mark.unit
class TestQuoteTags:
    """Tests for the quote tag lookup."""

    def test_native_tag(self) -> None:
        """Test a type backed by a real element."""
        assert quote_tags("strong") == ("<strong>", "</strong>", True)

    def test_unknown_type(self) -> None:
        """Test the empty default for unknown types."""
        assert quote_tags("sparkle") == ("", "", False)
        assert quote_tags(None) == ("", "", False)


@pytest.mark.unit
class TestPlainSpans:
    """Tests for spans without id or role."""

    @pytest.mark.parametrize(
        "span_type,expected",
        [
            ("emphasis", "<em>x</em>"),
            ("strong", "<strong>x</strong>"),
            ("monospaced", "<code>x</code>"),
            ("mark", "<mark>x</mark>"),
            ("superscript", "<sup>x</sup>"),
            ("subscript", "<sub>x</sub>"),
            ("double", "&#8220;x&#8221;"),
            ("single", "&#8216;x&#8217;"),
            ("unquoted", "x"),
        ],
    )
    def test_type_tags(self, span_type: str, expected: str) -> None:
        """Test the open/close tags of each type."""
        assert format_inline_quoted(span_type, "x") == expected


@pytest.mark.unit
class TestIdPrecedence:
    """Tests for spans carrying an id."""

    def test_id_spliced_into_native_tag(self) -> None:
        """Test that the id goes into the native opening tag."""
        assert format_inline_quoted("strong", "x", id="s1") == '<strong id="s1">x</strong>'

    def test_id_and_role_on_native_tag(self) -> None:
        """Test that id and class are both spliced in."""
        assert format_inline_quoted("emphasis", "x", id="e1", role="lead") == '<em id="e1" class="lead">x</em>'

    def test_id_on_non_native_type(self) -> None:
        """Test that a span wraps non-native types."""
        assert format_inline_quoted("double", "x", id="q1") == '<span id="q1">&#8220;x&#8221;</span>'

    def test_id_beats_role_alias(self) -> None:
        """Test that an id takes precedence over role aliases."""
        result = format_inline_quoted("unquoted", "x", id="u1", role="underline")
        assert result == '<span id="u1" class="underline">x</span>'


@pytest.mark.unit
class TestRolePrecedence:
    """Tests for spans carrying a role but no id."""

    def test_role_on_native_tag(self) -> None:
        """Test that a role becomes the class of the native tag."""
        assert format_inline_quoted("mark", "x", role="big") == '<mark class="big">x</mark>'

    def test_native_tag_beats_role_alias(self) -> None:
        """Test that strike-through on a strong span keeps the strong tag."""
        result = format_inline_quoted("strong", "x", role="strike-through")
        assert result == '<strong class="strike-through">x</strong>'
        assert "<s>" not in result

    @pytest.mark.parametrize(
        "role,expected",
        [("strike-through", "<s>x</s>"), ("line-through", "<del>x</del>"), ("underline", "<u>x</u>")],
    )
    def test_role_aliases_without_native_tag(self, role: str, expected: str) -> None:
        """Test the fixed wrappers for recognized style roles."""
        assert format_inline_quoted("unquoted", "x", role=role) == expected

    def test_role_alias_bypasses_type_tags(self) -> None:
        """Test that aliases wrap the raw text, dropping the type's delimiters."""
        assert format_inline_quoted("double", "x", role="underline") == "<u>x</u>"

    def test_unknown_role_without_native_tag(self) -> None:
        """Test the generic span wrapper around the type's tags."""
        assert format_inline_quoted("single", "x", role="fancy") == '<span class="fancy">&#8216;x&#8217;</span>'
