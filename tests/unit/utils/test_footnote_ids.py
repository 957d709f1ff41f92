#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for footnote identifiers."""

import pytest

from adoc2confluence.utils.footnotes import footnote_def_id, footnote_ref_id


@pytest.mark.unit
class TestFootnoteIds:
    """Tests for footnote_def_id and footnote_ref_id."""

    def test_definition_id(self) -> None:
        """Test the definition id format."""
        assert footnote_def_id(1) == "_footnotedef_1"

    def test_reference_id(self) -> None:
        """Test the back-reference id format."""
        assert footnote_ref_id(12) == "_footnoteref_12"

    def test_distinct_indices_give_distinct_ids(self) -> None:
        """Test that different indices never collide."""
        assert footnote_def_id(1) != footnote_def_id(2)
        assert footnote_ref_id(1) != footnote_ref_id(2)

    def test_definition_and_reference_differ(self) -> None:
        """Test that the two ids for one footnote are different anchors."""
        assert footnote_def_id(3) != footnote_ref_id(3)

    def test_idempotent(self) -> None:
        """Test that the same index always yields the same id."""
        assert footnote_def_id(5) == footnote_def_id(5)

    @pytest.mark.parametrize("index", [0, -1, True, "1", 1.0])
    def test_invalid_index(self, index) -> None:
        """Test that non-positive or non-integer indices are rejected."""
        with pytest.raises(ValueError):
            footnote_def_id(index)
