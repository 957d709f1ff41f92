"""Property-based fuzzing tests for the formatting helpers.

This test module uses Hypothesis to generate random language tokens,
anchor targets, footnote numbers and link texts, and checks that the
helpers keep their guarantees for every input.

Test Coverage:
- Language normalization never fails and aliases land in the code macro set
- Footnote identifiers are distinct per number and stable across calls
- Drive letters are never mistaken for URI schemes
- Blank attributes never reach the rendered tag
- Cross-reference text never contains newlines
- Link and code bodies stay well-formed whatever their content
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from adoc2confluence.ast import DocumentContext, DocumentNode
from adoc2confluence.constants import LANGUAGE_ALIASES, SUPPORTED_LANGUAGES
from adoc2confluence.languages import normalize_language, resolve_code_language
from adoc2confluence.macros import anchor_link_macro, code_macro
from adoc2confluence.utils.escape import escape_xml_text
from adoc2confluence.utils.footnotes import footnote_def_id, footnote_ref_id
from adoc2confluence.utils.tags import html_tag
from adoc2confluence.utils.validation import is_well_formed
from adoc2confluence.xref import looks_like_uri, xref_text

# Characters XML 1.0 can carry (no control characters, surrogates or non-characters)
xml_text = st.text(
    alphabet=st.characters(blacklist_categories=("Cc", "Cs", "Cn")),
    max_size=200,
)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestLanguageFuzzing:
    """Property-based tests for code language resolution."""

    @given(st.text(max_size=30))
    def test_normalize_is_total(self, token):
        """Test that any token normalizes to a string without raising."""
        assert isinstance(normalize_language(token), str)

    @given(st.sampled_from(sorted(LANGUAGE_ALIASES)))
    def test_aliases_are_supported(self, alias):
        """Test that every alias resolves to a code macro language."""
        assert resolve_code_language(alias) in SUPPORTED_LANGUAGES

    @given(st.text(max_size=30))
    def test_resolved_language_is_supported_or_none(self, token):
        """Test that resolution never yields an unsupported language."""
        resolved = resolve_code_language(token)
        assert resolved is None or resolved in SUPPORTED_LANGUAGES


@pytest.mark.unit
@pytest.mark.fuzzing
class TestFootnoteIdFuzzing:
    """Property-based tests for footnote anchor identifiers."""

    @given(st.integers(min_value=1), st.integers(min_value=1))
    def test_distinct_numbers_get_distinct_ids(self, first, second):
        """Test that identifiers only collide for equal numbers."""
        assert (footnote_def_id(first) == footnote_def_id(second)) == (first == second)
        assert footnote_def_id(first) != footnote_ref_id(first)

    @given(st.integers(min_value=1))
    def test_ids_are_stable(self, index):
        """Test that the same number always yields the same identifier."""
        assert footnote_def_id(index) == footnote_def_id(index)
        assert footnote_ref_id(index).endswith(str(index))

    @given(st.integers(max_value=0))
    def test_non_positive_numbers_rejected(self, index):
        """Test that footnote numbers start at 1."""
        with pytest.raises(ValueError):
            footnote_def_id(index)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestUriSniffingFuzzing:
    """Property-based tests for URI detection."""

    @given(st.characters(whitelist_categories=("Lu", "Ll")), st.text(max_size=50))
    def test_drive_letters_are_not_uris(self, letter, rest):
        """Test that a single letter before the colon is never a scheme."""
        assert not looks_like_uri(f"{letter}:{rest}")

    @given(st.text(alphabet=st.characters(blacklist_characters=":"), max_size=50))
    def test_no_colon_is_not_uri(self, value):
        """Test that values without a colon are never URIs."""
        assert not looks_like_uri(value)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestMarkupFuzzing:
    """Property-based tests for generated markup."""

    @given(st.dictionaries(st.sampled_from(["class", "id", "title"]), st.sampled_from([None, False, "", [], ()])))
    def test_blank_attributes_dropped(self, attributes):
        """Test that blank attribute values leave a bare tag."""
        assert html_tag("span", attributes, "x") == "<span>x</span>"

    @given(st.text(max_size=200), st.one_of(st.none(), st.text(max_size=200)))
    def test_xref_text_has_no_newlines(self, reference, text):
        """Test that resolved reference text is always a single line."""
        context = DocumentContext(references={"ref": reference})
        node = DocumentNode(text=text, type="xref", attributes={"refid": "ref"})
        result = xref_text(node, context)
        assert result is None or "\n" not in result

    @given(xml_text)
    def test_link_body_well_formed(self, body):
        """Test that any link body survives the CDATA wrapper."""
        assert is_well_formed(anchor_link_macro("target", body))

    @given(xml_text)
    def test_code_body_well_formed(self, code):
        """Test that listings containing CDATA terminators stay well-formed."""
        assert is_well_formed(code_macro(code + "]]>", "java"))

    @given(xml_text)
    def test_escaped_text_well_formed(self, text):
        """Test that escaped text can be placed inside an element."""
        assert is_well_formed(html_tag("p", None, escape_xml_text(text)))
