"""Tests for xmlbuilder.escape."""

import html

import pytest
from hypothesis import given
from hypothesis import strategies as st

from xmlbuilder.escape import ATTR_ESCAPES, TEXT_ESCAPES, escape_attr, escape_text


class TestEscapeText:
    def test_specials(self) -> None:
        assert escape_text("a & b < c > d") == "a &amp; b &lt; c &gt; d"

    def test_quotes_untouched(self) -> None:
        assert escape_text("\"it's\"") == "\"it's\""

    def test_existing_entity_escaped_again(self) -> None:
        assert escape_text("&amp;") == "&amp;amp;"

    def test_empty(self) -> None:
        assert escape_text("") == ""


class TestEscapeAttr:
    def test_specials(self) -> None:
        assert escape_attr('<a href="x">&') == "&lt;a href=&#34;x&#34;&gt;&amp;"

    def test_apostrophe_default(self) -> None:
        assert escape_attr("it's") == "it's"

    def test_apostrophe_opt_in(self) -> None:
        assert escape_attr("it's", apostrophe=True) == "it&#39;s"


class TestTables:
    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            TEXT_ESCAPES[ord("x")] = "y"  # type: ignore[index]

    def test_attr_table_extends_text_table(self) -> None:
        assert set(TEXT_ESCAPES) < set(ATTR_ESCAPES)


safe_text = st.text(alphabet=st.characters(blacklist_characters="&<>\"'"))


class TestEscapeProperties:
    """Escaping is a no-op on clean input and is undone by one unescape."""

    @given(safe_text)
    def test_clean_text_unchanged(self, value: str) -> None:
        assert escape_text(value) == value
        assert escape_attr(value) == value

    @given(st.text())
    def test_single_unescape_restores_text(self, value: str) -> None:
        assert html.unescape(escape_text(value)) == value

    @given(st.text(), st.booleans())
    def test_single_unescape_restores_attr(self, value: str, apostrophe: bool) -> None:
        assert html.unescape(escape_attr(value, apostrophe)) == value
