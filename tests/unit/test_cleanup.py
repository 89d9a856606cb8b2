"""Unit tests for tag stripping and whitespace normalisation."""

from pagemd.converter.cleanup import (
    collapse_blank_lines,
    decode_entities,
    normalize_whitespace,
    strip_tags,
)


class TestStripTags:
    def test_unknown_tags_keep_text(self):
        assert strip_tags("<div><span>Hello</span></div>") == "Hello"

    def test_table_flattened(self):
        assert strip_tags("<table><tr><td>a</td><td>b</td></tr></table>") == "ab"

    def test_comments_and_doctype(self):
        assert strip_tags("<!DOCTYPE html><!-- note -->text") == "text"

    def test_bare_angle_brackets_survive(self):
        assert strip_tags("a < b and c > d") == "a < b and c > d"

    def test_attributes_removed_with_tag(self):
        assert strip_tags('<span class="x" data-y="1">z</span>') == "z"


class TestDecodeEntities:
    def test_amp(self):
        assert decode_entities("A &amp; B") == "A & B"

    def test_lt_gt(self):
        assert decode_entities("&lt;div&gt;") == "<div>"

    def test_quotes(self):
        assert decode_entities("&quot;q&quot; it&#39;s") == "\"q\" it's"

    def test_nbsp_becomes_space(self):
        assert decode_entities("a&nbsp;b") == "a b"

    def test_unlisted_entities_unchanged(self):
        assert decode_entities("&copy; 2024 &#8212; &eacute;") == "&copy; 2024 &#8212; &eacute;"

    def test_single_pass(self):
        assert decode_entities("&amp;lt;") == "&lt;"


class TestWhitespace:
    def test_collapse_four_newlines(self):
        assert collapse_blank_lines("a\n\n\n\nb") == "a\n\nb"

    def test_collapse_with_interspersed_whitespace(self):
        assert collapse_blank_lines("a\n \n\t\n\nb") == "a\n\nb"

    def test_single_blank_line_kept(self):
        assert collapse_blank_lines("a\n\nb") == "a\n\nb"

    def test_normalize_trims(self):
        assert normalize_whitespace("\n\n  x  \n\n") == "x"

    def test_normalize_decodes_then_collapses(self):
        assert normalize_whitespace("A &amp; B\n\n\n\nC") == "A & B\n\nC"
