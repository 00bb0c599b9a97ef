"""Unit tests for the character classifier (bilingual_srt.core.chars).

WHY: Every length and language decision depends on these predicates. A
wrong answer here shows up as a mis-split or a dropped line far away.

HOW: Table-style checks of each predicate, including the edge cases the
rest of the code relies on (empty strings, markup, alignment tags).
"""

import pytest

from bilingual_srt.core.chars import (
    extract_alignment_tag,
    has_alignment_tag,
    has_non_ascii,
    has_target_punctuation,
    is_ascii,
    is_cjk,
    is_punctuation_only,
    is_style_or_music_only,
    meaningful_count,
    strip_markup,
)


class TestAsciiDetection:
    """is_ascii / has_non_ascii over the printable ASCII band."""

    def test_plain_english_is_ascii(self):
        assert is_ascii("My mistake.")

    def test_space_and_tilde_are_in_band(self):
        assert is_ascii(" ~")

    def test_empty_line_is_not_ascii(self):
        assert not is_ascii("")

    def test_tab_is_outside_band(self):
        assert not is_ascii("a\tb")
        assert has_non_ascii("a\tb")

    def test_chinese_is_not_ascii(self):
        assert not is_ascii("看来我错了")
        assert has_non_ascii("看来我错了")

    def test_accented_latin_is_non_ascii(self):
        assert has_non_ascii("café")

    def test_empty_line_has_no_non_ascii(self):
        assert not has_non_ascii("")


class TestScript:

    @pytest.mark.parametrize("ch", ["你", "㐀", "ア", "한"])
    def test_cjk_characters(self, ch):
        assert is_cjk(ch)

    @pytest.mark.parametrize("ch", ["a", "1", "。", "é"])
    def test_non_cjk_characters(self, ch):
        assert not is_cjk(ch)

    def test_target_punctuation_detected(self):
        assert has_target_punctuation("「OK」")
        assert has_target_punctuation("好，")

    def test_curly_quotes_are_not_target_punctuation(self):
        assert not has_target_punctuation("“quoted” text…")


class TestAlignmentTag:
    """extract_alignment_tag() only looks at the start of the line."""

    def test_extracts_leading_tag(self):
        assert extract_alignment_tag("{\\an8}你好") == ("{\\an8}", "你好")

    def test_escaped_variant(self):
        assert extract_alignment_tag("\\{\\an8}Hello") == ("\\{\\an8}", "Hello")

    def test_multi_digit_tag(self):
        assert extract_alignment_tag("{\\an12}x") == ("{\\an12}", "x")

    def test_no_tag(self):
        assert extract_alignment_tag("Hello") == ("", "Hello")

    def test_tag_in_middle_is_ignored(self):
        assert extract_alignment_tag("Hi {\\an8}there") == ("", "Hi {\\an8}there")
        assert not has_alignment_tag("Hi {\\an8}there")


class TestMeaningfulCount:
    """Letters, digits and ideographs count; everything else does not."""

    def test_mixed_text(self):
        assert meaningful_count("你好, world!") == 7

    def test_style_tags_do_not_count(self):
        assert meaningful_count("<i>你好</i>") == 2
        assert meaningful_count('<font color="red">ab</font>') == 2

    def test_alignment_tag_does_not_count(self):
        assert meaningful_count("{\\an8}abc") == 3

    def test_strip_markup(self):
        assert strip_markup("{\\an8}<i>Hi</i>") == "Hi"


class TestPunctuationOnly:

    @pytest.mark.parametrize("text", ["。！", "", "   ", "<i>…</i>", "♪ ♪", "- "])
    def test_punctuation_only(self, text):
        assert is_punctuation_only(text)

    @pytest.mark.parametrize("text", ["a。", "你", "- 好", "3"])
    def test_has_content(self, text):
        assert not is_punctuation_only(text)

    def test_music_and_style_only(self):
        assert is_style_or_music_only("<i>♪ ♪</i>")
        assert is_style_or_music_only("{\\an8}——")

    def test_lyrics_are_not_style_only(self):
        assert not is_style_or_music_only("♪ 你好 ♪")

    @pytest.mark.parametrize("text", ["\U0001F600", "★ ★", "→"])
    def test_other_symbols_are_content(self, text):
        assert not is_style_or_music_only(text)

    def test_ascii_symbols_are_decoration(self):
        assert is_style_or_music_only("<i>~ * # ♪</i>")
