"""Tests for formatters/_wrap.py — greedy word wrap with forced breaks."""

import pytest

from prettycli.exceptions import ConfigError
from prettycli.formatters import visible_length, wrap_text

SENTENCE = (
    "a very long sentence that must wrap across multiple output lines "
    "because it exceeds the column width"
)


class TestWrapText:
    def test_short_text_unchanged(self):
        assert wrap_text("hello world", 20) == ["hello world"]

    def test_exact_width_unchanged(self):
        assert wrap_text("abcde", 5) == ["abcde"]

    def test_fitting_text_keeps_inner_spacing(self):
        # No wrapping happens, so whitespace is not normalized.
        assert wrap_text("a  b", 10) == ["a  b"]

    def test_greedy_packing(self):
        assert wrap_text("aaa bbb ccc ddd", 7) == ["aaa bbb", "ccc ddd"]

    def test_word_that_exactly_fills_line(self):
        assert wrap_text("abc defg hi", 4) == ["abc", "defg", "hi"]

    def test_sentence_lines_within_width(self):
        lines = wrap_text(SENTENCE, 20)
        assert len(lines) > 1
        assert all(visible_length(line) <= 20 for line in lines)

    def test_sentence_words_not_split(self):
        lines = wrap_text(SENTENCE, 20)
        words = [w for line in lines for w in line.split(" ")]
        assert words == SENTENCE.split()

    def test_forced_break_of_long_word(self):
        assert wrap_text("abcdefghij", 4) == ["abcd", "efgh", "ij"]

    def test_forced_break_exact_multiple(self):
        assert wrap_text("abcdefgh", 4) == ["abcd", "efgh"]

    def test_forced_break_flushes_pending_line(self):
        assert wrap_text("hi abcdefghij", 4) == ["hi", "abcd", "efgh", "ij"]

    def test_remainder_accumulates_following_words(self):
        assert wrap_text("abcdefg x y", 5) == ["abcde", "fg x", "y"]

    def test_width_one(self):
        assert wrap_text("ab c", 1) == ["a", "b", "c"]

    def test_tokens_preserved_in_order(self):
        text = "one two three four five six seven"
        for width in range(1, 12):
            lines = wrap_text(text, width)
            assert "".join("".join(lines).split()) == "".join(text.split())

    def test_lines_within_width_for_all_widths(self):
        for width in range(1, 25):
            for line in wrap_text(SENTENCE, width):
                assert len(line) <= width

    def test_no_empty_lines(self):
        lines = wrap_text("  lots   of   spaces   between   words  ", 6)
        assert lines == ["lots", "of", "spaces", "betwee", "n", "words"]

    def test_whitespace_only_wider_than_width(self):
        assert wrap_text("      ", 2) == [""]

    def test_restartable(self):
        assert wrap_text(SENTENCE, 20) == wrap_text(SENTENCE, 20)

    def test_rejects_zero_width(self):
        with pytest.raises(ConfigError):
            wrap_text("abc", 0)
