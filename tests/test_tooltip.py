"""Tests for tooltip text formatting."""

import pytest

from voice_map.visualization.tooltip import clean_label, format_tooltip, segment_label


def test_clean_label_collapses_whitespace():
    assert clean_label("  The   cat\t\tsat \n on the mat  ") == "The cat sat on the mat"


def test_clean_label_handles_empty():
    assert clean_label("") == ""
    assert clean_label(None) == ""


def test_segment_label_overlapping_windows():
    lines = segment_label("the quick brown fox jumps over the lazy dog")
    assert lines == [
        "the quick brown fox jumps",
        "quick brown fox jumps over",
        "brown fox jumps over the",
        "fox jumps over the lazy",
        "jumps over the lazy dog",
        "over the lazy dog",
        "the lazy dog",
        "lazy dog",
        "dog",
    ]


def test_segment_label_cleans_first():
    assert segment_label("  a   b  ") == ["a b", "b"]


def test_segment_label_keeps_apostrophes_and_drops_punctuation():
    assert segment_label("It's done.") == ["It's done", "done"]


def test_segment_label_empty_text():
    assert segment_label("   ") == []


def test_segment_label_custom_window():
    assert segment_label("one two three", window=2) == ["one two", "two three", "three"]


def test_segment_label_rejects_bad_window():
    with pytest.raises(ValueError):
        segment_label("one", window=0)


def test_format_tooltip_joins_lines():
    assert format_tooltip("one two", window=5) == "one two<br>two"
