"""Tests for the trie dictionary and whole-text scan."""

from hanseg import Dictionary, Span
from hanseg._trie import scan

TEXT = "研究生命运"


def test_matches_shortest_first(example_dict):
    assert example_dict.matches_from(TEXT, 0) == [Span(0, 2), Span(0, 3)]


def test_matches_mid_text(example_dict):
    assert example_dict.matches_from(TEXT, 2) == [Span(2, 4)]
    assert example_dict.matches_from(TEXT, 3) == [Span(3, 5)]


def test_no_match_is_empty(example_dict):
    assert example_dict.matches_from(TEXT, 4) == []
    assert example_dict.matches_from("abc", 0) == []


def test_matches_respect_end(example_dict):
    """Words running past ``end`` are not reported."""
    assert example_dict.matches_from(TEXT, 0, 2) == [Span(0, 2)]
    assert example_dict.matches_from(TEXT, 0, 1) == []


def test_matches_at_end_of_text(example_dict):
    assert example_dict.matches_from(TEXT, len(TEXT)) == []


def test_prefix_is_not_a_word():
    d = Dictionary.from_words(["研究生"])
    assert "研究" not in d
    assert "研究生" in d
    assert d.matches_from(TEXT, 0) == [Span(0, 3)]


def test_insert_idempotent():
    d = Dictionary()
    d.insert("命运")
    d.insert("命运")
    assert len(d) == 1
    assert list(d) == ["命运"]


def test_empty_word_ignored():
    """The empty word must never become a zero-length match."""
    d = Dictionary()
    d.insert("")
    assert len(d) == 0
    assert "" not in d
    assert d.matches_from("abc", 0) == []


def test_contains_non_string(example_dict):
    assert 42 not in example_dict


def test_iteration_yields_all_words():
    words = ["b", "ab", "a", "abc"]
    d = Dictionary.from_words(words)
    assert sorted(d) == sorted(words)
    assert len(d) == 4


def test_iteration_follows_insertion_order():
    d = Dictionary.from_words(["b", "a", "ab"])
    assert list(d) == ["b", "a", "ab"]


def test_scan_reports_overlaps(example_dict):
    automaton = example_dict.build_scanner()
    assert scan(automaton, TEXT) == [
        Span(0, 2), Span(0, 3), Span(2, 4), Span(3, 5),
    ]


def test_scan_no_occurrences(example_dict):
    assert scan(example_dict.build_scanner(), "abc") == []


def test_scan_empty_dictionary():
    assert scan(Dictionary().build_scanner(), TEXT) == []
