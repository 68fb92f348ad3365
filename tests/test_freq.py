"""Tests for the char frequency table."""

import pytest

from hanseg import FrequencyTable


def test_lookup():
    freqs = FrequencyTable([("的", 100), ("人", 50)])
    assert freqs.lookup("的") == 100
    assert freqs.lookup("人") == 50
    assert len(freqs) == 2


def test_missing_is_none():
    assert FrequencyTable().lookup("的") is None


def test_first_count_wins():
    freqs = FrequencyTable()
    assert freqs.add("的", 100) is True
    assert freqs.add("的", 7) is False
    assert freqs.lookup("的") == 100


def test_only_first_codepoint_kept():
    freqs = FrequencyTable()
    freqs.add("研究", 30)
    assert "研" in freqs
    assert "究" not in freqs
    assert freqs.lookup("研") == 30


def test_non_positive_count_rejected():
    freqs = FrequencyTable()
    with pytest.raises(ValueError, match="must be positive"):
        freqs.add("的", 0)
    with pytest.raises(ValueError):
        freqs.add("的", -3)


def test_empty_char_rejected():
    with pytest.raises(ValueError):
        FrequencyTable().add("", 1)


def test_iteration():
    pairs = [("的", 100), ("人", 50)]
    assert list(FrequencyTable(pairs)) == pairs
    assert dict(FrequencyTable(pairs)) == dict(pairs)
