"""Shared fixtures for hanseg tests."""

import pytest
from loguru import logger

import hanseg

EXAMPLE_WORDS = ["研究", "研究生", "生命", "命运"]


@pytest.fixture
def example_dict():
    return hanseg.Dictionary.from_words(EXAMPLE_WORDS)


@pytest.fixture
def segmenter(example_dict):
    return hanseg.Segmenter(example_dict)


@pytest.fixture
def dict_files(tmp_path):
    """A words file and a char frequency file on disk."""
    words = tmp_path / "words.dic"
    words.write_text("\n".join(EXAMPLE_WORDS) + "\n", encoding="utf-8")
    chars = tmp_path / "chars.dic"
    chars.write_text("的 100\n生 40\n命 30\n", encoding="utf-8")
    return words, chars


@pytest.fixture
def log_messages():
    """Collect hanseg log messages (enabled only for the test)."""
    messages = []
    logger.enable("hanseg")
    sink_id = logger.add(messages.append, level="DEBUG")
    yield messages
    logger.remove(sink_id)
    logger.disable("hanseg")
