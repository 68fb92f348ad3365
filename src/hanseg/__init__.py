"""Hanseg: dictionary-driven MMSeg word segmentation for unbroken text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from ._chunk import best_chunk, build_chunk, enumerate_chunks
from ._errors import (
    DictionaryUnavailableError,
    HansegChecksumError,
    HansegError,
    HansegVersionError,
)
from ._freq import FrequencyTable
from ._segmenter import DEFAULT_DEPTH, Segmenter
from ._trie import Dictionary
from ._types import Chunk, Span

if TYPE_CHECKING:
    from pathlib import Path

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "load",
    "load_compiled",
    "best_chunk",
    "build_chunk",
    "enumerate_chunks",
    "Chunk",
    "DEFAULT_DEPTH",
    "Dictionary",
    "DictionaryUnavailableError",
    "FrequencyTable",
    "HansegChecksumError",
    "HansegError",
    "HansegVersionError",
    "Segmenter",
    "Span",
]

# Library default: silent until the application opts in
logger.disable("hanseg")


def load(
    words_path: Path | str,
    chars_path: Path | str | None = None,
    depth: int = DEFAULT_DEPTH,
) -> Segmenter:
    """Load text dictionaries and return a ready-to-use Segmenter.

    Args:
        words_path: File with one word per line.
        chars_path: Optional file of ``<char> <count>`` lines.
        depth: Default lookahead in words.
    """
    from ._loader import load_text

    dictionary, freqs = load_text(words_path, chars_path)
    return Segmenter(dictionary, freqs, depth)


def load_compiled(data_dir: Path | str, depth: int = DEFAULT_DEPTH) -> Segmenter:
    """Load a compiled bundle directory and return a Segmenter."""
    from ._loader import load_bundle

    dictionary, freqs = load_bundle(data_dir)
    return Segmenter(dictionary, freqs, depth)
