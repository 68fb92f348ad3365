"""Segmenter: greedy left-to-right MMSeg driver."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from loguru import logger

from ._chunk import best_chunk, enumerate_chunks
from ._trie import scan
from ._types import Span

if TYPE_CHECKING:
    import ahocorasick

    from ._freq import FrequencyTable
    from ._trie import Dictionary
    from ._types import Chunk

DEFAULT_DEPTH = 3


class Segmenter:
    """Splits unbroken text into dictionary words.

    The dictionary and frequency table are shared read-only, so one segmenter
    can serve concurrent ``segment`` calls as long as nobody mutates them.

    An empty dictionary is accepted but every word comes out as a single
    character. The warning logged for it is silent unless the caller has run
    ``logger.enable("hanseg")``; check ``len(segmenter.dictionary)`` instead.
    :func:`hanseg.load` and :func:`hanseg.load_compiled` never return such a
    segmenter, they raise :class:`DictionaryUnavailableError`.
    """

    __slots__ = ("_dictionary", "_freqs", "_depth", "_scanner", "_scanner_lock")

    def __init__(
        self,
        dictionary: Dictionary,
        freqs: FrequencyTable | None = None,
        depth: int = DEFAULT_DEPTH,
    ) -> None:
        if depth < 0:
            raise ValueError(f"depth must be >= 0, got {depth}")
        self._dictionary = dictionary
        self._freqs = freqs
        self._depth = depth
        self._scanner: ahocorasick.Automaton | None = None
        self._scanner_lock = threading.Lock()
        if len(dictionary) == 0:
            logger.warning(
                "Segmenter built with an empty dictionary; "
                "output will be single characters"
            )

    @property
    def dictionary(self) -> Dictionary:
        return self._dictionary

    @property
    def freqs(self) -> FrequencyTable | None:
        return self._freqs

    @property
    def depth(self) -> int:
        return self._depth

    # -- Segmentation API --

    def segment(self, text: str, depth: int | None = None) -> list[str]:
        """Segment ``text`` into words whose concatenation is ``text``."""
        return [w.slice(text) for w in self.segment_spans(text, depth)]

    def segment_spans(self, text: str, depth: int | None = None) -> list[Span]:
        """Like :meth:`segment` but returns spans into ``text``."""
        depth = self._resolve_depth(depth)
        end = len(text)
        if depth == 0:
            return [Span(pos, pos + 1) for pos in range(end)]

        ret: list[Span] = []
        pos = 0
        while pos != end:
            chunks = enumerate_chunks(
                text, pos, end, depth, self._dictionary, self._freqs
            )
            word = best_chunk(chunks).words[0]
            ret.append(word)
            pos = word.end
        return ret

    def segment_batch(
        self, texts: list[str], depth: int | None = None
    ) -> list[list[str]]:
        """Segment multiple texts."""
        return [self.segment(t, depth) for t in texts]

    def candidates(
        self, text: str, start: int = 0, depth: int | None = None
    ) -> list[Chunk]:
        """The chunks compared at ``start``, in enumeration order.

        Empty when ``start`` is at the end of the text or depth is 0.
        """
        depth = self._resolve_depth(depth)
        if not 0 <= start <= len(text):
            raise ValueError(f"start {start} outside text of length {len(text)}")
        if depth == 0 or start == len(text):
            return []
        return enumerate_chunks(
            text, start, len(text), depth, self._dictionary, self._freqs
        )

    def scan(self, text: str) -> list[Span]:
        """Every dictionary word occurring anywhere in ``text``.

        Overlapping occurrences are all reported (search-index "full mode").
        """
        return scan(self._get_scanner(), text)

    # -- Internal --

    def _resolve_depth(self, depth: int | None) -> int:
        if depth is None:
            return self._depth
        if depth < 0:
            raise ValueError(f"depth must be >= 0, got {depth}")
        return depth

    def _get_scanner(self) -> ahocorasick.Automaton:
        if self._scanner is None:
            with self._scanner_lock:
                if self._scanner is None:
                    logger.debug(
                        "Building scan automaton over {} words", len(self._dictionary)
                    )
                    self._scanner = self._dictionary.build_scanner()
        return self._scanner
