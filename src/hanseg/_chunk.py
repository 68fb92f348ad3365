"""Chunk scoring and bounded-depth chunk enumeration (the four MMSeg rules)."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ._types import Chunk, Span

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ._freq import FrequencyTable
    from ._trie import Dictionary


def build_chunk(
    words: Sequence[Span], text: str, freqs: FrequencyTable | None
) -> Chunk:
    """Score a run of contiguous spans.

    ``degree`` sums ln(frequency) over single-character words whose character
    has a recorded frequency; everything else contributes 0.
    """
    n = len(words)
    assert n > 0, "a chunk needs at least one word"

    total = 0
    for w in words:
        total += len(w)
    mean = total / n

    sq = 0.0
    for w in words:
        d = len(w) - mean
        sq += d * d
    neg_variance = -sq / n

    degree = 0.0
    if freqs is not None:
        for w in words:
            if len(w) != 1:
                continue
            freq = freqs.lookup(text[w.start])
            if freq is not None:
                degree += math.log(freq)

    return Chunk(
        words=tuple(words),
        total_length=total,
        mean_length=mean,
        neg_variance=neg_variance,
        degree=degree,
    )


def enumerate_chunks(
    text: str,
    start: int,
    end: int,
    depth: int,
    dictionary: Dictionary,
    freqs: FrequencyTable | None = None,
) -> list[Chunk]:
    """Every segmentation of ``text[start:end]`` up to ``depth`` words deep.

    At each level the dictionary matches are tried shortest to longest, then
    the single-character fallback. The returned order is the exploration
    order, which decides full-score ties.
    """
    assert 0 <= start <= end <= len(text), "start/end out of order"
    assert depth >= 0, "depth must be non-negative"

    ret: list[Chunk] = []
    path: list[Span] = []

    def walk(pos: int, n: int) -> None:
        if n == 0 or pos == end:
            ret.append(build_chunk(path, text, freqs))
            return
        for w in dictionary.matches_from(text, pos, end):
            path.append(w)
            walk(w.end, n - 1)
            path.pop()
        path.append(Span(pos, pos + 1))
        walk(pos + 1, n - 1)
        path.pop()

    walk(start, depth)
    return ret


def best_chunk(chunks: Sequence[Chunk]) -> Chunk:
    """Lexicographic max over (length, mean, -variance, degree).

    On a full tie the earliest chunk wins.
    """
    assert chunks, "no chunks to choose from"
    # max() keeps the first of equal maxima
    return max(chunks, key=lambda c: c.score)
