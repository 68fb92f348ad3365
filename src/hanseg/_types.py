"""Data structures for hanseg."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True, order=True)
class Span:
    """Half-open range [start, end) into the text it was matched against."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def slice(self, text: str) -> str:
        return text[self.start:self.end]


@dataclass(slots=True, frozen=True)
class Chunk:
    words: tuple[Span, ...]
    total_length: int     # sum of word lengths
    mean_length: float    # total_length / len(words)
    neg_variance: float   # -(population variance of word lengths)
    degree: float         # sum of ln(freq) over single-char words

    @property
    def score(self) -> tuple[int, float, float, float]:
        """Comparison key; larger is better in every component."""
        return (self.total_length, self.mean_length, self.neg_variance, self.degree)

    @property
    def start(self) -> int:
        return self.words[0].start

    @property
    def end(self) -> int:
        return self.words[-1].end

    def describe(self, text: str) -> str:
        """Render the words and statistics, e.g. ``研究生 命运 (5 2.500000 -0.250000 0.000000)``."""
        words = " ".join(w.slice(text) for w in self.words)
        return (
            f"{words} ({self.total_length} {self.mean_length:.6f} "
            f"{self.neg_variance:.6f} {self.degree:.6f})"
        )
