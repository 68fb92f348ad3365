"""Single-character frequency table."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class FrequencyTable:
    """Observed count per codepoint, used to score single-character words."""

    __slots__ = ("_counts",)

    def __init__(self, items: Iterable[tuple[str, int]] = ()) -> None:
        self._counts: dict[str, int] = {}
        for ch, count in items:
            self.add(ch, count)

    def add(self, ch: str, count: int) -> bool:
        """Record ``count`` for the first codepoint of ``ch``.

        The first count seen for a codepoint is kept; later ones are dropped.
        Returns True if the entry was stored.
        """
        if not ch:
            raise ValueError("frequency entry needs a character")
        if count <= 0:
            raise ValueError(f"frequency for {ch[0]!r} must be positive, got {count}")
        key = ch[0]
        if key in self._counts:
            return False
        self._counts[key] = count
        return True

    def lookup(self, ch: str) -> int | None:
        return self._counts.get(ch)

    def __contains__(self, ch: object) -> bool:
        return ch in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[tuple[str, int]]:
        return iter(self._counts.items())
