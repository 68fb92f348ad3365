"""Prefix-tree dictionary and Aho-Corasick whole-text scan."""

from __future__ import annotations

from typing import TYPE_CHECKING

import ahocorasick

from ._types import Span

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class _Node:
    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.is_word = False


class Dictionary:
    """Set of known words stored as a trie over codepoints.

    Built once at load time; treat as read-only while segmenting.
    """

    __slots__ = ("_root", "_n_words")

    def __init__(self) -> None:
        self._root = _Node()
        self._n_words = 0

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Dictionary:
        d = cls()
        for word in words:
            d.insert(word)
        return d

    def insert(self, word: str) -> None:
        """Add ``word``. Re-inserting is a no-op; the empty word is ignored."""
        if not word:
            return
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = _Node()
                node.children[ch] = child
            node = child
        if not node.is_word:
            node.is_word = True
            self._n_words += 1

    def matches_from(
        self, text: str, start: int, end: int | None = None
    ) -> list[Span]:
        """Every dictionary word that is a prefix of ``text[start:end]``.

        Spans come back shortest first.
        """
        if end is None:
            end = len(text)
        ret: list[Span] = []
        node = self._root
        for pos in range(start, end):
            node = node.children.get(text[pos])
            if node is None:
                break
            if node.is_word:
                ret.append(Span(start, pos + 1))
        return ret

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not word:
            return False
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.is_word

    def __len__(self) -> int:
        return self._n_words

    def __iter__(self) -> Iterator[str]:
        # Depth-first, children in insertion order
        stack: list[tuple[_Node, str]] = [(self._root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_word:
                yield prefix
            for ch, child in reversed(node.children.items()):
                stack.append((child, prefix + ch))

    def build_scanner(self) -> ahocorasick.Automaton:
        """Compile the stored words into an Aho-Corasick automaton.

        Each key maps to its length so matches can be turned back into spans.
        """
        ac = ahocorasick.Automaton()
        for word in self:
            ac.add_word(word, len(word))
        ac.make_automaton()
        return ac


def scan(automaton: ahocorasick.Automaton, text: str) -> list[Span]:
    """All dictionary occurrences in ``text``, ordered by start then length."""
    # An automaton with no words never leaves the EMPTY state
    if automaton.kind != ahocorasick.AHOCORASICK:
        return []
    spans: list[Span] = []
    for end_inclusive, length in automaton.iter(text):
        end = end_inclusive + 1
        spans.append(Span(end - length, end))
    spans.sort()
    return spans
