"""
Word ladder graph.

Vertices are dictionary words; there is an edge of weight 1 between two
words of the same length that differ in exactly one letter. The heuristic
is the number of positions where a word differs from the goal.

Usage:
    ladder = WordLadder.from_file("data/words.txt")
    ladder.outgoing_edges("cold")
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from pathfinder.config import DESCRIBE_WORD_LENGTH, DICTIONARY_COMMENT_PREFIX
from pathfinder.graph.base import DirectedEdge, DirectedGraph

logger = logging.getLogger(__name__)


class WordLadder(DirectedGraph[str]):
    """
    Graph of words connected by single-letter substitutions.

    Attributes:
        dictionary: Set of accepted (lowercase) words
        charset: Set of letters appearing in any accepted word
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self.dictionary: set[str] = set()
        self.charset: set[str] = set()
        self._letters: list[str] = []
        for word in words:
            self.add_word(word)

    @classmethod
    def from_file(cls, path: Path | str) -> WordLadder:
        """
        Load a dictionary with one word per line.

        Blank lines and lines starting with '#' are skipped. Tokens that are
        not purely alphabetic are rejected.

        Raises:
            FileNotFoundError: If the dictionary file does not exist
        """
        ladder = cls()
        rejected = 0

        logger.info(f"Loading dictionary from {path}...")
        with open(path, encoding="utf-8") as f:
            for line in f:
                word = line.strip()
                if not word or word.startswith(DICTIONARY_COMMENT_PREFIX):
                    continue
                if not ladder.add_word(word):
                    rejected += 1

        logger.info(f"Loaded {ladder.node_count():,} words")
        if rejected:
            logger.warning(f"Rejected {rejected:,} non-alphabetic entries in {path}")
        return ladder

    def add_word(self, word: str) -> bool:
        """
        Add `word` to the dictionary if it only contains letters.

        The word is converted to lowercase.

        Returns:
            True if the word was accepted
        """
        if not word.isalpha():
            return False
        word = word.lower()
        self.dictionary.add(word)
        if not self.charset.issuperset(word):
            self.charset.update(word)
            self._letters = sorted(self.charset)
        return True

    def node_count(self) -> int:
        """Number of words in the dictionary."""
        return len(self.dictionary)

    def outgoing_edges(self, word: str) -> list[DirectedEdge[str]]:
        """
        All dictionary words one letter away from `word`.

        Letters are drawn from the dictionary's charset, so the cost is
        O(len(word) * len(charset)) lookups rather than a dictionary scan.
        """
        result = []
        letters = self._letters
        for i, original in enumerate(word):
            prefix, suffix = word[:i], word[i + 1 :]
            for c in letters:
                if c == original:
                    continue
                candidate = prefix + c + suffix
                if candidate in self.dictionary:
                    result.append(DirectedEdge(word, candidate))
        return result

    def guess_cost(self, word: str, goal: str) -> float:
        """Hamming distance between `word` and `goal`."""
        mismatches = sum(1 for a, b in zip(word, goal) if a != b)
        return float(mismatches + abs(len(word) - len(goal)))

    def describe(self, limit: int = 10) -> str:
        """Summary of the dictionary with a few example ladder steps."""
        lines = [
            f"Word ladder with {self.node_count()} words, "
            f'charset: "{"".join(sorted(self.charset))}"',
            "",
            "Example words and ladder steps:",
        ]
        shown = 0
        for word in sorted(self.dictionary):
            if shown >= limit:
                break
            if len(word) != DESCRIBE_WORD_LENGTH:
                continue
            edges = self.outgoing_edges(word)
            if not edges:
                continue
            lines.append(f"{word} --> {', '.join(e.target for e in edges)}")
            shown += 1
        return "\n".join(lines)

    def __contains__(self, word: object) -> bool:
        return word in self.dictionary

    def __len__(self) -> int:
        return len(self.dictionary)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"WordLadder(words={self.node_count()}, charset={len(self.charset)})"
