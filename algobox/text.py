"""String algorithms: palindromes, anagrams, edit distance and a spellchecker."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

__all__ = [
    "is_palindrome",
    "is_anagram",
    "min_steps_to_anagram",
    "edit_distance",
    "devowel",
    "spellcheck",
]

_VOWELS = frozenset("aeiou")


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same both ways, ignoring case."""
    folded = text.lower()
    return folded == folded[::-1]


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` uses exactly the characters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def min_steps_to_anagram(s: str, t: str) -> int:
    """Return how many characters of ``t`` must be replaced to make an anagram of ``s``.

    Both strings must have the same length.
    """
    if len(s) != len(t):
        raise ValueError("strings must have the same length")
    return sum((Counter(t) - Counter(s)).values())


def edit_distance(word1: str, word2: str) -> int:
    """Return the minimum number of insertions, deletions and replacements
    turning ``word1`` into ``word2``."""
    # below[j] holds the distance between word1[i + 1:] and word2[j:].
    below = list(range(len(word2), -1, -1))
    for i in range(len(word1) - 1, -1, -1):
        row = [0] * len(word2) + [len(word1) - i]
        for j in range(len(word2) - 1, -1, -1):
            if word1[i] == word2[j]:
                row[j] = below[j + 1]
            else:
                row[j] = 1 + min(row[j + 1], below[j], below[j + 1])
        below = row
    return below[0]


def devowel(word: str) -> str:
    """Lower-case ``word`` and replace each vowel with ``*``."""
    return "".join("*" if c in _VOWELS else c for c in word.lower())


def spellcheck(wordlist: Iterable[str], queries: Iterable[str]) -> list[str]:
    """Correct each query against ``wordlist``.

    A query is matched, in order of preference, exactly, then ignoring case,
    then ignoring case and vowel errors; the earliest matching word in the
    list wins. Queries with no match give an empty string.
    """
    words = list(wordlist)
    exact = set(words)
    by_lower: dict[str, str] = {}
    by_devowel: dict[str, str] = {}
    for word in words:
        by_lower.setdefault(word.lower(), word)
        by_devowel.setdefault(devowel(word), word)

    def correct(query: str) -> str:
        if query in exact:
            return query
        lowered = query.lower()
        if lowered in by_lower:
            return by_lower[lowered]
        return by_devowel.get(devowel(query), "")

    return [correct(query) for query in queries]