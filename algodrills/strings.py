"""String puzzles."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import pairwise
from string import ascii_lowercase

GENE_LETTERS = frozenset("ACGT")


def anagram_changes(text: str) -> int | None:
    """Letters to change so the first half becomes an anagram of the second.

    Returns None when the text cannot be split into two equal halves.
    """
    if len(text) % 2:
        return None
    half = len(text) // 2
    surplus = Counter(text[:half]) - Counter(text[half:])
    return sum(surplus.values())


def steady_gene(gene: str) -> int:
    """Length of the shortest substring whose replacement makes every one of
    A, C, G and T occur exactly a quarter of the time."""
    n = len(gene)
    if n % 4:
        raise ValueError("gene length must be a multiple of four")
    if set(gene) - GENE_LETTERS:
        raise ValueError("gene may only hold the letters A, C, G and T")
    quota = n // 4
    excess = {
        letter: count - quota for letter, count in Counter(gene).items() if count > quota
    }
    if not excess:
        return 0
    window: Counter[str] = Counter()
    best = n
    left = 0
    for right, letter in enumerate(gene):
        window[letter] += 1
        while all(window[item] >= needed for item, needed in excess.items()):
            best = min(best, right - left + 1)
            window[gene[left]] -= 1
            left += 1
    return best


def beautiful_binary_string(text: str) -> int:
    """Fewest flips that leave no ``010`` in the string."""
    return text.count("010")


def common_child(first: str, second: str) -> int:
    """Length of the longest common subsequence of the two strings."""
    previous = [0] * (len(second) + 1)
    for a in first:
        row = [0]
        for j, b in enumerate(second):
            row.append(previous[j] + 1 if a == b else max(row[j], previous[j + 1]))
        previous = row
    return previous[-1]


def is_funny(text: str) -> bool:
    """Whether the gaps between neighbouring character codes read the same
    forwards and backwards."""
    gaps = [abs(ord(b) - ord(a)) for a, b in pairwise(text)]
    return gaps == gaps[::-1]


def gemstones(rocks: Iterable[str]) -> int:
    """Number of distinct characters that occur in every rock."""
    rocks = list(rocks)
    if not rocks:
        raise ValueError("no rocks given")
    return len(set.intersection(*(set(rock) for rock in rocks)))


def make_anagram(first: str, second: str) -> int:
    """Characters to delete from both strings to make them anagrams."""
    a = Counter(first)
    b = Counter(second)
    return sum((a - b).values()) + sum((b - a).values())


def _is_palindrome(text: str) -> bool:
    return text == text[::-1]


def palindrome_index(text: str) -> int | None:
    """Index of a character whose removal makes the text a palindrome.

    Returns None when the text is already a palindrome or no single removal
    helps. When both ends of the first mismatch work, the right one wins.
    """
    i, j = 0, len(text) - 1
    while i < j:
        if text[i] != text[j]:
            found = None
            if _is_palindrome(text[:i] + text[i + 1:]):
                found = i
            if _is_palindrome(text[:j] + text[j + 1:]):
                found = j
            return found
        i += 1
        j -= 1
    return None


def is_pangram(text: str) -> bool:
    """Whether every letter of the alphabet appears, ignoring case."""
    return set(text.lower()) >= set(ascii_lowercase)


def share_substring(first: str, second: str) -> bool:
    """Whether the strings have a common substring, i.e. a common character."""
    return not set(first).isdisjoint(second)