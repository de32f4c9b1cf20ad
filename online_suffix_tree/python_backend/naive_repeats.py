'''Brute-force reference implementations of the suffix tree queries.

These functions answer the same questions as `OnlineSuffixTree` by direct
string scanning. They are quadratic (or worse) and exist as a baseline for
checking the tree in tests and benchmarks, not for real workloads.

Helper functions for generating random test strings are also included.
'''
import random
from typing import List, Sequence, Set


def all_substrings(text: str) -> Set[str]:
    """Collects every contiguous substring of `text`, including the empty string.

    Args:
        text: The string to split up.

    Returns:
        A set with all substrings of `text`.
    """
    substrings = {""}
    n = len(text)
    for i in range(n):
        for j in range(i + 1, n + 1):
            substrings.add(text[i:j])
    return substrings


def naive_contains(text: str, pattern: str) -> bool:
    """Substring test by scanning every offset of `text`."""
    m = len(pattern)
    for i in range(len(text) - m + 1):
        if text[i:i + m] == pattern:
            return True
    return m == 0


def naive_longest_repeated_substring(text: str) -> str:
    """Finds the longest substring occurring at two or more distinct offsets.

    Occurrences may overlap ("aaa" repeats "aa"). Lengths are tried from the
    longest possible downward; among substrings of the winning length, the one
    whose second occurrence is found first is returned.

    Args:
        text: The string to analyze.

    Returns:
        The longest repeated substring, or "" if no character repeats.
    """
    n = len(text)
    for length in range(n - 1, 0, -1):
        seen = set()
        for i in range(n - length + 1):
            candidate = text[i:i + length]
            if candidate in seen:
                return candidate
            seen.add(candidate)
    return ""


def generate_random_string(min_len: int = 30, max_len: int = 100, alphabet: Sequence[str] = ('0', '1')) -> str:
    """Generates a random string with a length in `[min_len, max_len]`.

    Args:
        min_len (int, optional): Minimum length. Defaults to 30.
        max_len (int, optional): Maximum length. Defaults to 100.
        alphabet (sequence of str, optional): Characters to draw from. Defaults to binary.

    Returns:
        str: The generated string. Empty if `max_len < min_len` or `max_len < 0`.
    """
    if max_len < min_len or max_len < 0:
        return ""
    length = random.randint(max(min_len, 0), max_len)
    return "".join(random.choices(list(alphabet), k=length))


def generate_random_strings(n: int, min_len: int, max_len: int, alphabet: Sequence[str] = ('0', '1')) -> List[str]:
    """Generates `n` random strings, see `generate_random_string`."""
    return [generate_random_string(min_len, max_len, alphabet) for _ in range(n)]
