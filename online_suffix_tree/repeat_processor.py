'''Batch suffix tree queries over lists of strings.

This module provides `RepeatProcessor`, which builds one `SuffixTree` per input
string and collects the answers into numpy arrays:

- Longest repeated substring lengths, and the substrings themselves.
- Repeat ratios (longest repeat length relative to the text length).
- A containment matrix for a set of patterns against a set of texts.

Each tree lives only for the duration of a single string's processing.
'''
import sys
from typing import List, Optional

import numpy as np

from .suffix_tree import DEFAULT_SENTINEL, SuffixTree


class RepeatProcessor:
    '''Processes lists of strings with one suffix tree per string.

    Attributes:
        sentinel (str): Terminal character appended to every text.
        verbose (bool): If True, progress is printed to stderr.
    '''
    def __init__(self, sentinel: str = DEFAULT_SENTINEL, verbose: bool = False):
        """Initializes the RepeatProcessor.

        Args:
            sentinel: Terminal character for every tree. Must not occur in the inputs
                      except as their final character.
            verbose: Print progress for long batches. Defaults to False.
        """
        if not isinstance(sentinel, str) or len(sentinel) != 1:
            raise ValueError("Sentinel must be a single character string.")
        self.sentinel = sentinel
        self.verbose = verbose

    def _build(self, index: int, text: str) -> SuffixTree:
        try:
            return SuffixTree(text, sentinel=self.sentinel)
        except ValueError as e:
            raise ValueError(f"Cannot build a suffix tree for string at index {index}: {e}") from e

    def _trees(self, strings: List[str]):
        total = len(strings)
        step = max(total // 10, 1)
        for i, s in enumerate(strings):
            yield self._build(i, s)
            if self.verbose and ((i + 1) % step == 0 or i + 1 == total):
                print(f"Processed {i + 1}/{total} strings", file=sys.stderr)

    def process_strings(self, strings: List[str]) -> np.ndarray:
        '''Calculates the longest repeated substring length for each string.

        Args:
            strings: A list of strings to process.

        Returns:
            A numpy int64 array with one length per input string.

        Raises:
            ValueError: If a string contains the sentinel other than as its last character.
        '''
        if not strings:
            return np.array([], dtype=np.int64)
        lengths = [tree.longest_repeated_length() for tree in self._trees(strings)]
        return np.array(lengths, dtype=np.int64)

    def longest_repeats(self, strings: List[str]) -> List[str]:
        """Returns the longest repeated substring of each string."""
        return [tree.longest_repeated_substring() for tree in self._trees(strings)]

    def repeat_ratios(self, strings: List[str]) -> np.ndarray:
        '''Longest repeat length divided by the string length.

        The sentinel is not counted in the string length. Empty strings get 0.0.

        Args:
            strings: A list of strings to process.

        Returns:
            A numpy float64 array of ratios in `[0, 1)`.
        '''
        lengths = self.process_strings(strings)
        if lengths.size == 0:
            return np.array([], dtype=np.float64)
        text_lengths = np.array(
            [len(s) - 1 if s.endswith(self.sentinel) else len(s) for s in strings],
            dtype=np.float64,
        )
        ratios = np.zeros(len(strings), dtype=np.float64)
        np.divide(lengths, text_lengths, out=ratios, where=text_lengths > 0)
        return ratios

    def containment_matrix(self, texts: List[str], patterns: List[str],
                           trees: Optional[List[SuffixTree]] = None) -> np.ndarray:
        '''Checks every pattern against every text.

        Args:
            texts: The texts to index.
            patterns: The patterns to look up.
            trees: Optional prebuilt trees for `texts` (same order), to skip construction.

        Returns:
            A boolean numpy array of shape `(len(texts), len(patterns))` where entry
            `[i, j]` is True iff `patterns[j]` occurs in `texts[i]`.

        Raises:
            ValueError: If `trees` is given and its length differs from `texts`.
        '''
        if trees is None:
            trees = list(self._trees(texts))
        elif len(trees) != len(texts):
            raise ValueError(f"Got {len(trees)} trees for {len(texts)} texts.")

        result = np.zeros((len(texts), len(patterns)), dtype=bool)
        for i, tree in enumerate(trees):
            for j, pattern in enumerate(patterns):
                result[i, j] = tree.contains(pattern)
        return result
