'''Public suffix tree interface.

This module provides the `SuffixTree` class, the entry point for callers that
want to build a suffix tree over a text and query it. It sits on top of the
pure Python construction engine in `python_backend.online_suffix` and adds:

- Sentinel handling: building from a string closes every suffix with a unique
  terminal character, so each suffix ends at its own leaf.
- The caller-facing method names (`append_character`, `contains`,
  `longest_repeated_substring`) and Python protocols (`in`, `len`, `str`).

Typical usage:

    tree = SuffixTree("banana")
    tree.contains("nan")              # True
    tree.longest_repeated_substring() # "ana"
'''
from typing import Optional

from .python_backend.online_suffix import OnlineSuffixTree

DEFAULT_SENTINEL = "$"


class SuffixTree(OnlineSuffixTree):
    """A suffix tree over a growing text.

    `SuffixTree()` starts from an empty text; characters are then added with
    `append_character`. `SuffixTree(text)` feeds `text` one character at a
    time and then appends the sentinel.

    The tree is not safe for concurrent use: finish building before querying
    from another thread.

    Attributes:
        sentinel (str): The terminal character used when building from a string.
    """
    def __init__(self, text: Optional[str] = None, sentinel: str = DEFAULT_SENTINEL):
        """Initializes the tree, optionally building it over `text`.

        Args:
            text: Text to build over. `None` leaves the tree empty and unterminated.
                  If `text` already ends with the sentinel, and the sentinel occurs
                  nowhere else, it is taken as already terminated.
            sentinel: Single terminal character. Defaults to "$".

        Raises:
            ValueError: If `sentinel` is not a single character, or if it occurs in
                        `text` anywhere other than the last position.
            TypeError: If `text` is neither a string nor None.
        """
        if not isinstance(sentinel, str) or len(sentinel) != 1:
            raise ValueError("Sentinel must be a single character string.")
        if text is not None and not isinstance(text, str):
            raise TypeError("Text must be a string.")

        super().__init__("")
        self.sentinel = sentinel

        if text is None:
            return

        position = text.find(sentinel)
        if position != -1 and position != len(text) - 1:
            raise ValueError(
                f"Sentinel {sentinel!r} occurs at offset {position} of the text; "
                f"it may only appear as the final character."
            )
        self.extend(text)
        if position == -1:
            self.add_terminator(sentinel)

    def append_character(self, ch: str) -> None:
        """Appends one character and updates the tree (one Ukkonen phase).

        Args:
            ch: The character to add. Must be a single character string.

        Raises:
            ValueError: If `ch` is not a single character string.
        """
        self.add_char(ch)

    def contains(self, pattern: str) -> bool:
        """Checks whether `pattern` is a contiguous substring of the text.

        The empty pattern is contained in every text, including the empty one.
        """
        return self.find(pattern)

    @property
    def is_terminated(self) -> bool:
        """bool: True if the last character added is the sentinel."""
        return len(self.text) > 0 and self.text[len(self.text) - 1] == self.sentinel

    def __contains__(self, pattern: str) -> bool:
        return self.contains(pattern)

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return str(self.text)

    def __repr__(self) -> str:
        return f"SuffixTree({str(self.text)!r})"
