'''Pure Python online suffix tree built with Ukkonen's algorithm.

This module provides the `OnlineSuffixTree` class together with its building
blocks `TextBuffer`, `Node` and `ActivePoint`. The tree is extended one
character at a time; every edge is an implicit `[start, end)` range into the
shared text buffer, so no substring is ever copied into the tree.

Leaves carry an open end (`OPEN_END`) and therefore grow automatically as the
buffer grows. Total construction work is linear (amortized) thanks to the
active point, suffix links and the walk-down (skip/count) step.

Queries:
- `find(pattern)`: substring containment.
- `longest_repeated_substring()`: the longest string occurring at two or more
  distinct offsets of the text.

Classes:
    TextBuffer: Append-only character sequence shared by every node.
    Node: A root, internal or leaf vertex of the tree.
    ActivePoint: The construction cursor (node, edge, length).
    OnlineSuffixTree: Construction engine and query layer.
'''
from typing import Dict, Iterator, List, Optional

# Marker for an edge that extends to the current end of the text.
OPEN_END = None


class TreeInvariantError(AssertionError):
    """Raised when the tree structure breaks one of its invariants.

    This always signals a bug in the construction code, never bad input.
    """


class TextBuffer:
    """Append-only text shared by reference between the tree and its nodes.

    Characters are kept in a list so that appending stays O(1) amortized;
    the string form is only assembled on demand.
    """
    __slots__ = ('_chars',)

    def __init__(self):
        self._chars: List[str] = []

    def append(self, ch: str) -> None:
        self._chars.append(ch)

    def substring(self, start: int, end: Optional[int] = None) -> str:
        """Returns the text in `[start, end)`, with `end` clamped to the live length.

        Args:
            start: First offset (inclusive).
            end: Last offset (exclusive). `None` reads up to the end of the text.
        """
        stop = len(self._chars) if end is None else min(end, len(self._chars))
        return ''.join(self._chars[start:stop])

    def __len__(self) -> int:
        return len(self._chars)

    def __getitem__(self, index: int) -> str:
        return self._chars[index]

    def __str__(self) -> str:
        return ''.join(self._chars)

    def __repr__(self) -> str:
        return f"TextBuffer({str(self)!r})"


class Node:
    """A vertex of the suffix tree together with its incoming edge label.

    The incoming edge label is the half-open range `[start, end)` of the text
    buffer. An `end` of `OPEN_END` means the edge runs to the current end of
    the text (every leaf created during construction is open).

    Children are keyed by the first character of their edge label; no two
    children may share a first character.

    Attributes:
        start (int): Offset of the first character of the incoming edge label.
        end (int | None): Exclusive end offset, or `OPEN_END` for a growing leaf.
        children (dict[str, Node]): Outgoing edges keyed by first character.
        suffix_link (Node | None): Non-owning link used only during construction.
                                  Set to the root by the tree when the node is made.
    """
    __slots__ = ('start', 'end', 'children', 'suffix_link')

    def __init__(self, start: int, end: Optional[int] = OPEN_END, suffix_link: Optional['Node'] = None):
        self.start = start
        self.end = end
        self.children: Dict[str, 'Node'] = {}
        self.suffix_link = suffix_link

    @property
    def is_open(self) -> bool:
        return self.end is OPEN_END

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def edge_length(self, text_len: int) -> int:
        """Effective length of the incoming edge for a text of length `text_len`."""
        if self.end is OPEN_END:
            return text_len - self.start
        return min(self.end, text_len) - self.start

    def char_at(self, text: TextBuffer, index: int) -> str:
        """Character at position `index` along the incoming edge."""
        return text[self.start + index]

    def label(self, text: TextBuffer) -> str:
        """The incoming edge label as a string."""
        return text.substring(self.start, self.end)

    def add_child(self, text: TextBuffer, child: 'Node') -> None:
        """Attaches `child` under the first character of its edge label.

        Raises:
            TreeInvariantError: If a child with the same first character exists.
        """
        key = text[child.start]
        if key in self.children:
            raise TreeInvariantError(
                f"Node already has a child starting with {key!r} (start={self.children[key].start})."
            )
        self.children[key] = child

    def replace_child(self, text: TextBuffer, child: 'Node') -> None:
        """Puts `child` in place of the existing child with the same first character.

        Used when an edge is split: the new internal node takes over the slot of
        the edge it was cut from.
        """
        key = text[child.start]
        if key not in self.children:
            raise TreeInvariantError(f"No child starting with {key!r} to replace.")
        self.children[key] = child

    def __repr__(self) -> str:
        end = 'open' if self.end is OPEN_END else self.end
        return f"Node(start={self.start}, end={end}, children={list(self.children.keys())})"


class ActivePoint:
    """Where the next pending suffix extension resumes.

    Attributes:
        node (Node): The node the cursor hangs from.
        edge (int): Text offset whose character selects the current child edge.
        length (int): Number of characters already matched along that edge.
    """
    __slots__ = ('node', 'edge', 'length')

    def __init__(self, node: Node):
        self.node = node
        self.edge = 0
        self.length = 0

    def __repr__(self) -> str:
        return f"ActivePoint(node={self.node!r}, edge={self.edge}, length={self.length})"


class OnlineSuffixTree:
    """A suffix tree built online, one character at a time, with Ukkonen's algorithm.

    Until a unique terminator is appended the tree is implicit: suffixes that
    are prefixes of other suffixes do not end at their own leaf. Appending a
    character that does not occur elsewhere (see `add_terminator`) makes every
    suffix end at a distinct leaf.

    Attributes:
        text (TextBuffer): The accumulated text.
        root (Node): The root node. Its suffix link points to itself.
        active (ActivePoint): The construction cursor.
        remainder (int): Number of suffixes still to be inserted explicitly.
    """
    def __init__(self, initial_text: str = ""):
        """Initializes the tree and feeds `initial_text` character by character.

        Args:
            initial_text (str, optional): Text to build the tree for. No terminator
                                          is appended. Defaults to "".
        """
        self.text = TextBuffer()
        self.root = Node(0, 0)
        self.root.suffix_link = self.root
        self.active = ActivePoint(self.root)
        self.remainder = 0

        if initial_text:
            self.extend(initial_text)

    def _new_node(self, start: int, end: Optional[int] = OPEN_END) -> Node:
        return Node(start, end, suffix_link=self.root)

    def add_char(self, ch: str) -> None:
        """Extends every unfinished suffix of the text by `ch`.

        This is one phase of Ukkonen's algorithm. Must be called once per
        character, in order.

        Args:
            ch (str): The character to add. Must be a single character.

        Raises:
            ValueError: If `ch` is not a single character string.
        """
        if not isinstance(ch, str) or len(ch) != 1:
            raise ValueError("Input must be a single character.")

        text = self.text
        active = self.active
        text.append(ch)
        self.remainder += 1
        # Internal node created earlier in this phase, still waiting for its suffix link.
        pending_link: Optional[Node] = None

        while self.remainder > 0:
            if active.length == 0:
                active.edge = len(text) - 1

            edge_char = text[active.edge]
            next_node = active.node.children.get(edge_char)

            if next_node is None:
                # Rule 2: no edge starts with this character, hang a new leaf.
                active.node.add_child(text, self._new_node(active.edge))
                if pending_link is not None:
                    pending_link.suffix_link = active.node
                    pending_link = None
            else:
                # Walk down: skip whole edges without comparing characters.
                edge_len = next_node.edge_length(len(text))
                if active.length >= edge_len:
                    active.edge += edge_len
                    active.length -= edge_len
                    active.node = next_node
                    continue

                if next_node.char_at(text, active.length) == ch:
                    # Rule 3: the suffix is already in the tree implicitly.
                    if pending_link is not None and active.node is not self.root:
                        pending_link.suffix_link = active.node
                        pending_link = None
                    active.length += 1
                    break

                # Split next_node's edge at the active length.
                split = self._new_node(next_node.start, next_node.start + active.length)
                active.node.replace_child(text, split)
                split.add_child(text, self._new_node(len(text) - 1))
                next_node.start += active.length
                split.add_child(text, next_node)

                if pending_link is not None:
                    pending_link.suffix_link = split
                pending_link = split

            self.remainder -= 1
            if active.node is self.root:
                if active.length > 0:
                    active.length -= 1
                    active.edge = len(text) - self.remainder
            else:
                active.node = active.node.suffix_link

    def extend(self, chars: str) -> None:
        """Adds every character of `chars` in order."""
        for ch in chars:
            self.add_char(ch)

    def add_terminator(self, terminator_char: str = "$") -> None:
        """Appends a terminator so that every suffix ends at its own leaf.

        The terminator should not occur anywhere else in the text.

        Args:
            terminator_char (str, optional): The terminator. Defaults to "$".
        """
        if not isinstance(terminator_char, str) or len(terminator_char) != 1:
            raise ValueError("Terminator must be a single character string.")
        self.add_char(terminator_char)

    @property
    def text_len(self) -> int:
        """int: The current length of the text."""
        return len(self.text)

    @property
    def global_end(self) -> int:
        """int: Index of the last character added, or -1 for an empty tree."""
        return len(self.text) - 1

    def find(self, pattern: str) -> bool:
        """Checks whether `pattern` occurs as a contiguous substring of the text.

        The empty pattern is always found. A character that never occurs in the
        text makes the lookup fail cleanly.

        Args:
            pattern: The string to search for.

        Returns:
            True if the pattern is found, False otherwise.

        Raises:
            TypeError: If pattern is not a string.
        """
        if not isinstance(pattern, str):
            raise TypeError("Pattern must be a string.")
        if not pattern:
            return True

        node = self.root
        index = 0
        text_len = len(self.text)
        while True:
            node = node.children.get(pattern[index])
            if node is None:
                return False
            # Only read as much of the edge as the pattern still needs.
            k = min(node.edge_length(text_len), len(pattern) - index)
            if self.text.substring(node.start, node.start + k) != pattern[index:index + k]:
                return False
            index += k
            if index == len(pattern):
                return True

    def iter_nodes(self) -> Iterator[Node]:
        """Yields every node, root first, in depth-first pre-order."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(list(node.children.values())))

    def leaf_count(self) -> int:
        """Number of leaves. Equals `n + 1` for a text of `n` characters plus a terminator."""
        return sum(1 for node in self.iter_nodes() if node is not self.root and node.is_leaf)

    def node_count(self) -> int:
        """Number of nodes, root included."""
        return sum(1 for _ in self.iter_nodes())

    def _repeat_depths(self) -> Dict[Node, int]:
        # Post-order pass: for each node, the longest path (in characters)
        # through internal nodes below and including it. Leaves count 0.
        depths: Dict[Node, int] = {}
        text_len = len(self.text)
        stack = [(self.root, False)]
        while stack:
            node, expanded = stack.pop()
            if not node.children:
                depths[node] = 0
                continue
            if not expanded:
                stack.append((node, True))
                stack.extend((child, False) for child in node.children.values())
                continue
            best = max(depths[child] for child in node.children.values())
            own = 0 if node is self.root else node.edge_length(text_len)
            depths[node] = best + own
        return depths

    def longest_repeated_length(self) -> int:
        """Length of the longest substring occurring at two or more offsets."""
        return self._repeat_depths()[self.root]

    def longest_repeated_substring(self) -> str:
        """Returns the longest substring that occurs at least twice in the text.

        Occurrences may overlap; they only need to start at distinct offsets.
        When several candidates share the maximum length, the one reached
        through the earliest-inserted child at each branching wins.

        Returns:
            The longest repeated substring, or "" if nothing repeats.
        """
        depths = self._repeat_depths()
        parts: List[str] = []
        node = self.root
        while node.children:
            # max() keeps the first child among equals.
            best_child = max(node.children.values(), key=lambda child: depths[child])
            if best_child.is_leaf:
                break
            parts.append(best_child.label(self.text))
            node = best_child
        return ''.join(parts)

    @property
    def active_point(self) -> ActivePoint:
        """ActivePoint: The current construction cursor (read it, do not mutate it)."""
        return self.active

    def display(self, node: Optional[Node] = None, prefix: str = "") -> None:
        """Prints a text representation of the tree structure for debugging.

        Args:
            node (Node, optional): The node to start from. Defaults to the root.
            prefix (str, optional): Prefix string for child branches.
        """
        if node is None:
            node = self.root
            print(f"Suffix Tree (Root) over '{self.text}':")

        # Explicit stack of (node, prefix, is_last); deep trees exceed the recursion limit.
        stack = []

        def push_children(parent: Node, parent_prefix: str) -> None:
            children = [child for _, child in sorted(parent.children.items())]
            for i in reversed(range(len(children))):
                stack.append((children[i], parent_prefix, i == len(children) - 1))

        push_children(node, prefix)
        while stack:
            child, child_prefix, is_last_child = stack.pop()
            connector = "└── " if is_last_child else "├── "
            link = child.suffix_link
            link_info = f" (SL->id:{id(link)})" if child.children and link is not self.root else ""
            print(f"{child_prefix}{connector}'{child.label(self.text)}'{link_info}")
            push_children(child, child_prefix + ("    " if is_last_child else "│   "))
