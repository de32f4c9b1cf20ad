'''Tests for the pure Python online suffix tree engine.

Random binary strings are fed into `OnlineSuffixTree` and every answer is
checked against brute-force string scanning:

- Every substring of the text is found; a handful of non-substrings are not.
- A terminated tree over `n` characters has `n + 1` leaves, one per suffix.
- Suffix links of internal nodes point to the node for the path minus its first character.

Usage:
    python test_online_suffix.py [num_strings] [min_len] [max_len]
'''
import random
import sys
import os
import time

import pytest

# Project root (parent of 'tests' and 'online_suffix_tree') on sys.path so the
# module also runs as a plain script from a source checkout.
_project_root_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if _project_root_dir not in sys.path:
    sys.path.insert(0, _project_root_dir)

from online_suffix_tree.python_backend.online_suffix import (
    OPEN_END, Node, OnlineSuffixTree, TextBuffer, TreeInvariantError
)
from online_suffix_tree.python_backend.naive_repeats import all_substrings, generate_random_string


def path_labels(tree):
    """Maps every node to the string spelled from the root down to it."""
    labels = {tree.root: ""}
    stack = [tree.root]
    while stack:
        node = stack.pop()
        for child in node.children.values():
            labels[child] = labels[node] + child.label(tree.text)
            stack.append(child)
    return labels


def non_substrings(text, count=5):
    """A few binary strings (plus fixed extras) that do not occur in `text`."""
    candidates = set()
    for _ in range(count):
        candidates.add("".join(random.choices(['0', '1'], k=random.randint(3, 7))))
    candidates.update([text + random.choice('01$'), random.choice('01$') + text, "abab", "00000", "11111"])
    return [p for p in candidates if p not in text]


def check_string(test_string, terminated=True):
    """Runs every check on one string. Returns a list of failure messages."""
    failures = []
    tree = OnlineSuffixTree(test_string)
    if terminated:
        tree.add_terminator("$")
    full_text = test_string + ("$" if terminated else "")

    if str(tree.text) != full_text:
        failures.append(f"text mismatch: {str(tree.text)!r} != {full_text!r}")

    for pattern in all_substrings(full_text):
        if not tree.find(pattern):
            failures.append(f"substring {pattern!r} not found")
            break

    for pattern in non_substrings(full_text):
        if tree.find(pattern):
            failures.append(f"non-substring {pattern!r} found")
            break

    if terminated:
        if tree.leaf_count() != len(full_text):
            failures.append(f"expected {len(full_text)} leaves, got {tree.leaf_count()}")

        labels = path_labels(tree)
        leaf_paths = sorted(labels[n] for n in tree.iter_nodes() if n is not tree.root and n.is_leaf)
        suffixes = sorted(full_text[i:] for i in range(len(full_text)))
        if leaf_paths != suffixes:
            failures.append("leaf paths do not match the suffixes")

        for node in tree.iter_nodes():
            if node is tree.root or node.is_leaf:
                continue
            if len(node.children) < 2:
                failures.append(f"internal node {labels[node]!r} has a single child")
            if labels[node.suffix_link] != labels[node][1:]:
                failures.append(
                    f"suffix link of {labels[node]!r} points to {labels[node.suffix_link]!r}"
                )
    return failures


def run_tests(num_strings=10_000, min_str_len=30, max_str_len=100, terminated=True):
    print(f"Starting tests with {num_strings} strings (length {min_str_len}-{max_str_len})...")
    fail_count = 0
    total_time = 0.0

    for i in range(num_strings):
        test_string = generate_random_string(min_str_len, max_str_len)
        start_time = time.perf_counter()
        failures = check_string(test_string, terminated=terminated)
        total_time += time.perf_counter() - start_time
        if failures:
            fail_count += 1
            print(f"String {i+1}/{num_strings} FAILED for '{test_string}':")
            for message in failures:
                print(f"  {message}")

    print(f"\nTest Summary:")
    print(f"Total strings tested: {num_strings}")
    print(f"Failures: {fail_count}")
    if num_strings > 0:
        print(f"Average time per string: {total_time/num_strings:.6f}s")
    return fail_count


def test_random_terminated_trees():
    random.seed(1234)
    assert run_tests(num_strings=150, min_str_len=0, max_str_len=40) == 0


def test_random_implicit_trees():
    random.seed(4321)
    assert run_tests(num_strings=150, min_str_len=0, max_str_len=40, terminated=False) == 0


@pytest.mark.parametrize("text", ["a", "aaaaaaaa", "abcabxabcd", "mississippi", "xabxac", "ATCGATCGA", "dedododeeodo"])
def test_fixed_strings(text):
    assert check_string(text) == []


def test_larger_alphabet():
    random.seed(99)
    for _ in range(30):
        text = generate_random_string(50, 120, alphabet="abcd")
        assert check_string(text) == []


def test_long_run_of_one_character():
    tree = OnlineSuffixTree("a" * 3000)
    tree.add_terminator()
    assert tree.leaf_count() == 3001
    assert tree.find("a" * 3000 + "$")
    assert not tree.find("a" * 3001)


def test_empty_tree():
    tree = OnlineSuffixTree()
    assert tree.text_len == 0
    assert tree.global_end == -1
    assert tree.leaf_count() == 0
    assert tree.node_count() == 1
    assert not tree.find("a")
    assert tree.find("")


def test_find_unseen_character_fails_cleanly():
    tree = OnlineSuffixTree("abcabc")
    assert not tree.find("z")
    assert not tree.find("abz")
    assert not tree.find("cabcz")


def test_find_rejects_non_string():
    tree = OnlineSuffixTree("abc")
    with pytest.raises(TypeError):
        tree.find(5)


@pytest.mark.parametrize("bad", ["", "ab", 5, None])
def test_add_char_rejects_non_characters(bad):
    tree = OnlineSuffixTree()
    with pytest.raises(ValueError):
        tree.add_char(bad)


def test_add_terminator_rejects_long_terminator():
    tree = OnlineSuffixTree("ab")
    with pytest.raises(ValueError):
        tree.add_terminator("$$")


def test_root_links_to_itself():
    tree = OnlineSuffixTree("banana$")
    assert tree.root.suffix_link is tree.root
    assert tree.root.edge_length(tree.text_len) == 0


def test_leaves_are_open_and_grow():
    tree = OnlineSuffixTree("ab")
    leaf = tree.root.children["a"]
    assert leaf.is_open
    assert leaf.label(tree.text) == "ab"
    tree.add_char("c")
    assert leaf.label(tree.text) == "abc"


def test_active_point_after_repeats():
    tree = OnlineSuffixTree("abcab")
    # "ab" is pending: two suffixes not yet explicit.
    assert tree.remainder == 2
    assert tree.active_point.node is tree.root
    assert tree.active_point.length == 2
    tree.add_char("$")
    assert tree.remainder == 0
    assert tree.active_point.length == 0


def test_text_buffer():
    buffer = TextBuffer()
    for ch in "hello":
        buffer.append(ch)
    assert len(buffer) == 5
    assert buffer[1] == "e"
    assert buffer.substring(1, 3) == "el"
    assert buffer.substring(3, 100) == "lo"
    assert buffer.substring(2) == "llo"
    assert str(buffer) == "hello"


def test_node_edge_length():
    assert Node(2).edge_length(5) == 3
    assert Node(2, OPEN_END).is_open
    assert Node(1, 3).edge_length(10) == 2
    assert Node(1, 3).edge_length(2) == 1


def test_duplicate_child_is_an_invariant_error():
    text = TextBuffer()
    for ch in "aa":
        text.append(ch)
    parent = Node(0, 0)
    parent.add_child(text, Node(0))
    with pytest.raises(TreeInvariantError):
        parent.add_child(text, Node(1))
    with pytest.raises(AssertionError):
        parent.add_child(text, Node(1))


def test_replace_child_requires_existing_slot():
    text = TextBuffer()
    for ch in "ab":
        text.append(ch)
    parent = Node(0, 0)
    with pytest.raises(TreeInvariantError):
        parent.replace_child(text, Node(0, 1))


def test_find_reads_only_pattern_length_of_an_edge(monkeypatch):
    tree = OnlineSuffixTree("c" + "ab" * 5000)
    tree.add_terminator()
    read_lengths = []
    original_substring = TextBuffer.substring

    def recording_substring(self, start, end=None):
        result = original_substring(self, start, end)
        read_lengths.append(len(result))
        return result

    monkeypatch.setattr(TextBuffer, "substring", recording_substring)
    assert tree.find("ca")
    assert tree.find("cab")
    assert not tree.find("cb")
    assert tree.find("b$")
    assert read_lengths
    assert max(read_lengths) <= 3


def test_find_on_long_leaf_edge_matches_brute_force():
    text = "c" + "ab" * 300 + "$"
    tree = OnlineSuffixTree(text)
    for pattern in ["c", "ca", "cabab", "cb", "ab" * 300 + "$", "ba" * 300, "ba" * 300 + "b", "$", "a$"]:
        assert tree.find(pattern) == (pattern in text), pattern


def test_display_deep_tree(capsys):
    tree = OnlineSuffixTree("a" * 3000)
    tree.add_terminator()
    tree.display()
    lines = capsys.readouterr().out.splitlines()
    # Header plus one line per non-root node.
    assert len(lines) == tree.node_count()
    assert lines[-1].endswith("'a$'") or lines[-1].endswith("'$'")


def test_display_prints_edges(capsys):
    tree = OnlineSuffixTree("banana$")
    tree.display()
    out = capsys.readouterr().out
    assert "banana$" in out
    assert "'a'" in out
    assert "'na'" in out


if __name__ == "__main__":
    num_test_strings = 10_000
    min_len = 30
    max_len = 100

    # Allow overriding from command line for quick tests
    if len(sys.argv) > 1:
        try:
            num_test_strings = int(sys.argv[1])
            if len(sys.argv) > 2: min_len = int(sys.argv[2])
            if len(sys.argv) > 3: max_len = int(sys.argv[3])
        except ValueError:
            print("Usage: python test_online_suffix.py [num_strings] [min_len] [max_len]")
            sys.exit(1)

    failed = run_tests(num_strings=num_test_strings, min_str_len=min_len, max_str_len=max_len)
    if failed:
        sys.exit(1)
    print("All tests passed!")
