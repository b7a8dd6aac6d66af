"""Conversion between string trees and ``key<delim>value`` lines."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from shellds.tree import StringTree, TreeNode


def _check_delim(delim: str) -> str:
    if not isinstance(delim, str) or len(delim) != 1:
        raise ValueError(f"delimiter must be a single character, got {delim!r}")
    return delim


def _split_line(line: str, delim: str) -> Optional[tuple]:
    key, found, value = line.partition(delim)
    if not found:
        return None
    return key, value


def _build(lines: Sequence[str], delim: str, start: int, end: int) -> Optional[TreeNode]:
    if start > end:
        return None
    mid = start + (end - start) // 2
    parts = _split_line(lines[mid], delim)
    if parts is None:
        node = TreeNode(lines[mid], "")
    else:
        node = TreeNode(*parts)
    node.left = _build(lines, delim, start, mid - 1)
    node.right = _build(lines, delim, mid + 1, end)
    return node


def from_sorted_lines(lines: Iterable[str], delim: str = "=") -> StringTree:
    """Build a balanced tree from lines already sorted by key.

    Each line is split at the first ``delim``; a line without it becomes a
    key with an empty value. The middle line becomes the root, so the tree
    is balanced without any rotations. The lines are trusted to be sorted
    and free of duplicate keys.
    """
    delim = _check_delim(delim)
    rows = list(lines)
    tree = StringTree()
    tree.root = _build(rows, delim, 0, len(rows) - 1)
    tree._size = len(rows)
    return tree


def from_lines(lines: Iterable[str], delim: str = "=") -> StringTree:
    """Build a tree by inserting each line in turn, in any order.

    Each line is split at the first ``delim``; a later line with the same
    key replaces the earlier value. Raises ValueError for a line that has
    no delimiter.
    """
    delim = _check_delim(delim)
    tree = StringTree()
    for line in lines:
        parts = _split_line(line, delim)
        if parts is None:
            raise ValueError(f"line has no {delim!r} delimiter: {line!r}")
        tree.insert(*parts)
    return tree


def to_lines(tree: StringTree) -> List[str]:
    """Entries as ``key=value`` lines in key order; a missing value gives ``key=``."""
    return [f"{key}={'' if value is None else value}" for key, value in tree]