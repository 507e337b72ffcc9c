"""Suffix tree built in linear time with suffix links (McCreight's algorithm).

The tree is built over the string as given, without an end marker. A suffix
that is a prefix of another suffix ends at an inner node, which then carries
that suffix's terminal index.
"""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import NamedTuple

from strandkit.util import print_histogram

__all__ = [
    "Matched",
    "MaximalSubstrMatch",
    "SuffixTrie",
    "build_trie",
    "trie_stats",
    "to_dot",
]


class Matched(enum.Enum):
    """Whether a query matched completely or only by a prefix."""

    FULL = "full"
    PARTIAL = "partial"


@dataclass(frozen=True)
class MaximalSubstrMatch:
    """Where the longest matching prefix of a query occurs, and its length."""

    index: int
    length: int
    matched: Matched


@dataclass(eq=False)
class _Edge:
    start: int
    end: int
    source: _Node
    target: _Node

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(eq=False)
class _Node:
    parent: _Edge | None = None
    children: dict = field(default_factory=dict)
    terminal: int | None = None
    suffix: _Node | None = None

    def first_child(self) -> _Edge:
        return self.children[min(self.children)]


class _Scan(NamedTuple):
    upper: _Node
    lower: _Node
    pos: int
    matched: int
    unmatched: int


class SuffixTrie:
    """Suffix tree of a sequence of hashable, ordered characters."""

    def __init__(self, s: Sequence) -> None:
        self.s = s
        self.root = _Node()
        self._build()

    def _build(self) -> None:
        self._append(0, self.root, 0)
        head, tail = self.root, 0
        for index in range(1, len(self.s)):
            head, tail = self._insert_suffix(index, head, tail)

    def _scan(self, node: _Node, t: Sequence, pos: int, end: int) -> _Scan:
        s = self.s
        while pos < end:
            edge = node.children.get(t[pos])
            if edge is None:
                return _Scan(node, node, pos, 0, end - pos)
            length = len(edge)
            k = 1
            while k < length and pos + k < end and s[edge.start + k] == t[pos + k]:
                k += 1
            if k == length:
                node = edge.target
                pos += k
                continue
            return _Scan(node, edge.target, pos, k, end - pos - k)
        return _Scan(node, node, pos, 0, 0)

    def _fast_scan(self, node: _Node, pos: int, end: int) -> _Scan:
        s = self.s
        while pos < end:
            edge = node.children.get(s[pos])
            if edge is None:
                raise RuntimeError("path below suffix link must exist")
            if end - pos < len(edge):
                return _Scan(node, edge.target, pos, end - pos, 0)
            node = edge.target
            pos += len(edge)
        return _Scan(node, node, pos, 0, 0)

    def _append(self, index: int, node: _Node, start: int) -> None:
        end = len(self.s)
        if start == end:
            node.terminal = index
            return
        leaf = _Node(terminal=index)
        edge = _Edge(start, end, node, leaf)
        leaf.parent = edge
        node.children[self.s[start]] = edge

    def _split(self, node: _Node, ch, length: int) -> _Node:
        if length <= 0:
            raise ValueError("split length must be positive")
        edge = node.children[ch]
        middle = _Node(parent=edge)
        remainder = _Edge(edge.start + length, edge.end, middle, edge.target)
        edge.target.parent = remainder
        middle.children[self.s[remainder.start]] = remainder
        edge.end = edge.start + length
        edge.target = middle
        return middle

    def _insert_suffix(self, index: int, head: _Node, tail: int) -> tuple[_Node, int]:
        s = self.s
        n = len(s)
        parent_edge = head.parent
        is_head = False
        if parent_edge is not None:
            parent = parent_edge.source
            if parent.parent is not None:
                base = parent.suffix
                if base is None:
                    raise RuntimeError("inner node is missing its suffix link")
                start = parent_edge.start
            else:
                base = parent
                start = parent_edge.start + 1
            found = self._fast_scan(base, start, parent_edge.end)
            if found.matched == 0:
                suffix_head = found.upper
            else:
                suffix_head = self._split(found.upper, s[found.pos], found.matched)
                is_head = True
            head.suffix = suffix_head
            base, start = suffix_head, tail
        else:
            base, start = head, tail + 1

        if is_head:
            new_head, new_tail = base, start
        else:
            found = self._scan(base, s, start, n)
            new_tail = n - found.unmatched
            if found.matched == 0:
                new_head = found.upper
            else:
                new_head = self._split(found.upper, s[found.pos], found.matched)

        self._append(index, new_head, new_tail)
        return new_head, new_tail

    @staticmethod
    def _terminals(node: _Node) -> set[int]:
        result: set[int] = set()
        stack = [node]
        while stack:
            current = stack.pop()
            if current.terminal is not None:
                result.add(current.terminal)
            stack.extend(edge.target for edge in current.children.values())
        return result

    @staticmethod
    def _single_terminal(node: _Node) -> int:
        while node.terminal is None:
            if not node.children:
                raise RuntimeError("node without terminal must have children")
            node = node.first_child().target
        return node.terminal

    def indexes_substr(self, t: Sequence) -> set[int]:
        """Return every start index at which ``t`` occurs."""
        found = self._scan(self.root, t, 0, len(t))
        if found.unmatched:
            return set()
        return self._terminals(found.lower)

    def indexes_substr_maximal(self, t: Sequence) -> set[MaximalSubstrMatch]:
        """Return every occurrence of the longest prefix of ``t`` that occurs."""
        found = self._scan(self.root, t, 0, len(t))
        matched = Matched.PARTIAL if found.unmatched else Matched.FULL
        length = len(t) - found.unmatched
        return {
            MaximalSubstrMatch(index, length, matched)
            for index in self._terminals(found.lower)
        }

    def index_substr_maximal(self, t: Sequence) -> MaximalSubstrMatch:
        """Return one occurrence of the longest prefix of ``t`` that occurs."""
        found = self._scan(self.root, t, 0, len(t))
        matched = Matched.PARTIAL if found.unmatched else Matched.FULL
        return MaximalSubstrMatch(
            self._single_terminal(found.lower), len(t) - found.unmatched, matched
        )


def build_trie(s: Sequence) -> SuffixTrie:
    """Build the suffix tree of ``s``."""
    return SuffixTrie(s)


def trie_stats(trie: SuffixTrie) -> list[str]:
    """Print edge-length and branch-depth statistics; return the printed lines."""
    edge_lengths: list[int] = []
    branch_depths: list[int] = []
    queue: deque[tuple[_Node, int]] = deque([(trie.root, 0)])
    while queue:
        node, depth = queue.popleft()
        for key in sorted(node.children):
            edge = node.children[key]
            edge_lengths.append(len(edge))
            branch_depths.append(depth)
            queue.append((edge.target, depth + 1))

    header = f"nodes: {len(branch_depths)}, edges: {len(edge_lengths)}"
    print(header)
    return [
        header,
        print_histogram("edge length", edge_lengths),
        print_histogram("node branch depth", branch_depths),
    ]


def to_dot(trie: SuffixTrie) -> str:
    """Render the tree and its suffix links as a Graphviz digraph."""
    ids: dict[int, str] = {}

    def node_id(node: _Node) -> str:
        return ids.setdefault(id(node), f"n{len(ids)}")

    out = ["digraph G {"]
    stack = [trie.root]
    while stack:
        node = stack.pop()
        nid = node_id(node)
        out.append(f'    "{nid}" [label="" shape=point];')
        if node.terminal is not None:
            out.append(f'    "{nid}_t" [label="{node.terminal}"];')
            out.append(f'    "{nid}" -> "{nid}_t" [label="$" dir=none];')
        if node.suffix is not None:
            out.append(f'    "{nid}" -> "{node_id(node.suffix)}" [style=dashed];')
        for key in sorted(node.children, reverse=True):
            edge = node.children[key]
            label = "".join(str(ch) for ch in trie.s[edge.start:edge.end])
            out.append(
                f'    "{nid}" -> "{node_id(edge.target)}" [label="{label}" dir=none];'
            )
            stack.append(edge.target)
    out.append("}")
    return "\n".join(out) + "\n"