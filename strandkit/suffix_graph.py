"""Suffix tree built with McCreight's algorithm on an index-based graph.

Nodes are plain integers; tree edges, parent edges, suffix links and
terminals live in per-node tables. Edges hold ``(start, end)`` spans of the
indexed string rather than copies of it. When a node has to pick one child,
it follows the edge added to it most recently.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple

from strandkit.suffix_trie import Matched, MaximalSubstrMatch

__all__ = ["GraphSuffixTrie", "build_trie"]


class _TreeEdge(NamedTuple):
    start: int
    end: int
    target: int


class _ParentEdge(NamedTuple):
    source: int
    start: int
    end: int


class _Scan(NamedTuple):
    upper: int
    lower: int
    pos: int
    matched: int
    unmatched: int


class GraphSuffixTrie:
    """Suffix tree of a sequence of hashable characters, stored as a graph."""

    def __init__(self, s: Sequence) -> None:
        self.s = s
        self._children: list[dict[object, _TreeEdge]] = []
        self._parent: list[_ParentEdge | None] = []
        self._suffix: list[int | None] = []
        self._terminal: list[int | None] = []
        self.root = self._add_node()
        self._build()

    @property
    def node_count(self) -> int:
        """Number of nodes in the tree, the root included."""
        return len(self._children)

    def _add_node(self, terminal: int | None = None) -> int:
        self._children.append({})
        self._parent.append(None)
        self._suffix.append(None)
        self._terminal.append(terminal)
        return len(self._children) - 1

    def _add_edge(self, source: int, start: int, end: int, target: int) -> None:
        self._children[source][self.s[start]] = _TreeEdge(start, end, target)
        self._parent[target] = _ParentEdge(source, start, end)

    def _remove_edge(self, source: int, ch) -> _TreeEdge:
        edge = self._children[source].pop(ch)
        self._parent[edge.target] = None
        return edge

    def _build(self) -> None:
        self._append(0, self.root, 0)
        head, tail = self.root, 0
        for index in range(1, len(self.s)):
            head, tail = self._insert_suffix(index, head, tail)

    def _scan(self, node: int, t: Sequence, pos: int, end: int) -> _Scan:
        s = self.s
        while pos < end:
            edge = self._children[node].get(t[pos])
            if edge is None:
                return _Scan(node, node, pos, 0, end - pos)
            length = edge.end - edge.start
            k = 1
            while k < length and pos + k < end and s[edge.start + k] == t[pos + k]:
                k += 1
            if k == length:
                node = edge.target
                pos += k
                continue
            return _Scan(node, edge.target, pos, k, end - pos - k)
        return _Scan(node, node, pos, 0, 0)

    def _fast_scan(self, node: int, pos: int, end: int) -> _Scan:
        s = self.s
        while pos < end:
            edge = self._children[node].get(s[pos])
            if edge is None:
                raise RuntimeError("should be full match")
            length = edge.end - edge.start
            if end - pos < length:
                return _Scan(node, edge.target, pos, end - pos, 0)
            node = edge.target
            pos += length
        return _Scan(node, node, pos, 0, 0)

    def _append(self, index: int, node: int, start: int) -> None:
        end = len(self.s)
        if start == end:
            self._terminal[node] = index
            return
        leaf = self._add_node(terminal=index)
        self._add_edge(node, start, end, leaf)

    def _split(self, node: int, ch, length: int) -> int:
        if length <= 0:
            raise ValueError("split length must be positive")
        edge = self._remove_edge(node, ch)
        middle = self._add_node()
        self._add_edge(node, edge.start, edge.start + length, middle)
        self._add_edge(middle, edge.start + length, edge.end, edge.target)
        return middle

    def _insert_suffix(self, index: int, head: int, tail: int) -> tuple[int, int]:
        s = self.s
        n = len(s)
        parent_edge = self._parent[head]
        is_head = False
        if parent_edge is not None:
            parent = parent_edge.source
            if self._parent[parent] is not None:
                base = self._suffix[parent]
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
            self._suffix[head] = suffix_head
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

    def _terminals(self, node: int) -> set[int]:
        result: set[int] = set()
        stack = [node]
        while stack:
            current = stack.pop()
            terminal = self._terminal[current]
            if terminal is not None:
                result.add(terminal)
            stack.extend(edge.target for edge in self._children[current].values())
        return result

    def _single_terminal(self, node: int) -> int:
        while self._terminal[node] is None:
            children = self._children[node]
            if not children:
                raise RuntimeError("must have edge if not terminal")
            node = next(reversed(children.values())).target
        return self._terminal[node]

    def indexes_substr(self, t: Sequence) -> set[int]:
        """Return every start index at which ``t`` occurs."""
        found = self._scan(self.root, t, 0, len(t))
        if found.unmatched:
            return set()
        return self._terminals(found.lower)

    def index_substr_maximal(self, t: Sequence) -> MaximalSubstrMatch:
        """Return one occurrence of the longest prefix of ``t`` that occurs."""
        found = self._scan(self.root, t, 0, len(t))
        matched = Matched.PARTIAL if found.unmatched else Matched.FULL
        return MaximalSubstrMatch(
            self._single_terminal(found.lower), len(t) - found.unmatched, matched
        )


def build_trie(s: Sequence) -> GraphSuffixTrie:
    """Build the suffix tree of ``s``."""
    return GraphSuffixTrie(s)