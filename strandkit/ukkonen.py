"""Suffix tree built by extending every pending suffix one character at a time.

Each step appends the next character of the string to every suffix that has
not yet branched off into its own leaf. A suffix whose next character has no
edge gets a leaf edge that runs to the end of the string and is then done.
When all characters are consumed, every suffix's node is marked with the
suffix's index. The empty string has no suffixes and so no marked nodes.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass, field

from strandkit.util import print_histogram

__all__ = ["UkkonenSuffixTrie", "build_trie", "trie_stats", "to_dot"]


@dataclass(eq=False)
class _Edge:
    start: int
    end: int
    target: _Node

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(eq=False)
class _Node:
    children: dict = field(default_factory=dict)
    terminal: int | None = None


@dataclass(frozen=True)
class _Tracker:
    node: _Node
    fully_inserted: bool = False


class UkkonenSuffixTrie:
    """Suffix tree of a sequence of hashable characters."""

    def __init__(self, s: Sequence) -> None:
        self.s = s
        self.root = _Node()
        self._build()

    def _build(self) -> None:
        trackers: list[_Tracker] = []
        pending = 0
        for i in range(len(self.s)):
            trackers.append(_Tracker(self.root))
            for j, tracker in enumerate(trackers[pending:], start=pending):
                advanced = self._insert_char(tracker.node, i)
                if advanced.fully_inserted:
                    pending = j + 1
                trackers[j] = advanced

        for index, tracker in enumerate(trackers):
            tracker.node.terminal = index

    def _insert_char(self, node: _Node, char_index: int) -> _Tracker:
        """Extend the path ending at ``node`` by the character at ``char_index``."""
        ch = self.s[char_index]
        edge = node.children.get(ch)
        if edge is None:
            return _Tracker(self._append_tail(node, char_index), fully_inserted=True)
        if len(edge) == 1:
            return _Tracker(edge.target)
        return _Tracker(self._split_first(edge))

    def _append_tail(self, node: _Node, start: int) -> _Node:
        if start >= len(self.s):
            raise ValueError("tail must not be empty")
        leaf = _Node()
        node.children[self.s[start]] = _Edge(start, len(self.s), leaf)
        return leaf

    def _split_first(self, edge: _Edge) -> _Node:
        """Split ``edge`` after its first character and return the new middle node."""
        middle = _Node()
        remainder = _Edge(edge.start + 1, edge.end, edge.target)
        middle.children[self.s[remainder.start]] = remainder
        edge.end = edge.start + 1
        edge.target = middle
        return middle

    def _locate(self, t: Sequence) -> _Node | None:
        """Return the node at or below the end of ``t``'s path, or None if absent."""
        s = self.s
        node = self.root
        pos = 0
        end = len(t)
        while pos < end:
            edge = node.children.get(t[pos])
            if edge is None:
                return None
            length = len(edge)
            k = 1
            while k < length and pos + k < end and s[edge.start + k] == t[pos + k]:
                k += 1
            if k == length:
                node = edge.target
                pos += k
            elif pos + k == end:
                return edge.target
            else:
                return None
        return node

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

    def indexes_substr(self, t: Sequence) -> set[int]:
        """Return every start index at which ``t`` occurs."""
        node = self._locate(t)
        if node is None:
            return set()
        return self._terminals(node)


def build_trie(s: Sequence) -> UkkonenSuffixTrie:
    """Build the suffix tree of ``s``."""
    return UkkonenSuffixTrie(s)


def trie_stats(trie: UkkonenSuffixTrie) -> list[str]:
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


def to_dot(trie: UkkonenSuffixTrie) -> str:
    """Render the tree as a Graphviz digraph."""
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
        for key in sorted(node.children, reverse=True):
            edge = node.children[key]
            label = "".join(str(ch) for ch in trie.s[edge.start:edge.end])
            out.append(
                f'    "{nid}" -> "{node_id(edge.target)}" [label="{label}" dir=none];'
            )
            stack.append(edge.target)
    out.append("}")
    return "\n".join(out) + "\n"