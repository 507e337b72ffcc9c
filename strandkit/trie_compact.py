"""Compact trie over a collection of strings with exact lookup."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from itertools import count

__all__ = ["CompactTrie", "build_trie", "to_dot"]


@dataclass
class _Edge:
    chars: Sequence
    target: _Node


@dataclass
class _Node:
    children: dict = field(default_factory=dict)
    terminal: int | None = None


def _lcp_len(a: Sequence, b: Sequence) -> int:
    length = 0
    for x, y in zip(a, b):
        if x != y:
            break
        length += 1
    return length


class CompactTrie:
    """Trie with path-compressed edges; each stored string keeps its index."""

    def __init__(self) -> None:
        self.root = _Node()

    def _insert(self, index: int, s: Sequence) -> None:
        node = self.root
        while s:
            edge = node.children.get(s[0])
            if edge is None:
                node.children[s[0]] = _Edge(s, _Node(terminal=index))
                return
            matched = 1 + _lcp_len(s[1:], edge.chars[1:])
            if matched < len(edge.chars):
                middle = _Node()
                remainder = _Edge(edge.chars[matched:], edge.target)
                middle.children[remainder.chars[0]] = remainder
                edge.chars = edge.chars[:matched]
                edge.target = middle
            node = edge.target
            s = s[matched:]
        node.terminal = index

    def find(self, t: Sequence) -> int | None:
        """Return the index of the stored string equal to ``t``, or None."""
        node = self.root
        while t:
            edge = node.children.get(t[0])
            if edge is None:
                return None
            matched = 1 + _lcp_len(t[1:], edge.chars[1:])
            if matched < len(edge.chars):
                return None
            node = edge.target
            t = t[matched:]
        return node.terminal

    def __contains__(self, t: Sequence) -> bool:
        return self.find(t) is not None


def build_trie(strs: Iterable[Sequence]) -> CompactTrie:
    """Build a compact trie; a later duplicate string replaces the earlier index."""
    trie = CompactTrie()
    for index, s in enumerate(strs):
        trie._insert(index, s)
    return trie


def _label(chars: Sequence) -> str:
    return "".join(str(ch) for ch in chars)


def to_dot(trie: CompactTrie) -> str:
    """Render the trie as a Graphviz digraph."""
    ids = count()
    out = ["digraph G {"]

    def visit(node: _Node) -> str:
        node_id = f"n{next(ids)}"
        out.append(f'    "{node_id}" [label="" shape=point];')
        if node.terminal is not None:
            term_id = f"{node_id}_t"
            out.append(f'    "{term_id}" [label="{node.terminal}"];')
            out.append(f'    "{node_id}" -> "{term_id}" [label="$" dir=none];')
        for key in sorted(node.children):
            edge = node.children[key]
            child_id = visit(edge.target)
            out.append(
                f'    "{node_id}" -> "{child_id}" [label="{_label(edge.chars)}" dir=none];'
            )
        return node_id

    visit(trie.root)
    out.append("}")
    return "\n".join(out) + "\n"