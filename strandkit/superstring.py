"""Greedy shortest common superstring by repeatedly merging maximal overlaps."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from itertools import count

__all__ = ["scs"]


def _overlap(s: Sequence, t: Sequence) -> int:
    """Length of the longest suffix of ``s`` that is also a prefix of ``t``."""
    for k in range(min(len(s), len(t)), 0, -1):
        if s[len(s) - k:] == t[:k]:
            return k
    return 0


@dataclass(eq=False)
class _Node:
    text: Sequence
    incoming: list[_Edge] = field(default_factory=list)
    outgoing: list[_Edge] = field(default_factory=list)
    deleted: bool = False

    def live_incoming(self) -> list[_Edge]:
        return [edge for edge in self.incoming if not edge.deleted]

    def live_outgoing(self) -> list[_Edge]:
        return [edge for edge in self.outgoing if not edge.deleted]


@dataclass(eq=False)
class _Edge:
    source: _Node
    target: _Node
    overlap: int
    deleted: bool = False


def scs(strs: Iterable[Sequence], min_overlap: int) -> list:
    """Merge strings greedily along their largest overlaps.

    Two strings are merged while the overlap between them is at least
    ``min_overlap``. The strings left over are returned in the order they
    were created: unmerged inputs first in input order, merges after.
    """
    nodes = [_Node(text) for text in strs]

    heap: list[tuple[int, int, _Edge]] = []
    order = count()
    for source in nodes:
        for target in nodes:
            if source is target:
                continue
            edge = _Edge(source, target, _overlap(source.text, target.text))
            source.outgoing.append(edge)
            target.incoming.append(edge)
            heapq.heappush(heap, (-edge.overlap, next(order), edge))

    while heap:
        _, _, edge = heapq.heappop(heap)
        if edge.deleted:
            continue
        edge.deleted = True
        if edge.overlap < min_overlap:
            continue

        source, target = edge.source, edge.target
        source.deleted = True
        target.deleted = True

        merged = _Node(source.text + target.text[edge.overlap:])
        nodes.append(merged)

        for out in source.live_outgoing():
            out.deleted = True
        for inc in source.live_incoming():
            if inc.source is target:
                inc.deleted = True
            else:
                inc.target = merged
                merged.incoming.append(inc)

        for inc in target.live_incoming():
            inc.deleted = True
        for out in target.live_outgoing():
            out.source = merged
            merged.outgoing.append(out)

    return [node.text for node in nodes if not node.deleted]