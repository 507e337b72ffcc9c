import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from strandkit.suffix_trie import (
    Matched,
    MaximalSubstrMatch,
    build_trie,
    to_dot,
    trie_stats,
)


def _occurrences(s, t):
    return {i for i in range(len(s) - len(t) + 1) if s[i:i + len(t)] == t}


def full(index, length):
    return MaximalSubstrMatch(index, length, Matched.FULL)


def partial(index, length):
    return MaximalSubstrMatch(index, length, Matched.PARTIAL)


def test_build_trie_and_find_substr_empty():
    trie = build_trie("")
    assert trie.indexes_substr("") == {0}


def test_build_trie_and_find_substr_repetition():
    trie = build_trie("AAA")
    assert trie.indexes_substr("AAA") == {0}
    assert trie.indexes_substr("AA") == {0, 1}
    assert trie.indexes_substr("A") == {0, 1, 2}


def test_build_trie_and_find_substr():
    trie = build_trie("ABAABABAA")
    assert trie.indexes_substr("") == set(range(9))
    assert trie.indexes_substr("AAA") == set()
    assert trie.indexes_substr("ABA") == {0, 3, 5}
    assert trie.indexes_substr("BAA") == {1, 6}


def test_find_maximal_substr_all():
    trie = build_trie("ABAABABAA")
    assert trie.indexes_substr_maximal("ABA") == {full(0, 3), full(3, 3), full(5, 3)}
    assert trie.indexes_substr_maximal("BAA") == {full(1, 3), full(6, 3)}
    assert trie.indexes_substr_maximal("AAA") == {partial(2, 2), partial(7, 2)}


def test_find_maximal_substr_single():
    trie = build_trie("ABAABABAA")
    assert trie.index_substr_maximal("ABA") == full(5, 3)
    assert trie.index_substr_maximal("BAA") == full(6, 3)
    assert trie.index_substr_maximal("AAA") == partial(7, 2)


def test_works_on_lists():
    trie = build_trie(["A", "B", "A", "A", "B", "A", "B", "A", "A"])
    assert trie.indexes_substr(["A", "B", "A"]) == {0, 3, 5}


def test_query_absent_character():
    trie = build_trie("ACGT")
    assert trie.indexes_substr("X") == set()
    assert all(m.length == 0 for m in trie.indexes_substr_maximal("X"))


def test_trie_stats_lines(capsys):
    lines = trie_stats(build_trie("AA"))
    assert lines[0] == "nodes: 2, edges: 2"
    assert lines[1].startswith("edge length: mean=1, max= 1")
    assert lines[2].startswith("node branch depth: mean=0.5, max= 1")
    assert "nodes: 2, edges: 2" in capsys.readouterr().out


def test_to_dot_has_suffix_links():
    dot = to_dot(build_trie("ABAABABAA"))
    assert dot.startswith("digraph G {")
    assert dot.rstrip().endswith("}")
    assert "style=dashed" in dot
    assert '[label="8"]' in dot


@settings(max_examples=300)
@given(st.text(alphabet="AB", max_size=20), st.text(alphabet="AB", min_size=3, max_size=3))
def test_matches_naive_search(s, t):
    trie = build_trie(s)
    assert trie.indexes_substr(t) == _occurrences(s, t)


@settings(max_examples=200)
@given(st.text(alphabet="ACGT", min_size=1, max_size=30), st.data())
def test_every_substring_found(s, data):
    start = data.draw(st.integers(0, len(s) - 1))
    stop = data.draw(st.integers(start + 1, len(s)))
    t = s[start:stop]
    trie = build_trie(s)
    found = trie.indexes_substr(t)
    assert start in found
    assert found == _occurrences(s, t)


@settings(max_examples=200)
@given(st.text(alphabet="AB", min_size=1, max_size=20), st.text(alphabet="AB", min_size=1, max_size=6))
def test_maximal_match_is_occurring_prefix(s, t):
    trie = build_trie(s)
    match = trie.index_substr_maximal(t)
    prefix = t[:match.length]
    assert s[match.index:match.index + match.length] == prefix
    assert (match.matched is Matched.FULL) == (match.length == len(t))
    if match.length < len(t):
        assert t[:match.length + 1] not in s


@pytest.mark.parametrize("s", ["A", "AB", "ABABABAB", "MISSISSIPPI", "AAAAAAA"])
def test_all_suffixes_indexed(s):
    trie = build_trie(s)
    assert trie.indexes_substr("") == set(range(len(s)))
    for i in range(len(s)):
        assert i in trie.indexes_substr(s[i:])