import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from strandkit.suffix_graph import GraphSuffixTrie, build_trie
from strandkit.suffix_trie import Matched, MaximalSubstrMatch

SAMPLE = "ABAABABAA"


def naive_indexes(s, t):
    return {i for i in range(len(s) - len(t) + 1) if s[i:i + len(t)] == t}


def test_empty_string_empty_query():
    trie = build_trie("")
    assert trie.indexes_substr("") == {0}


def test_repetition():
    trie = build_trie("AAA")
    assert trie.indexes_substr("AAA") == {0}
    assert trie.indexes_substr("AA") == {0, 1}
    assert trie.indexes_substr("A") == {0, 1, 2}


def test_find_substr():
    trie = build_trie(SAMPLE)
    assert trie.indexes_substr("") == set(range(9))
    assert trie.indexes_substr("AAA") == set()
    assert trie.indexes_substr("ABA") == {0, 3, 5}
    assert trie.indexes_substr("BAA") == {1, 6}


def test_find_maximal_substr():
    trie = build_trie(SAMPLE)
    assert trie.index_substr_maximal("ABA") == MaximalSubstrMatch(5, 3, Matched.FULL)
    assert trie.index_substr_maximal("BAA") == MaximalSubstrMatch(6, 3, Matched.FULL)
    assert trie.index_substr_maximal("AAA") == MaximalSubstrMatch(
        7, 2, Matched.PARTIAL
    )


def test_query_longer_than_string():
    trie = build_trie("AA")
    assert trie.indexes_substr("AAA") == set()


def test_missing_first_char_is_partial_zero():
    trie = build_trie("AAB")
    result = trie.index_substr_maximal("C")
    assert result.length == 0
    assert result.matched is Matched.PARTIAL


def test_list_of_ints():
    trie = GraphSuffixTrie([1, 2, 1, 2, 3])
    assert trie.indexes_substr([1, 2]) == {0, 2}
    assert trie.indexes_substr([2, 3]) == {3}
    assert trie.indexes_substr([3, 1]) == set()


def test_node_count_bounded():
    s = "ABAABABAAB"
    trie = build_trie(s)
    assert 1 <= trie.node_count <= 2 * len(s) + 1


def test_split_rejects_non_positive_length():
    trie = build_trie("AB")
    with pytest.raises(ValueError):
        trie._split(trie.root, "A", 0)


@settings(max_examples=300)
@given(
    st.text(alphabet="AB", max_size=20),
    st.text(alphabet="AB", min_size=3, max_size=3),
)
def test_matches_naive(s, t):
    trie = build_trie(s)
    assert trie.indexes_substr(t) == naive_indexes(s, t)


@settings(max_examples=300)
@given(
    st.text(alphabet="AB", min_size=1, max_size=20),
    st.text(alphabet="AB", max_size=6),
)
def test_maximal_is_real_occurrence(s, t):
    trie = build_trie(s)
    result = trie.index_substr_maximal(t)
    assert s[result.index:result.index + result.length] == t[:result.length]
    if result.matched is Matched.FULL:
        assert result.length == len(t)
    else:
        assert not naive_indexes(s, t[:result.length + 1])


@settings(max_examples=200)
@given(st.text(alphabet="ABC", max_size=25))
def test_every_suffix_found(s):
    trie = build_trie(s)
    for i in range(len(s)):
        assert i in trie.indexes_substr(s[i:])