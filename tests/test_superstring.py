import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from strandkit.superstring import scs


def test_sc_supstr_one():
    assert scs(["uioefghabcd"], 3) == ["uioefghabcd"]


def test_sc_supstr_two():
    assert scs(["uioefghabcd", "abcdefghijk"], 3) == ["uioefghabcdefghijk"]


def test_sc_supstr_three():
    assert scs(["uioefghabcd", "abcdefghijk", "ijklm"], 3) == [
        "uioefghabcdefghijklm"
    ]


def test_sc_supstr_dupl():
    assert scs(["uioefghabcd", "abcdefghijk", "abcdefghijk"], 3) == [
        "uioefghabcdefghijk"
    ]


def test_sc_supstr_no_overlap():
    assert scs(["uioefghabcd", "abcdefghijk"], 5) == [
        "uioefghabcd",
        "abcdefghijk",
    ]


def test_empty_input():
    assert scs([], 3) == []


def test_lists_as_sequences():
    result = scs([list("xxabc"), list("abcyy")], 2)
    assert result == [list("xxabcyy")]


@pytest.mark.parametrize("min_overlap", [0, 1])
def test_low_threshold_merges_everything(min_overlap):
    result = scs(["AAB", "BCC", "CCD"], min_overlap)
    assert len(result) == 1
    for piece in ["AAB", "BCC", "CCD"]:
        assert piece in result[0]


_words = st.lists(st.text(alphabet="AB", min_size=1, max_size=6), min_size=1, max_size=6)


@settings(max_examples=200)
@given(_words, st.integers(min_value=0, max_value=4))
def test_every_input_is_contained(strs, min_overlap):
    result = scs(strs, min_overlap)
    assert 1 <= len(result) <= len(strs)
    for s in strs:
        assert any(s in r for r in result)


@settings(max_examples=100)
@given(_words)
def test_zero_threshold_yields_single_string(strs):
    result = scs(strs, 0)
    assert len(result) == 1
    assert len(result[0]) <= sum(len(s) for s in strs)


@settings(max_examples=100)
@given(_words)
def test_unreachable_threshold_keeps_inputs(strs):
    assert scs(strs, 7) == strs