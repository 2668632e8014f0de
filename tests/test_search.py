import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.search import kmp_search, linear_search, prefix_function


def test_prefix_function_example():
    assert prefix_function("aabaaab") == [0, 1, 0, 1, 2, 2, 3]


@given(st.text(alphabet="ab", max_size=30))
def test_prefix_function_entries_are_borders(pattern):
    borders = prefix_function(pattern)
    assert len(borders) == len(pattern)
    for end, border in enumerate(borders, start=1):
        assert 0 <= border < end
        assert pattern[:border] == pattern[end - border:end]


def test_overlapping_matches():
    assert kmp_search("aaaa", "aa") == [0, 1, 2]


def test_pattern_longer_than_text():
    assert kmp_search("ab", "abc") == []


@given(st.text(alphabet="ab", max_size=40), st.text(alphabet="ab", min_size=1, max_size=4))
def test_kmp_matches_regex_lookahead(text, pattern):
    expected = [m.start() for m in re.finditer(f"(?={re.escape(pattern)})", text)]
    assert kmp_search(text, pattern) == expected


@given(st.text(alphabet="abc", max_size=40), st.text(alphabet="abc", min_size=1, max_size=3))
def test_every_match_is_real(text, pattern):
    for index in kmp_search(text, pattern):
        assert text[index:index + len(pattern)] == pattern


def test_works_on_lists():
    text = [1, 2, 1, 2, 1]
    assert kmp_search(text, [1, 2, 1]) == kmp_search("ababa", "aba")


def test_empty_pattern_rejected():
    with pytest.raises(ValueError):
        kmp_search("abc", "")


@given(st.lists(st.integers(min_value=0, max_value=5), min_size=1), st.data())
def test_linear_search_finds_first(values, data):
    key = data.draw(st.sampled_from(values))
    assert linear_search(values, key) == values.index(key)


def test_linear_search_missing_key():
    assert linear_search([4, 8, 15], 16) == -1