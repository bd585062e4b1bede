from collections import Counter
from itertools import combinations

import pytest

from algodrills.text import (
    first_unique_char,
    group_anagrams,
    is_valid_parentheses,
    remove_k_digits,
)


@pytest.mark.parametrize("s", ["", "()", "()[]{}", "{[]}", "([{}])[]"])
def test_valid_parentheses_true(s):
    assert is_valid_parentheses(s) is True


@pytest.mark.parametrize("s", ["(]", "([)]", "(", ")", "]", "(()"])
def test_valid_parentheses_false(s):
    assert is_valid_parentheses(s) is False


def test_valid_parentheses_rejects_other_characters():
    with pytest.raises(ValueError):
        is_valid_parentheses("(a)")


def test_first_unique_char_pinned():
    assert first_unique_char("loveleetcode") == 2


@pytest.mark.parametrize("s", ["leetcode", "abcabd", "zz y", "aabbc"])
def test_first_unique_char_is_first_single(s):
    index = first_unique_char(s)
    assert s.count(s[index]) == 1
    assert all(s.count(ch) > 1 for ch in s[:index])


@pytest.mark.parametrize("s", ["", "aabb", "abab"])
def test_first_unique_char_none(s):
    assert first_unique_char(s) == -1


def test_remove_k_digits_pinned():
    assert remove_k_digits("1432219", 3) == "1219"


def test_remove_all_digits_gives_zero():
    assert remove_k_digits("10", 2) == "0"
    assert remove_k_digits("9", 1) == "0"


def test_remove_k_digits_too_many():
    with pytest.raises(ValueError):
        remove_k_digits("12", 3)


@pytest.mark.parametrize(
    "num,k",
    [("10200", 1), ("112", 1), ("9876", 2), ("100200", 1), ("123456", 3), ("43214321", 4)],
)
def test_remove_k_digits_is_minimal(num, k):
    result = remove_k_digits(num, k)
    candidates = {
        int("".join(kept)) for kept in combinations(num, len(num) - k)
    }
    assert int(result) == min(candidates)
    assert result == "0" or not result.startswith("0")


def test_group_anagrams_sample():
    words = ["eat", "tea", "tan", "ate", "nat", "bat"]
    groups = group_anagrams(words)
    assert len(groups) == 3
    assert Counter(w for group in groups for w in group) == Counter(words)
    keys = [{"".join(sorted(w)) for w in group} for group in groups]
    assert all(len(k) == 1 for k in keys)
    assert len({next(iter(k)) for k in keys}) == len(groups)


def test_group_anagrams_keeps_duplicates_together():
    groups = group_anagrams(["", "", "a"])
    assert sorted(groups) == [["", ""], ["a"]]


def test_group_anagrams_empty():
    assert group_anagrams([]) == []