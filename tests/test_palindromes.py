import pytest

from algonotes.palindromes import is_palindrome, min_cut, partition

WORDS = ["aab", "racecar", "abcba", "abba", "banana", "x", "noonabbad"]


@pytest.mark.parametrize("s", ["", "a", "ab", "abc", "xyz"])
def test_mirrored_strings_are_palindromes(s):
    assert is_palindrome(s + s[::-1]) is True
    assert is_palindrome(s + "q" + s[::-1]) is True


def test_non_palindrome():
    assert is_palindrome("ab") is False


def test_partition_example():
    assert partition("aab") == [["a", "a", "b"], ["aa", "b"]]


def test_partition_of_empty_string():
    assert partition("") == [[]]


@pytest.mark.parametrize("s", WORDS)
def test_partitions_are_palindromic_and_rebuild_the_string(s):
    result = partition(s)
    for parts in result:
        assert "".join(parts) == s
        assert all(is_palindrome(part) for part in parts)
    assert len({tuple(parts) for parts in result}) == len(result)


@pytest.mark.parametrize("s", WORDS)
def test_first_partition_is_single_characters(s):
    assert partition(s)[0] == list(s)


@pytest.mark.parametrize("s", WORDS)
def test_min_cut_matches_shortest_partition(s):
    assert min_cut(s) == min(len(parts) for parts in partition(s)) - 1


@pytest.mark.parametrize("s", ["a", "racecar", "abba", "zz"])
def test_palindrome_needs_no_cut(s):
    assert min_cut(s) == 0


@pytest.mark.parametrize("s", ["abc", "abcdef"])
def test_distinct_characters_need_a_cut_between_each(s):
    assert min_cut(s) == len(s) - 1


def test_min_cut_of_empty_string():
    assert min_cut("") == -1