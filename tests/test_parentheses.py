import pytest

from algonotes.parentheses import (
    generate_parenthesis,
    is_valid,
    longest_valid_parentheses,
    longest_valid_parentheses_dp,
)


def test_generate_zero_pairs():
    assert generate_parenthesis(0) == [""]


def test_generate_one_pair():
    assert generate_parenthesis(1) == ["()"]


def test_generate_three_pairs_count():
    assert len(generate_parenthesis(3)) == 5


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_generated_strings_are_valid_distinct_and_sorted(n):
    result = generate_parenthesis(n)
    assert result == sorted(result)
    assert len(set(result)) == len(result)
    for s in result:
        assert len(s) == 2 * n
        assert is_valid(s) is True
        assert longest_valid_parentheses(s) == 2 * n


def test_generate_starts_with_nested_form():
    assert generate_parenthesis(4)[0] == "(" * 4 + ")" * 4


def test_generate_rejects_negative():
    with pytest.raises(ValueError):
        generate_parenthesis(-1)


def test_longest_valid_example():
    assert longest_valid_parentheses(")()())") == 4


@pytest.mark.parametrize("s", ["", "(", ")", ")("])
def test_longest_valid_without_any_pair(s):
    assert longest_valid_parentheses(s) == 0
    assert longest_valid_parentheses_dp(s) == 0


@pytest.mark.parametrize(
    "s", ["(()", ")()())", "()(()", "(()())", "())(())", "((()))()(", "", "()()"]
)
def test_stack_and_dp_agree(s):
    assert longest_valid_parentheses(s) == longest_valid_parentheses_dp(s)


@pytest.mark.parametrize("s", generate_parenthesis(3))
def test_dp_measures_whole_balanced_string(s):
    assert longest_valid_parentheses_dp(s) == len(s)


@pytest.mark.parametrize("s", ["()", "()[]{}", "{[]}", ""])
def test_valid_brackets(s):
    assert is_valid(s) is True


@pytest.mark.parametrize("s", ["(]", "([)]", "(", "}{"])
def test_invalid_brackets(s):
    assert is_valid(s) is False


@pytest.mark.parametrize("inner", ["()", "[]{}", "{[()]}"])
def test_wrapping_keeps_validity(inner):
    for opener, closer in ("()", "[]", "{}"):
        assert is_valid(opener + inner + closer) is True