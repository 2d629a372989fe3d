import pytest

from kata.strings import (
    add_binary,
    detect_capital_use,
    generate_parenthesis,
    is_palindrome,
    is_valid_parentheses,
    length_of_last_word,
    length_of_longest_substring,
    longest_common_prefix,
    reformat,
    roman_to_int,
    str_str,
)


@pytest.mark.parametrize("s", ["", "a", "abcdef", "xyz123"])
def test_longest_substring_all_distinct(s):
    assert length_of_longest_substring(s) == len(s)


@pytest.mark.parametrize("unit", ["abc", "ab", "qwerty"])
def test_longest_substring_repeated_unit(unit):
    assert length_of_longest_substring(unit * 5) == len(unit)


@pytest.mark.parametrize("s", ["pwwkew", "abba", "dvdf", "tmmzuxt"])
def test_longest_substring_bounded(s):
    result = length_of_longest_substring(s)
    assert 1 <= result <= len(set(s))
    assert any(
        len(set(s[i:i + result])) == result for i in range(len(s) - result + 1)
    )


@pytest.mark.parametrize(
    "digit, value",
    [("M", 1000), ("D", 500), ("C", 100), ("L", 50), ("X", 10), ("V", 5), ("I", 1)],
)
def test_roman_single_digits(digit, value):
    assert roman_to_int(digit) == value


def test_roman_worked_example():
    assert roman_to_int("MCMXCIV") == 1994


def test_roman_repetition_adds():
    assert roman_to_int("MMM") == 3 * roman_to_int("M")
    assert roman_to_int("XX") == roman_to_int("X") + roman_to_int("X")


def test_roman_subtractive_pair():
    assert roman_to_int("IV") == roman_to_int("V") - roman_to_int("I")
    assert roman_to_int("CM") == roman_to_int("M") - roman_to_int("C")


def test_roman_invalid_digit():
    with pytest.raises(ValueError):
        roman_to_int("XIZ")


def test_common_prefix_empty_cases():
    assert longest_common_prefix([]) == ""
    assert longest_common_prefix(["", "abc"]) == ""
    assert longest_common_prefix(["dog", "racecar", "car"]) == ""


def test_common_prefix_example():
    strs = ["flower", "flow", "flight"]
    result = longest_common_prefix(strs)
    assert result == "fl"
    assert all(s.startswith(result) for s in strs)


def test_common_prefix_single():
    assert longest_common_prefix(["alone"]) == "alone"


@pytest.mark.parametrize("s", ["", "()", "()[]{}", "{[()]}", "(([]){})"])
def test_valid_parentheses(s):
    assert is_valid_parentheses(s)


@pytest.mark.parametrize("s", ["(]", "([)]", "(", ")", "a", "(a)", "]["])
def test_invalid_parentheses(s):
    assert not is_valid_parentheses(s)


@pytest.mark.parametrize("n", [1, 2, 3, 4])
def test_generate_parenthesis_invariants(n):
    result = generate_parenthesis(n)
    assert len(set(result)) == len(result)
    assert all(len(p) == 2 * n and is_valid_parentheses(p) for p in result)
    assert result == sorted(result)
    assert result[0] == "(" * n + ")" * n
    assert result[-1] == "()" * n


def test_generate_parenthesis_count():
    assert len(generate_parenthesis(3)) == 5


def test_generate_parenthesis_zero():
    assert generate_parenthesis(0) == [""]


@pytest.mark.parametrize(
    "haystack, needle", [("sadbutsad", "sad"), ("hello", "ll"), ("aaab", "ab")]
)
def test_str_str_found(haystack, needle):
    index = str_str(haystack, needle)
    assert haystack[index:index + len(needle)] == needle
    assert needle not in haystack[:index + len(needle) - 1]


def test_str_str_missing():
    assert str_str("leetcode", "leeto") == -1


def test_str_str_empty_needle():
    assert str_str("abc", "") == 0


def test_length_of_last_word():
    assert length_of_last_word("Hello World") == len("World")
    assert length_of_last_word("   fly me   to   the moon  ") == len("moon")
    assert length_of_last_word("luffy") == len("luffy")
    assert length_of_last_word("   ") == 0


@pytest.mark.parametrize("a, b", [(0, 0), (1, 1), (3, 1), (10, 11), (255, 1), (12345, 678)])
def test_add_binary_matches_int(a, b):
    result = add_binary(format(a, "b"), format(b, "b"))
    assert int(result, 2) == a + b
    assert result == format(a + b, "b")


def test_add_binary_uneven_lengths_commute():
    assert add_binary("1", "1111") == add_binary("1111", "1")


@pytest.mark.parametrize("s", ["A man, a plan, a canal: Panama", " ", "", "No 'x' in Nixon"])
def test_is_palindrome_true(s):
    assert is_palindrome(s)


@pytest.mark.parametrize("s", ["race a car", "0P", "ab"])
def test_is_palindrome_false(s):
    assert not is_palindrome(s)


@pytest.mark.parametrize("word", ["USA", "leetcode", "Google", "A", "a"])
def test_detect_capital_valid(word):
    assert detect_capital_use(word)


@pytest.mark.parametrize("word", ["FlaG", "gOOGLE", "A1", "usA"])
def test_detect_capital_invalid(word):
    assert not detect_capital_use(word)


def _is_alternating(s):
    kinds = [c.isdigit() for c in s]
    return all(x != y for x, y in zip(kinds, kinds[1:]))


@pytest.mark.parametrize("s", ["a0b1c2", "covid2019", "ab123", "a1", "7", "z"])
def test_reformat_alternates(s):
    result = reformat(s)
    assert sorted(result) == sorted(s)
    assert _is_alternating(result)


def test_reformat_equal_counts_start_with_letter():
    result = reformat("1a2b")
    assert not result[0].isdigit()
    assert sorted(result) == sorted("1a2b")


def test_reformat_keeps_relative_order():
    result = reformat("ab12")
    assert [c for c in result if c.isdigit()] == ["1", "2"]
    assert [c for c in result if not c.isdigit()] == ["a", "b"]


@pytest.mark.parametrize("s", ["leetcode", "1229857369", "abc1"])
def test_reformat_impossible(s):
    assert reformat(s) == ""