"""Classic exercises on strings."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import zip_longest

_ROMAN = {"M": 1000, "D": 500, "C": 100, "L": 50, "X": 10, "V": 5, "I": 1}
_CLOSERS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_CLOSERS.values())


def _is_ascii_upper(char: str) -> bool:
    return "A" <= char <= "Z"


def _is_ascii_lower(char: str) -> bool:
    return "a" <= char <= "z"


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without repeated characters."""
    last_seen: dict[str, int] = {}
    start = 0
    longest = 0
    for index, char in enumerate(s):
        previous = last_seen.get(char)
        if previous is None or previous < start:
            longest = max(longest, index - start + 1)
        else:
            start = previous + 1
        last_seen[char] = index
    return longest


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer.

    A digit followed by a larger one is read as one subtractive pair; the
    digit after such a pair starts afresh.
    """
    try:
        values = [_ROMAN[char] for char in s]
    except KeyError as exc:
        raise ValueError(f"invalid Roman digit {exc.args[0]!r}") from None
    total = 0
    pending: int | None = None
    for value in values:
        if pending is None:
            pending = value
        elif pending < value:
            total += value - pending
            pending = None
        else:
            total += pending
            pending = value
    if pending is not None:
        total += pending
    return total


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string."""
    if not strs or not strs[0]:
        return ""
    prefix = []
    for chars in zip(*strs):
        first = chars[0]
        if any(char != first for char in chars):
            break
        prefix.append(first)
    return "".join(prefix)


def is_valid_parentheses(s: str) -> bool:
    """Tell whether every bracket in ``s`` is closed in the right order.

    Any character other than ``()[]{}`` makes the string invalid.
    """
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
        elif stack and _CLOSERS.get(char) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack


def _parentheses(prefix: str, opens: int, closes: int) -> Iterator[str]:
    if opens == 0 and closes == 0:
        yield prefix
        return
    if opens > 0:
        yield from _parentheses(prefix + "(", opens - 1, closes)
    if closes > opens:
        yield from _parentheses(prefix + ")", opens, closes - 1)


def generate_parenthesis(n: int) -> list[str]:
    """Return every well-formed string of ``n`` pairs of parentheses."""
    return list(_parentheses("", n, n))


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first ``needle`` in ``haystack``, or -1."""
    return haystack.find(needle)


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word."""
    return len(s.rstrip(" ").split(" ")[-1])


def add_binary(a: str, b: str) -> str:
    """Add two binary numbers given as strings of digits."""
    bits: list[str] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry, bit = divmod(int(x) + int(y) + carry, 2)
        bits.append(str(bit))
    while carry:
        carry, bit = divmod(carry, 2)
        bits.append(str(bit))
    return "".join(reversed(bits))


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same both ways, ignoring case and non-alphanumerics."""
    cleaned = [char.lower() for char in s if char.isascii() and char.isalnum()]
    return cleaned == cleaned[::-1]


def detect_capital_use(word: str) -> bool:
    """Tell whether a word is all capitals, all lower case, or capitalised."""
    if all(_is_ascii_upper(char) for char in word):
        return True
    if all(_is_ascii_lower(char) for char in word):
        return True
    return _is_ascii_upper(word[0]) and all(_is_ascii_lower(char) for char in word[1:])


def reformat(s: str) -> str:
    """Interleave digits and non-digits so no two of a kind touch, or return ''."""
    digits = [char for char in s if _is_ascii_digit(char)]
    letters = [char for char in s if not _is_ascii_digit(char)]
    if abs(len(digits) - len(letters)) > 1:
        return ""
    if len(digits) > len(letters):
        first, second = digits, letters
    else:
        first, second = letters, digits
    return "".join(x + y for x, y in zip_longest(first, second, fillvalue=""))