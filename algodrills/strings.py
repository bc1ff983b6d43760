"""String exercises: frequency ordering, palindromes, rotations and more."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

_LAST_SUPPORTED = "z"


def frequency_sort(s: str) -> str:
    """Order the characters of ``s`` by falling frequency.

    Characters that occur equally often come in falling character order.
    Only characters up to ``'z'`` are supported.
    """
    if any(ch > _LAST_SUPPORTED for ch in s):
        raise ValueError("frequency_sort() supports characters up to 'z' only")
    counts = Counter(s)
    ordered = sorted(counts.items(), key=lambda item: (item[1], item[0]), reverse=True)
    return "".join(ch * count for ch, count in ordered)


def is_isomorphic(s: str, t: str) -> bool:
    """Tell whether ``s`` maps onto ``t`` one character to one character."""
    if len(s) != len(t):
        return False
    forward: dict[str, str] = {}
    backward: dict[str, str] = {}
    for original, replacement in zip(s, t):
        if original in forward:
            if forward[original] != replacement:
                return False
        else:
            if replacement in backward:
                return False
            forward[original] = replacement
            backward[replacement] = original
    return True


def largest_odd_number(num: str) -> str:
    """Return the longest prefix of the digit string ``num`` that ends in an odd digit."""
    for end in range(len(num), 0, -1):
        if (ord(num[end - 1]) - ord("0")) & 1:
            return num[:end]
    return ""


def longest_common_prefix(strs: Iterable[str]) -> str:
    """Return the longest prefix shared by every string (empty if none given)."""
    ordered = sorted(strs)
    if not ordered:
        return ""
    first, last = ordered[0], ordered[-1]
    length = 0
    for a, b in zip(first, last):
        if a != b:
            break
        length += 1
    return first[:length]


def _expand(s: str, left: int, right: int) -> int:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return right - left - 1


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring; the leftmost one wins ties."""
    if not s:
        return ""
    start, best = 0, 0
    for i in range(len(s)):
        length = max(_expand(s, i - 1, i + 1), _expand(s, i, i + 1))
        if length > best:
            best = length
            start = i - (length - 1) // 2
    return s[start : start + best]


def reverse_words(s: str) -> str:
    """Return the space-separated words of ``s`` in reverse order, single-spaced."""
    return " ".join(reversed([word for word in s.split(" ") if word]))


def rotate_string(s: str, goal: str) -> bool:
    """Tell whether ``goal`` is some left rotation of ``s``."""
    return len(s) == len(goal) and goal in s + s


def _beauty(counts: Counter[str]) -> int:
    frequencies = [count for count in counts.values() if count > 0]
    return max(frequencies) - min(frequencies)


def beauty_sum(s: str) -> int:
    """Sum, over every substring, the gap between its most and least frequent letters.

    Only lowercase ASCII letters are supported.
    """
    if any(not ("a" <= ch <= "z") for ch in s):
        raise ValueError("beauty_sum() supports lowercase letters a-z only")
    total = 0
    for start in range(len(s)):
        counts: Counter[str] = Counter()
        for ch in s[start:]:
            counts[ch] += 1
            total += _beauty(counts)
    return total