"""Parsing exercises: parentheses, integers and Roman numerals."""

from __future__ import annotations

import re

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_NUMBER = re.compile(r" *([+-]?)([0-9]*)")

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def max_depth(s: str) -> int:
    """Return the deepest nesting of parentheses in ``s``."""
    depth = deepest = 0
    for ch in s:
        if ch == "(":
            depth += 1
            deepest = max(deepest, depth)
        elif ch == ")":
            depth -= 1
    return deepest


def my_atoi(s: str) -> int:
    """Read a signed 32-bit integer from the start of ``s``.

    Leading spaces are skipped, one sign is accepted, and reading stops
    at the first non-digit. The result is clamped to the 32-bit range.
    """
    match = _NUMBER.match(s)
    sign = -1 if match.group(1) == "-" else 1
    digits = match.group(2)
    value = sign * int(digits) if digits else 0
    return max(INT_MIN, min(INT_MAX, value))


def remove_outer_parentheses(s: str) -> str:
    """Strip the outermost pair from each primitive group of a parentheses string."""
    result: list[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(s):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        else:
            raise ValueError(f"unexpected character {ch!r} in parentheses string")
        if depth == 0:
            result.append(s[start + 1 : i])
            start = i + 1
    return "".join(result)


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer; unknown letters count as zero."""
    values = [_ROMAN_VALUES.get(ch, 0) for ch in s]
    total = 0
    for current, following in zip(values, values[1:] + [0]):
        total += -current if current < following else current
    return total