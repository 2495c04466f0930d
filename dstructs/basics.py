"""Small numeric and string routines: factorial, multiplication table, char codes."""

from __future__ import annotations

from itertools import takewhile


def factorial(num: int) -> int:
    """Return num! with every value of num <= 1 giving 1."""
    result = 1
    for k in range(2, num + 1):
        result *= k
    return result


def factorial_trace(num: int) -> tuple[int, list[str]]:
    """Return num! and the call/return messages a recursive evaluation produces."""
    calls = list(range(num, 1, -1))
    lines = [f"factorial({k}) 함수 호출" for k in calls]
    lines.append("factorial(1) 함수 호출")
    lines.append("factorial(1) 값 1 반환")
    value = 1
    for k in reversed(calls):
        value *= k
        lines.append(f"factorial({k}) 값 {value} 반환")
    return value, lines


def times_table(n: int) -> list[int]:
    """Return the products n*1 .. n*9; n must lie in 0..9."""
    if n < 0 or n > 9:
        raise ValueError(f"expected an integer from 0 to 9, got {n}")
    return [n * k for k in range(1, 10)]


def _until_nul(text: str) -> str:
    return text.split("\0", 1)[0]


def char_codes(text: str) -> list[int]:
    """Return the code of each character up to the first newline."""
    return [ord(ch) for ch in takewhile(lambda ch: ch != "\n", _until_nul(text))]


def string_length(text: str) -> int:
    """Return the number of characters before the first NUL, newline included."""
    return len(_until_nul(text))