"""Luhn mod-10 checksum over a non-negative integer."""

from __future__ import annotations


def _luhn_sum(number: int, *, double_first: bool) -> int:
    """Digit sum walking from the least significant digit.

    double_first selects whether the least significant digit is doubled.
    """
    total = 0
    double = double_first
    while number > 0:
        d = number % 10
        if double:
            d *= 2
            if d > 9:
                d -= 9
        total += d
        double = not double
        number //= 10
    return total


def is_valid_luhn(number: int) -> bool:
    """True if the last digit of number is its correct Luhn check digit.

    The check digit itself is never doubled; doubling starts on the digit
    immediately to its left. Negative numbers are invalid.
    """
    if number < 0:
        return False
    return (number % 10 + _luhn_sum(number // 10, double_first=True)) % 10 == 0


def luhn_check_digit(number: int) -> int:
    """The digit d that makes number * 10 + d pass is_valid_luhn."""
    if number < 0:
        raise ValueError(f"Luhn is defined for non-negative integers, got {number}")
    return (10 - _luhn_sum(number, double_first=True) % 10) % 10
