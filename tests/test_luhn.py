"""Tests for secid.checksum.luhn."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from secid.checksum.luhn import is_valid_luhn, luhn_check_digit

_VECTOR = "79927398713"


class TestIsValidLuhn:
    @pytest.mark.parametrize("number", [79927398713, 0, 18, 59, 4539578763621486])
    def test_valid(self, number: int) -> None:
        assert is_valid_luhn(number)

    @pytest.mark.parametrize("number", [79927398710, 79927398714, 1, 19, 4539578763621487])
    def test_invalid(self, number: int) -> None:
        assert not is_valid_luhn(number)

    def test_negative_is_invalid(self) -> None:
        assert not is_valid_luhn(-18)

    def test_check_digit_is_not_doubled(self) -> None:
        # 91: 1 + (9*2 - 9) = 10. Doubling the 1 instead would give 11.
        assert is_valid_luhn(91)
        assert not is_valid_luhn(19)

    @pytest.mark.parametrize("position", range(len(_VECTOR)))
    def test_any_single_digit_change_detected(self, position: int) -> None:
        for d in "0123456789":
            if d == _VECTOR[position]:
                continue
            mutated = _VECTOR[:position] + d + _VECTOR[position + 1:]
            assert not is_valid_luhn(int(mutated)), mutated


class TestLuhnCheckDigit:
    def test_known_vector(self) -> None:
        assert luhn_check_digit(7992739871) == 3

    def test_zero(self) -> None:
        assert luhn_check_digit(0) == 0

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError):
            luhn_check_digit(-1)

    @given(st.integers(min_value=0, max_value=10**18))
    def test_appended_digit_validates(self, n: int) -> None:
        assert is_valid_luhn(n * 10 + luhn_check_digit(n))

    @given(st.integers(min_value=0, max_value=10**18))
    def test_exactly_one_digit_validates(self, n: int) -> None:
        assert sum(is_valid_luhn(n * 10 + d) for d in range(10)) == 1
