"""
Full Math 테스트

mul_div_floor / mul_div_ceil과 uint256 랩어라운드 연산을 테스트합니다.
"""

import pytest

from ..math.full_math import (
    mul_div_floor,
    mul_div_ceil,
    wrapping_add,
    wrapping_sub
)
from ..constants import Q128, UINT256_MAX
from ..errors import ArithmeticOverflow


class TestMulDivFloor:
    """mul_div_floor 테스트"""

    def test_exact_division(self):
        assert mul_div_floor(500 * 1000, Q128, 100) == 5000 * Q128

    def test_rounds_down(self):
        assert mul_div_floor(7, 3, 2) == 10  # 21 / 2 = 10.5

    def test_intermediate_exceeds_256_bits(self):
        """곱은 256비트를 넘지만 결과는 범위 내"""
        result = mul_div_floor(UINT256_MAX, UINT256_MAX, UINT256_MAX)
        assert result == UINT256_MAX

    def test_zero_denominator(self):
        with pytest.raises(ArithmeticOverflow):
            mul_div_floor(1, 1, 0)

    def test_result_overflow(self):
        with pytest.raises(ArithmeticOverflow):
            mul_div_floor(UINT256_MAX, 2, 1)

    def test_negative_operand(self):
        with pytest.raises(ArithmeticOverflow):
            mul_div_floor(-1, 1, 1)


class TestMulDivCeil:
    """mul_div_ceil 테스트"""

    def test_exact_division_no_round(self):
        assert mul_div_ceil(10, 10, 5) == 20

    def test_rounds_up(self):
        assert mul_div_ceil(7, 3, 2) == 11

    def test_ceil_minus_floor_at_most_one(self):
        for a, b, d in [(1, 1, 3), (Q128, 3, 7), (123456789, 987654321, 1000)]:
            assert 0 <= mul_div_ceil(a, b, d) - mul_div_floor(a, b, d) <= 1

    def test_round_up_overflow(self):
        """내림 결과가 UINT256_MAX이고 나머지가 있으면 오버플로우"""
        # (2^255 - 1)(2^255 + 1) = 2^510 - 1 = 2^254 × UINT256_MAX + (2^254 - 1)
        a, b, d = 2 ** 255 - 1, 2 ** 255 + 1, 2 ** 254
        assert mul_div_floor(a, b, d) == UINT256_MAX
        with pytest.raises(ArithmeticOverflow):
            mul_div_ceil(a, b, d)

    def test_zero_denominator(self):
        with pytest.raises(ArithmeticOverflow):
            mul_div_ceil(1, 1, 0)


class TestWrapping:
    """uint256 랩어라운드 테스트"""

    def test_sub_underflow_wraps(self):
        assert wrapping_sub(0, 1) == UINT256_MAX

    def test_add_overflow_wraps(self):
        assert wrapping_add(UINT256_MAX, 2) == 1

    def test_sub_then_add_restores(self):
        """차이는 랩어라운드 후에도 복원 가능"""
        a, b = 5, 10 ** 70
        assert wrapping_add(wrapping_sub(a, b), b) == a


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
