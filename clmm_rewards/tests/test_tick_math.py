"""
Tick Math 테스트

틱 범위 검증과 틱당 최대 유동성 계산을 테스트합니다.
"""

import pytest

from ..math.tick_math import (
    check_ticks,
    tick_spacing_to_max_liquidity_per_tick
)
from ..constants import MIN_TICK, MAX_TICK, UINT128_MAX
from ..errors import InvalidTickRange


class TestCheckTicks:
    """check_ticks 테스트"""

    def test_valid_range(self):
        check_ticks(-60, 60)
        check_ticks(MIN_TICK, MAX_TICK)

    def test_lower_not_below_upper(self):
        with pytest.raises(InvalidTickRange, match="TLU"):
            check_ticks(60, 60)

    def test_lower_too_low(self):
        with pytest.raises(InvalidTickRange, match="TLM"):
            check_ticks(MIN_TICK - 1, 0)

    def test_upper_too_high(self):
        with pytest.raises(InvalidTickRange, match="TUM"):
            check_ticks(0, MAX_TICK + 1)

    def test_is_value_error(self):
        """틱 오류는 ValueError로도 잡힘"""
        with pytest.raises(ValueError):
            check_ticks(1, 0)


class TestMaxLiquidityPerTick:
    """tick_spacing_to_max_liquidity_per_tick 테스트"""

    def test_spacing_60(self):
        # 사용 가능한 틱: -887220 ~ 887220, 60 간격 → 29575개
        assert tick_spacing_to_max_liquidity_per_tick(60) == UINT128_MAX // 29575

    def test_spacing_1(self):
        # MIN_TICK ~ MAX_TICK 전부 → 1774545개
        assert tick_spacing_to_max_liquidity_per_tick(1) == UINT128_MAX // 1774545

    def test_max_spacing_gives_three_ticks(self):
        assert tick_spacing_to_max_liquidity_per_tick(887272) == UINT128_MAX // 3

    def test_smaller_spacing_smaller_cap(self):
        assert tick_spacing_to_max_liquidity_per_tick(10) < tick_spacing_to_max_liquidity_per_tick(200)

    def test_invalid_spacing(self):
        with pytest.raises(ValueError):
            tick_spacing_to_max_liquidity_per_tick(0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
