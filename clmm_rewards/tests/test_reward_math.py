"""
Reward Math 테스트

범위 내 보상 성장률(r_r)과 미정산 보상(r_u) 계산을 테스트합니다.
"""

import pytest

from ..math.reward_math import (
    rewards_growth_above,
    rewards_growth_below,
    rewards_growth_inside,
    growth_inside_vector,
    calculate_rewards_owed,
    decode_growth,
    as_growth_vector
)
from ..math.full_math import wrapping_sub
from ..constants import Q128, NUM_REWARD_CHANNELS


def _vector(*values):
    return tuple(values) + (0,) * (NUM_REWARD_CHANNELS - len(values))


class TestRewardsGrowthAbove:
    """rewards_growth_above 테스트 (r_a)"""

    def test_current_tick_above_target(self):
        """i_c >= i 이면 r_a = r_g - r_o"""
        result = rewards_growth_above(tick_idx=100, current_tick=150,
                                      rewards_growth_global=1000, rewards_growth_outside=300)
        assert result == 700

    def test_current_tick_at_target(self):
        """현재 틱이 타겟 틱과 같으면 위쪽은 r_g - r_o"""
        result = rewards_growth_above(tick_idx=100, current_tick=100,
                                      rewards_growth_global=1000, rewards_growth_outside=300)
        assert result == 700

    def test_current_tick_below_target(self):
        """i_c < i 이면 r_a = r_o"""
        result = rewards_growth_above(tick_idx=100, current_tick=50,
                                      rewards_growth_global=1000, rewards_growth_outside=300)
        assert result == 300


class TestRewardsGrowthBelow:
    """rewards_growth_below 테스트 (r_b)"""

    def test_current_tick_above_target(self):
        result = rewards_growth_below(tick_idx=100, current_tick=150,
                                      rewards_growth_global=1000, rewards_growth_outside=300)
        assert result == 300

    def test_current_tick_at_target(self):
        result = rewards_growth_below(tick_idx=100, current_tick=100,
                                      rewards_growth_global=1000, rewards_growth_outside=300)
        assert result == 300

    def test_current_tick_below_target(self):
        result = rewards_growth_below(tick_idx=100, current_tick=50,
                                      rewards_growth_global=1000, rewards_growth_outside=300)
        assert result == 700


class TestRewardsGrowthInside:
    """rewards_growth_inside 테스트 (r_r = r_g - r_b - r_a)"""

    def test_current_tick_in_range(self):
        result = rewards_growth_inside(
            tick_lower=100, tick_upper=200, current_tick=150,
            rewards_growth_global=1000,
            rewards_growth_outside_lower=100,
            rewards_growth_outside_upper=200
        )
        # r_b = 100, r_a = 200 → 700
        assert result == 700

    def test_current_tick_below_range_wraps(self):
        result = rewards_growth_inside(
            tick_lower=100, tick_upper=200, current_tick=50,
            rewards_growth_global=1000,
            rewards_growth_outside_lower=100,
            rewards_growth_outside_upper=200
        )
        # r_b = 900, r_a = 200 → -100 (mod 2^256)
        assert result == 2**256 - 100

    def test_current_tick_above_range(self):
        result = rewards_growth_inside(
            tick_lower=100, tick_upper=200, current_tick=250,
            rewards_growth_global=1000,
            rewards_growth_outside_lower=100,
            rewards_growth_outside_upper=200
        )
        # r_b = 100, r_a = 800 → 100
        assert result == 100

    def test_uninitialized_bounds_attribute_everything_inside(self):
        """초기화된 적 없는 경계(r_o = 0): 전역 성장 전체가 범위 내로 잡힘"""
        result = rewards_growth_inside(
            tick_lower=100, tick_upper=200, current_tick=150,
            rewards_growth_global=1000,
            rewards_growth_outside_lower=0,
            rewards_growth_outside_upper=0
        )
        assert result == 1000


class TestGrowthInsideVector:
    """growth_inside_vector 테스트 (채널 lock-step)"""

    def test_channels_computed_independently(self):
        result = growth_inside_vector(
            100, 200, 150,
            _vector(1000, 50, 7),
            _vector(100, 10, 0),
            _vector(200, 20, 0)
        )
        assert result == _vector(700, 20, 7)

    def test_wrong_channel_count(self):
        with pytest.raises(ValueError):
            growth_inside_vector(100, 200, 150, (1000,), (0,), (0,))

    def test_as_growth_vector_returns_tuple(self):
        assert as_growth_vector([1] * NUM_REWARD_CHANNELS) == (1,) * NUM_REWARD_CHANNELS


class TestCalculateRewardsOwed:
    """calculate_rewards_owed 테스트 (r_u = l × Δr_r / 2^128)"""

    def test_basic_calculation(self):
        owed = calculate_rewards_owed(
            1000000,
            _vector(500 * Q128, 3 * Q128),
            _vector(100 * Q128, Q128)
        )
        assert owed == _vector(400 * 1000000, 2 * 1000000)

    def test_zero_delta(self):
        growth = _vector(100 * Q128)
        assert calculate_rewards_owed(1000000, growth, growth) == _vector()

    def test_wrapped_global_growth(self):
        """체크포인트 이후 growth가 2^256을 넘어 래핑되어도 차이는 정확"""
        last = _vector(wrapping_sub(0, Q128))
        current = _vector(Q128)
        owed = calculate_rewards_owed(10, current, last)
        assert owed[0] == 20

    def test_rounds_down(self):
        owed = calculate_rewards_owed(3, _vector(Q128 // 2), _vector())
        assert owed[0] == 1  # 1.5 → 1


class TestDecodeGrowth:
    """decode_growth 테스트"""

    def test_basic_decoding(self):
        result = decode_growth(Q128, decimals=18)
        assert abs(result - 1e-18) < 1e-30

    def test_large_value(self):
        result = decode_growth(1000 * Q128, decimals=6)
        assert abs(result - 0.001) < 1e-10


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
