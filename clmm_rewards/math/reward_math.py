"""
Reward Math - 범위 내 보상 성장률 계산

fee growth와 동일한 "growth outside" 공식을 보상 채널(최대 10개)에 적용.
모든 차이 계산은 uint256 랩어라운드(wrapping_sub)로 수행합니다.

References:
- 백서 Section 6.3: Tick-Indexed State (feeGrowthOutside)
- 백서 Section 6.4.1: Position-Indexed State (uncollected fees)

핵심 공식 (채널 c마다):
    r_b(i) = r_o(i)        if i_c >= i else r_g - r_o(i)  # 틱 i 아래 보상
    r_a(i) = r_o(i)        if i_c < i  else r_g - r_o(i)  # 틱 i 위 보상
    r_r = r_g - r_b(i_l) - r_a(i_u)                       # 범위 내 보상
    r_u = l × (r_r(t_1) - r_r(t_0)) / 2^128               # 미정산 보상

주의: 한 번도 초기화되지 않은 틱은 r_o = 0으로 취급되므로,
경계 틱이 초기화된 적 없는 범위는 전역 성장 전체를 "범위 내"로 계산합니다.
이미 배포된 정산 로직과의 호환을 위해 그대로 유지합니다.
"""

from typing import Sequence, Tuple

from ..constants import Q128, NUM_REWARD_CHANNELS, GrowthVector
from .full_math import mul_div_floor, wrapping_sub


def rewards_growth_below(
    tick_idx: int,
    current_tick: int,
    rewards_growth_global: int,
    rewards_growth_outside: int
) -> int:
    """틱 아래에서 발생한 보상 성장률 (r_b)"""
    if current_tick >= tick_idx:
        return rewards_growth_outside
    return wrapping_sub(rewards_growth_global, rewards_growth_outside)


def rewards_growth_above(
    tick_idx: int,
    current_tick: int,
    rewards_growth_global: int,
    rewards_growth_outside: int
) -> int:
    """틱 위에서 발생한 보상 성장률 (r_a)"""
    if current_tick < tick_idx:
        return rewards_growth_outside
    return wrapping_sub(rewards_growth_global, rewards_growth_outside)


def rewards_growth_inside(
    tick_lower: int,
    tick_upper: int,
    current_tick: int,
    rewards_growth_global: int,
    rewards_growth_outside_lower: int,
    rewards_growth_outside_upper: int
) -> int:
    """범위 내 보상 성장률 (r_r), 단일 채널

    Args:
        tick_lower: 하한 틱 (i_l)
        tick_upper: 상한 틱 (i_u)
        current_tick: 현재 틱 (i_c)
        rewards_growth_global: 전역 rewards growth (r_g)
        rewards_growth_outside_lower: 하한 틱의 rewards growth outside
        rewards_growth_outside_upper: 상한 틱의 rewards growth outside

    Returns:
        범위 내 rewards growth (mod 2^256)
    """
    below = rewards_growth_below(
        tick_lower, current_tick, rewards_growth_global, rewards_growth_outside_lower
    )
    above = rewards_growth_above(
        tick_upper, current_tick, rewards_growth_global, rewards_growth_outside_upper
    )
    return wrapping_sub(wrapping_sub(rewards_growth_global, below), above)


def growth_inside_vector(
    tick_lower: int,
    tick_upper: int,
    current_tick: int,
    rewards_growth_global: Sequence[int],
    rewards_growth_outside_lower: Sequence[int],
    rewards_growth_outside_upper: Sequence[int]
) -> GrowthVector:
    """모든 보상 채널의 범위 내 성장률 (lock-step)"""
    _require_channels(rewards_growth_global, rewards_growth_outside_lower, rewards_growth_outside_upper)
    return tuple(
        rewards_growth_inside(tick_lower, tick_upper, current_tick, g, lo, up)
        for g, lo, up in zip(
            rewards_growth_global, rewards_growth_outside_lower, rewards_growth_outside_upper
        )
    )


def calculate_rewards_owed(
    liquidity: int,
    rewards_growth_inside_current: Sequence[int],
    rewards_growth_inside_last: Sequence[int]
) -> Tuple[int, ...]:
    """포지션의 미정산 보상 계산 (채널별, 토큰 최소 단위)

    마지막 체크포인트 이후 범위 내 성장분 × 포지션 유동성 / 2^128.
    실제 지급/청구는 외부 rewards controller 책임입니다.

    Args:
        liquidity: 포지션 유동성 (l)
        rewards_growth_inside_current: 현재 범위 내 growth (r_r(t_1))
        rewards_growth_inside_last: 체크포인트 시점 growth (r_r(t_0))

    Returns:
        채널별 미정산 보상
    """
    _require_channels(rewards_growth_inside_current, rewards_growth_inside_last)
    return tuple(
        mul_div_floor(wrapping_sub(current, last), liquidity, Q128)
        for current, last in zip(rewards_growth_inside_current, rewards_growth_inside_last)
    )


def decode_growth(growth_x128: int, decimals: int = 18) -> float:
    """Q128 인코딩된 rewards growth를 human-readable 값으로 변환"""
    return growth_x128 / Q128 / (10 ** decimals)


def as_growth_vector(vector: Sequence[int]) -> GrowthVector:
    """채널 수 검증 후 불변 growth 벡터로 변환"""
    if len(vector) != NUM_REWARD_CHANNELS:
        raise ValueError(
            f"growth 벡터 길이는 {NUM_REWARD_CHANNELS}이어야 합니다: {len(vector)}"
        )
    return tuple(vector)


def _require_channels(*vectors: Sequence[int]) -> None:
    for vector in vectors:
        as_growth_vector(vector)
