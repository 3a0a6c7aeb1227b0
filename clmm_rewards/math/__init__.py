"""
Math layer for the reward ledger

온체인 수준 정밀도의 수학 함수들:
- full_math: 전체 정밀도 mul_div, uint256 랩어라운드 연산
- liquidity_math: 유동성 증감 (오버플로우/언더플로우 검사)
- tick_math: 틱 범위 검증, 틱당 최대 유동성
- reward_math: 범위 내 보상 성장률, 미정산 보상
"""

from .full_math import (
    mul_div_floor,
    mul_div_ceil,
    wrapping_add,
    wrapping_sub,
)
from .liquidity_math import (
    add_delta,
    add_net,
)
from .tick_math import (
    check_ticks,
    tick_spacing_to_max_liquidity_per_tick,
)
from .reward_math import (
    rewards_growth_below,
    rewards_growth_above,
    rewards_growth_inside,
    growth_inside_vector,
    calculate_rewards_owed,
    decode_growth,
)
