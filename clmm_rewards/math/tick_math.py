"""
Tick Math - 틱 범위 검증

틱 ↔ 가격 변환은 base pool 책임이므로 여기서는
범위 검증과 틱당 최대 유동성 계산만 제공합니다.

References:
- Uniswap V3 Core: contracts/libraries/Tick.sol (tickSpacingToMaxLiquidityPerTick)
- Uniswap V3 Core: contracts/UniswapV3Pool.sol (checkTicks)
- 백서 Section 6.1: Ticks and Tick Spacing
"""

from ..constants import MIN_TICK, MAX_TICK, UINT128_MAX
from ..errors import InvalidTickRange


def check_ticks(tick_lower: int, tick_upper: int) -> None:
    """포지션 틱 범위 검증

    Raises:
        InvalidTickRange: tick_lower >= tick_upper (TLU),
            tick_lower < MIN_TICK (TLM), tick_upper > MAX_TICK (TUM)
    """
    if tick_lower >= tick_upper:
        raise InvalidTickRange(f"TLU: tick_lower({tick_lower}) >= tick_upper({tick_upper})")
    if tick_lower < MIN_TICK:
        raise InvalidTickRange(f"TLM: tick_lower({tick_lower}) < {MIN_TICK}")
    if tick_upper > MAX_TICK:
        raise InvalidTickRange(f"TUM: tick_upper({tick_upper}) > {MAX_TICK}")


def tick_spacing_to_max_liquidity_per_tick(tick_spacing: int) -> int:
    """틱 간격에서 틱당 최대 유동성 계산

    사용 가능한 틱 수로 uint128 최대값을 균등 분할합니다.
    모든 틱이 초기화되어도 활성 유동성이 uint128을 넘지 않도록 보장.

    Args:
        tick_spacing: 틱 간격 (예: 60 for 0.3% fee)

    Returns:
        틱당 최대 liquidity_gross
    """
    if tick_spacing <= 0:
        raise ValueError(f"틱 간격은 양수여야 합니다: {tick_spacing}")

    # Solidity의 int24 나눗셈은 0 방향 절삭
    min_tick = -(-MIN_TICK // tick_spacing) * tick_spacing
    max_tick = (MAX_TICK // tick_spacing) * tick_spacing
    num_ticks = (max_tick - min_tick) // tick_spacing + 1
    return UINT128_MAX // num_ticks
