"""
Liquidity Math - 유동성 증감 계산

부호 있는 유동성 변화량(ΔL)을 부호 없는 유동성에 적용.
언더플로우/오버플로우는 조용히 클램프하지 않고 항상 오류로 처리합니다.

References:
- Uniswap V3 Core: contracts/libraries/LiquidityMath.sol (addDelta)
"""

from ..constants import UINT128_MAX, INT128_MIN, INT128_MAX
from ..errors import LiquidityOverflow, LiquidityUnderflow


def add_delta(liquidity: int, delta: int, cap: int = UINT128_MAX) -> int:
    """유동성에 ΔL 적용

    Args:
        liquidity: 현재 유동성 (uint128)
        delta: 부호 있는 변화량 (int128)
        cap: 허용 상한 (기본 uint128 최대값)

    Returns:
        적용 후 유동성

    Raises:
        LiquidityUnderflow: 결과가 0 미만 (LS)
        LiquidityOverflow: 결과가 cap 초과 (LA)
    """
    result = liquidity + delta
    if result < 0:
        raise LiquidityUnderflow(f"유동성 언더플로우: {liquidity} + ({delta})")
    if result > cap:
        raise LiquidityOverflow(f"유동성 오버플로우: {liquidity} + {delta} > {cap}")
    return result


def add_net(liquidity_net: int, delta: int) -> int:
    """liquidity_net(int128)에 ΔL 적용"""
    result = liquidity_net + delta
    if result < INT128_MIN:
        raise LiquidityUnderflow(f"liquidity_net int128 언더플로우: {result}")
    if result > INT128_MAX:
        raise LiquidityOverflow(f"liquidity_net int128 오버플로우: {result}")
    return result
