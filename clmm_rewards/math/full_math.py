"""
Full Math - 전체 정밀도 곱셈/나눗셈

Uniswap V3 FullMath.mulDiv / mulDivRoundingUp와 동일한 결과.
Python 정수는 무한 정밀도이므로 512비트 중간값 트릭 없이
정확한 곱을 계산한 뒤 uint256 범위만 검사합니다.

References:
- Uniswap V3 Core: contracts/libraries/FullMath.sol
- Uniswap V3 Core: contracts/libraries/LowGasSafeMath.sol

wrapping_add / wrapping_sub는 의도적인 uint256 랩어라운드 연산입니다.
growth 값은 상대값으로만 의미가 있으므로 차이 계산은 항상 mod 2^256.
"""

from ..constants import UINT256_MAX
from ..errors import ArithmeticOverflow

_MOD_256 = UINT256_MAX + 1


def _require_uint256(*values: int) -> None:
    for value in values:
        if value < 0 or value > UINT256_MAX:
            raise ArithmeticOverflow(f"uint256 범위를 벗어난 피연산자: {value}")


def mul_div_floor(a: int, b: int, denominator: int) -> int:
    """⌊a × b / denominator⌋

    Args:
        a: 피승수 (uint256)
        b: 승수 (uint256)
        denominator: 제수 (uint256, 0 불가)

    Returns:
        내림한 몫 (uint256)

    Raises:
        ArithmeticOverflow: 분모가 0이거나 결과가 uint256을 초과하는 경우
    """
    _require_uint256(a, b, denominator)
    if denominator == 0:
        raise ArithmeticOverflow("mul_div: 분모가 0입니다")

    result = (a * b) // denominator
    if result > UINT256_MAX:
        raise ArithmeticOverflow(f"mul_div: 결과가 uint256을 초과합니다 ({a} * {b} / {denominator})")
    return result


def mul_div_ceil(a: int, b: int, denominator: int) -> int:
    """⌈a × b / denominator⌉

    수수료 차감 전 금액 역산처럼 프로토콜 쪽으로 올림해야 하는 경우에만 사용.

    Raises:
        ArithmeticOverflow: 분모가 0이거나 올림 결과가 uint256을 초과하는 경우
    """
    result = mul_div_floor(a, b, denominator)
    if (a * b) % denominator > 0:
        if result == UINT256_MAX:
            raise ArithmeticOverflow("mul_div_ceil: 올림 결과가 uint256을 초과합니다")
        result += 1
    return result


def wrapping_add(a: int, b: int) -> int:
    """(a + b) mod 2^256"""
    return (a + b) % _MOD_256


def wrapping_sub(a: int, b: int) -> int:
    """(a - b) mod 2^256

    Solidity unchecked 블록의 언더플로우와 동일하게 동작.
    """
    return (a - b) % _MOD_256
