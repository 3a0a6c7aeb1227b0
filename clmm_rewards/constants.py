"""
Reward Ledger 상수 정의

온체인 수준 정밀도를 위한 상수들:
- Q128: rewards growth 인코딩에 사용 (2^128)
- NUM_REWARD_CHANNELS: 동시에 추적하는 보상 스트림 수
- 정수 폭 경계 (uint256, uint128, int128)
- 틱 범위
"""

from typing import Tuple

# Fixed-point 인코딩 상수
Q128: int = 2 ** 128

# 보상 채널 수 (reward token 최대 10개)
NUM_REWARD_CHANNELS: int = 10

# 채널별 growth 벡터 (길이 NUM_REWARD_CHANNELS)
GrowthVector = Tuple[int, ...]

ZERO_GROWTH: GrowthVector = (0,) * NUM_REWARD_CHANNELS

# 틱 범위 상수
MIN_TICK: int = -887272
MAX_TICK: int = 887272

# 정수 폭 경계
UINT256_MAX: int = 2 ** 256 - 1
UINT128_MAX: int = 2 ** 128 - 1
INT128_MIN: int = -(2 ** 127)
INT128_MAX: int = 2 ** 127 - 1
