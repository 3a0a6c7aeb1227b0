"""
CLMM Reward Ledger

집중화된 유동성 풀의 시간 가중 유동성 마이닝 보상 회계 라이브러리.
수수료 장부와 독립적으로 최대 10개 보상 채널의 growth를 틱 범위별로 추적.
"""

__version__ = "0.1.0"

from .constants import Q128, NUM_REWARD_CHANNELS, MIN_TICK, MAX_TICK
from .errors import (
    RewardLedgerError,
    ArithmeticOverflow,
    LiquidityError,
    LiquidityOverflow,
    LiquidityUnderflow,
    Unauthorized,
    InvalidTickRange,
    LedgerAlreadyExists,
)
from .schemas import RewardPeriodInfo, LedgerState
from .ledger import (
    RewardLedger,
    TickInfo,
    TickRewardIndex,
    StaticRewardRateSource,
    create_reward_ledger,
    LedgerRegistry,
)
