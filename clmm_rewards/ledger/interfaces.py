"""
외부 협력자 인터페이스

- BasePool: 현재 틱/가격과 틱당 최대 유동성을 제공하는 base pool
- RewardRateSource: 풀별 채널 배출 속도와 스트림 종료 시각을 제공하는 rewards controller

ledger는 이 인터페이스를 읽기 전용으로만 사용합니다.
"""

from typing import Dict, Protocol, Sequence, Tuple

from ..schemas import RewardPeriodInfo


class BasePool(Protocol):
    """Ledger가 읽는 base pool 상태"""

    def current_tick_and_price(self) -> Tuple[int, int]:
        """(sqrt_price_x96, tick)"""
        ...

    def max_liquidity_per_tick(self) -> int:
        ...


class RewardRateSource(Protocol):
    """보상 배출 속도 제공자"""

    def latest_period_info(self, pool_id: str) -> RewardPeriodInfo:
        ...


class StaticRewardRateSource:
    """메모리 기반 RewardRateSource

    테스트와 로컬 시뮬레이션용. 기간이 등록되지 않은 풀은
    모든 채널 속도 0, 종료 시각 0으로 응답합니다.
    """

    def __init__(self):
        self._periods: Dict[str, RewardPeriodInfo] = {}

    def set_period(self, pool_id: str, rates_per_second: Sequence[int], end_timestamp: int) -> RewardPeriodInfo:
        period = RewardPeriodInfo(rates_per_second=tuple(rates_per_second), end_timestamp=end_timestamp)
        self._periods[pool_id] = period
        return period

    def latest_period_info(self, pool_id: str) -> RewardPeriodInfo:
        period = self._periods.get(pool_id)
        if period is None:
            return RewardPeriodInfo(rates_per_second=(), end_timestamp=0)
        return period
