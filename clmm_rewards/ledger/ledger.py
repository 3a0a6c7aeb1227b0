"""
Reward Ledger - 풀별 보상 회계 장부

base pool의 수수료 장부와 독립적으로 최대 10개 보상 채널의
시간 가중 성장률을 누적하고, 틱 크로싱/유동성 변경을 TickRewardIndex에 위임합니다.

Global State (백서 Section 6.2, Table 1을 보상 채널로 확장):
- rewards_growth_global: 활성 유동성 단위당 채널별 누적 보상 (Q128)
- active_liquidity: 현재 가격에서 활성화된 유동성 (L)
- last_accrual_timestamp: 전역 성장이 마지막으로 갱신된 시각

누적 공식 (채널 c마다):
    Δr_g = duration × rate_c × 2^128 / (precision_factor × L)

호출 순서:
    base pool은 크로싱 직전에 accrue(크로싱 시각)를 호출해야 합니다.
    accrue는 유동성 변경과 교환 법칙이 성립하지 않습니다.

모든 공개 메서드는 ledger 단위 락 하나 아래에서 실행되며,
실패한 호출의 상태 변경은 전부 롤백됩니다.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from ..config import settings
from ..constants import Q128, ZERO_GROWTH, GrowthVector
from ..errors import Unauthorized
from ..math.full_math import mul_div_floor, wrapping_add
from ..math.liquidity_math import add_delta
from ..math.tick_math import check_ticks
from ..schemas import LedgerState
from .interfaces import BasePool, RewardRateSource
from .tick_index import TickInfo, TickRewardIndex

logger = logging.getLogger(__name__)


class RewardLedger:
    """단일 풀의 보상 회계 장부

    풀 생성 시 factory(create_reward_ledger)로 한 번만 생성되며
    풀과 수명이 같습니다.

    사용법:
        ledger = create_reward_ledger(pool, rate_source, "0xpool", "pool", "manager", created_at=0)
        ledger.on_liquidity_changed(-60, 60, 100, caller="manager")
        ledger.accrue(500, caller="pool")
        growth = ledger.accrued_rewards_growth_inside(-60, 60)
    """

    def __init__(
        self,
        pool: BasePool,
        rate_source: RewardRateSource,
        pool_id: str,
        pool_caller: str,
        position_manager: str,
        created_at: int,
        precision_factor: Optional[int] = None
    ):
        """
        Args:
            pool: base pool (현재 틱, 틱당 최대 유동성 제공)
            rate_source: 채널별 배출 속도 제공자
            pool_id: rate source 조회에 쓰는 풀 식별자
            pool_caller: base pool 호출자 식별자
            position_manager: position manager 호출자 식별자
            created_at: 생성 시각 (last_accrual_timestamp 초기값)
            precision_factor: 배출 속도 정밀도 계수 (기본값: settings.PRECISION_FACTOR)
        """
        if precision_factor is None:
            precision_factor = settings.PRECISION_FACTOR
        if precision_factor <= 0:
            raise ValueError(f"precision_factor는 양수여야 합니다: {precision_factor}")
        if created_at < 0:
            raise ValueError(f"created_at은 음수일 수 없습니다: {created_at}")

        self.pool = pool
        self.rate_source = rate_source
        self.pool_id = pool_id
        self.pool_caller = pool_caller
        self.position_manager = position_manager
        self.precision_factor = precision_factor
        self.ticks = TickRewardIndex()

        self._rewards_growth_global: GrowthVector = ZERO_GROWTH
        self._active_liquidity: int = 0
        self._last_accrual_timestamp: int = created_at
        self._lock = threading.RLock()

    # -- Observability ------------------------------------------------------

    @property
    def active_liquidity(self) -> int:
        with self._lock:
            return self._active_liquidity

    @property
    def last_accrual_timestamp(self) -> int:
        with self._lock:
            return self._last_accrual_timestamp

    @property
    def rewards_growth_global(self) -> GrowthVector:
        with self._lock:
            return self._rewards_growth_global

    def get_tick(self, tick: int) -> TickInfo:
        with self._lock:
            return self.ticks.get(tick)

    def state(self) -> LedgerState:
        """일관된 스냅샷"""
        with self._lock:
            return LedgerState(
                pool_id=self.pool_id,
                active_liquidity=self._active_liquidity,
                last_accrual_timestamp=self._last_accrual_timestamp,
                rewards_growth_global=self._rewards_growth_global,
                initialized_ticks=len(self.ticks),
            )

    # -- Queries ------------------------------------------------------------

    def accrued_rewards_growth_inside(self, tick_lower: int, tick_upper: int) -> GrowthVector:
        """현재 틱과 전역 growth 스냅샷 기준 범위 내 채널별 growth

        아직 accrue되지 않은 시간은 포함하지 않습니다.
        """
        with self._lock:
            _, current_tick = self.pool.current_tick_and_price()
            return self.ticks.get_growth_inside(
                tick_lower, tick_upper, current_tick, self._rewards_growth_global
            )

    # -- Mutations ----------------------------------------------------------

    def accrue(self, current_timestamp: int, caller: str) -> None:
        """current_timestamp까지 전역 rewards growth 누적

        Raises:
            Unauthorized: base pool / position manager 이외의 호출자
            ArithmeticOverflow: 누적 계산이 uint256을 초과
        """
        self._require_caller(caller, (self.pool_caller, self.position_manager), "accrue")
        with self._lock, self._atomic(()):
            self._accrue(current_timestamp)

    def on_tick_crossed(
        self,
        tick: int,
        price_decreasing: bool,
        caller: str,
        timestamp: Optional[int] = None
    ) -> int:
        """틱 크로싱 반영

        Args:
            tick: 크로싱된 틱
            price_decreasing: 오른쪽→왼쪽(가격 하락) 크로싱이면 True
            caller: 호출자 식별자
            timestamp: 주어지면 크로싱 전에 해당 시각까지 accrue

        Returns:
            active_liquidity에 적용된 유동성 변화량 (틱에 유동성이 없으면 0)

        Raises:
            Unauthorized: base pool / position manager 이외의 호출자
            LiquidityUnderflow, LiquidityOverflow: 활성 유동성 경계 위반
        """
        self._require_caller(caller, (self.pool_caller, self.position_manager), "on_tick_crossed")
        with self._lock, self._atomic((tick,)):
            if timestamp is not None:
                self._accrue(timestamp)

            if not self.ticks.get(tick).initialized:
                return 0

            liquidity_net = self.ticks.cross(tick, self._rewards_growth_global)
            if price_decreasing:
                liquidity_net = -liquidity_net
            self._active_liquidity = add_delta(self._active_liquidity, liquidity_net)

            logger.debug(
                "pool=%s crossed tick=%d decreasing=%s net=%d active=%d",
                self.pool_id, tick, price_decreasing, liquidity_net, self._active_liquidity,
            )
            return liquidity_net

    def on_liquidity_changed(
        self,
        tick_lower: int,
        tick_upper: int,
        liquidity_delta: int,
        caller: str,
        timestamp: Optional[int] = None
    ) -> Tuple[bool, bool]:
        """포지션 유동성 변경 반영 (position manager 전용)

        Args:
            tick_lower: 하한 틱
            tick_upper: 상한 틱
            liquidity_delta: 부호 있는 유동성 변화량
            caller: 호출자 식별자
            timestamp: 주어지면 변경 전에 해당 시각까지 accrue

        Returns:
            (flipped_lower, flipped_upper)

        Raises:
            Unauthorized: position manager 이외의 호출자
            InvalidTickRange: 잘못된 틱 범위
            LiquidityOverflow, LiquidityUnderflow: 틱 또는 활성 유동성 경계 위반
        """
        self._require_caller(caller, (self.position_manager,), "on_liquidity_changed")
        check_ticks(tick_lower, tick_upper)

        with self._lock, self._atomic((tick_lower, tick_upper)):
            if timestamp is not None:
                self._accrue(timestamp)

            _, current_tick = self.pool.current_tick_and_price()
            max_liquidity_per_tick = self.pool.max_liquidity_per_tick()
            growth = self._rewards_growth_global

            flipped_lower = False
            flipped_upper = False
            if liquidity_delta != 0:
                flipped_lower = self.ticks.update(
                    tick_lower, current_tick, liquidity_delta, growth, False, max_liquidity_per_tick
                )
                flipped_upper = self.ticks.update(
                    tick_upper, current_tick, liquidity_delta, growth, True, max_liquidity_per_tick
                )

            if tick_lower <= current_tick < tick_upper:
                self._active_liquidity = add_delta(self._active_liquidity, liquidity_delta)

            if liquidity_delta < 0:
                if flipped_lower:
                    self.ticks.clear(tick_lower)
                if flipped_upper:
                    self.ticks.clear(tick_upper)

            logger.debug(
                "pool=%s liquidity [%d, %d) delta=%d flipped=(%s, %s) active=%d",
                self.pool_id, tick_lower, tick_upper, liquidity_delta,
                flipped_lower, flipped_upper, self._active_liquidity,
            )
            return flipped_lower, flipped_upper

    # -- Internal -----------------------------------------------------------

    def _accrue(self, current_timestamp: int) -> None:
        if current_timestamp <= self._last_accrual_timestamp:
            return

        # 유동성이 없던 구간의 보상은 이월되지 않고 소멸
        if self._active_liquidity == 0:
            self._last_accrual_timestamp = current_timestamp
            return

        period = self.rate_source.latest_period_info(self.pool_id)
        duration = self._accrual_duration(current_timestamp, period.end_timestamp)
        if duration > 0:
            self._rewards_growth_global = tuple(
                wrapping_add(growth, self._growth_delta(rate, duration))
                for growth, rate in zip(self._rewards_growth_global, period.rates_per_second)
            )

        logger.debug(
            "pool=%s accrued %d..%d duration=%d liquidity=%d",
            self.pool_id, self._last_accrual_timestamp, current_timestamp,
            duration, self._active_liquidity,
        )
        self._last_accrual_timestamp = current_timestamp

    def _accrual_duration(self, current_timestamp: int, end_timestamp: int) -> int:
        """[last, now]와 [-, end]의 겹치는 구간 길이"""
        if end_timestamp <= self._last_accrual_timestamp:
            return 0
        return min(current_timestamp, end_timestamp) - self._last_accrual_timestamp

    def _growth_delta(self, rate: int, duration: int) -> int:
        # ⌊⌊a / p⌋ / L⌋ == ⌊a / (p × L)⌋ 이므로 두 단계로 나눠도 결과 동일
        if rate == 0:
            return 0
        emitted_x128 = mul_div_floor(rate * duration, Q128, self.precision_factor)
        return mul_div_floor(emitted_x128, 1, self._active_liquidity)

    def _require_caller(self, caller: str, allowed: Sequence[str], operation: str) -> None:
        if caller not in allowed:
            logger.warning("pool=%s rejected %s from %r", self.pool_id, operation, caller)
            raise Unauthorized(caller, operation)

    @contextmanager
    def _atomic(self, ticks: Iterable[int]) -> Iterator[None]:
        """블록 내에서 예외가 발생하면 전역 상태와 틱 레코드를 되돌림"""
        tick_checkpoint = self.ticks.checkpoint(ticks)
        saved = (self._rewards_growth_global, self._active_liquidity, self._last_accrual_timestamp)
        try:
            yield
        except BaseException:
            self.ticks.restore(tick_checkpoint)
            (
                self._rewards_growth_global,
                self._active_liquidity,
                self._last_accrual_timestamp,
            ) = saved
            raise
