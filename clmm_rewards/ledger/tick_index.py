"""
Tick Reward Index - 틱별 보상 장부

틱 인덱스 → TickInfo 희소 매핑. 등록되지 않은 틱은 0 레코드로 취급합니다.

Tick-Indexed State (백서 Section 6.3, Table 2를 보상 채널로 확장):
- liquidity_gross: 해당 틱을 경계로 하는 총 유동성
- liquidity_net: 왼쪽→오른쪽 크로싱 시 활성 유동성 변화량 (ΔL)
- rewards_growth_outside: 현재 가격 반대편에서 누적된 채널별 보상 (r_o)

r_o는 전역 growth와 함께일 때만 의미가 있는 상대값입니다.
초기화 시점이 다른 두 틱의 r_o를 직접 비교하는 것은 무의미합니다.
"""

from dataclasses import dataclass, replace
from typing import Dict, Iterable, Optional, Sequence

from ..constants import ZERO_GROWTH, GrowthVector
from ..math.full_math import wrapping_sub
from ..math.liquidity_math import add_delta, add_net
from ..math.reward_math import as_growth_vector, growth_inside_vector


@dataclass
class TickInfo:
    """단일 틱 경계의 유동성/보상 레코드"""
    liquidity_gross: int = 0
    liquidity_net: int = 0
    rewards_growth_outside: GrowthVector = ZERO_GROWTH
    initialized: bool = False


# tick -> 변경 전 레코드 (None = 미등록)
TickCheckpoint = Dict[int, Optional[TickInfo]]


class TickRewardIndex:
    """틱별 보상 레코드 저장소

    사용법:
        index = TickRewardIndex()
        flipped = index.update(-60, 0, 100, growth, False, max_liquidity)
        net = index.cross(-60, growth)
        inside = index.get_growth_inside(-60, 60, 0, growth)
    """

    def __init__(self):
        self._ticks: Dict[int, TickInfo] = {}

    def __contains__(self, tick: int) -> bool:
        return tick in self._ticks

    def __len__(self) -> int:
        return len(self._ticks)

    def get(self, tick: int) -> TickInfo:
        """틱 레코드 사본 (미등록 틱은 0 레코드)"""
        info = self._ticks.get(tick)
        return replace(info) if info is not None else TickInfo()

    def update(
        self,
        tick: int,
        current_tick: int,
        liquidity_delta: int,
        rewards_growth_global: Sequence[int],
        is_upper_bound: bool,
        max_liquidity_per_tick: int
    ) -> bool:
        """틱에 유동성 변화량 적용

        첫 초기화 시 tick <= current_tick이면 지금까지의 전역 성장이 모두
        틱 아래에서 발생했다고 간주하여 r_o = r_g로, 아니면 0으로 설정합니다.

        Args:
            tick: 갱신할 틱
            current_tick: 현재 틱 (i_c)
            liquidity_delta: 부호 있는 유동성 변화량
            rewards_growth_global: 채널별 전역 rewards growth (r_g)
            is_upper_bound: 포지션 상한 틱이면 True
            max_liquidity_per_tick: 틱당 liquidity_gross 상한

        Returns:
            flipped: liquidity_gross의 0/비0 상태가 바뀌었으면 True

        Raises:
            LiquidityOverflow: liquidity_gross가 상한 초과
            LiquidityUnderflow: liquidity_gross가 0 미만
        """
        info = self._ticks.get(tick) or TickInfo()

        gross_before = info.liquidity_gross
        gross_after = add_delta(gross_before, liquidity_delta, cap=max_liquidity_per_tick)
        flipped = (gross_after == 0) != (gross_before == 0)

        if gross_before == 0 and gross_after == 0:
            return False

        if is_upper_bound:
            net_after = add_net(info.liquidity_net, -liquidity_delta)
        else:
            net_after = add_net(info.liquidity_net, liquidity_delta)

        outside = info.rewards_growth_outside
        if gross_before == 0:
            if tick <= current_tick:
                outside = as_growth_vector(rewards_growth_global)
            else:
                outside = ZERO_GROWTH

        self._ticks[tick] = TickInfo(
            liquidity_gross=gross_after,
            liquidity_net=net_after,
            rewards_growth_outside=outside,
            initialized=gross_after > 0,
        )
        return flipped

    def cross(self, tick: int, rewards_growth_global: Sequence[int]) -> int:
        """틱 크로싱: r_o = r_g - r_o (채널별, mod 2^256)

        크로싱 방향과 무관하게 크로싱 1회당 정확히 한 번 호출됩니다.
        미등록 틱과 liquidity_gross가 0이 된 (아직 clear되지 않은) 틱은
        저장 없이 0을 반환합니다.

        Returns:
            liquidity_net (오른쪽→왼쪽 크로싱이면 호출자가 부호 반전)
        """
        info = self._ticks.get(tick)
        if info is None or not info.initialized:
            return 0

        growth = as_growth_vector(rewards_growth_global)
        info.rewards_growth_outside = tuple(
            wrapping_sub(g, o) for g, o in zip(growth, info.rewards_growth_outside)
        )
        return info.liquidity_net

    def clear(self, tick: int) -> None:
        """틱 레코드 삭제 (liquidity_gross가 0이 된 직후에만 호출)"""
        self._ticks.pop(tick, None)

    def get_growth_inside(
        self,
        tick_lower: int,
        tick_upper: int,
        current_tick: int,
        rewards_growth_global: Sequence[int]
    ) -> GrowthVector:
        """범위 내 채널별 rewards growth (조회 전용)

        경계 틱이 한 번도 초기화되지 않았다면 전역 성장 전체가
        범위 내로 잡힙니다 (reward_math 모듈 주석 참고).
        """
        lower = self._ticks.get(tick_lower) or TickInfo()
        upper = self._ticks.get(tick_upper) or TickInfo()
        return growth_inside_vector(
            tick_lower,
            tick_upper,
            current_tick,
            rewards_growth_global,
            lower.rewards_growth_outside,
            upper.rewards_growth_outside,
        )

    def checkpoint(self, ticks: Iterable[int]) -> TickCheckpoint:
        """롤백용 레코드 사본"""
        return {
            tick: (replace(self._ticks[tick]) if tick in self._ticks else None)
            for tick in ticks
        }

    def restore(self, checkpoint: TickCheckpoint) -> None:
        for tick, info in checkpoint.items():
            if info is None:
                self._ticks.pop(tick, None)
            else:
                self._ticks[tick] = info
