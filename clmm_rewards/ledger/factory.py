"""
Ledger Factory - 풀별 reward ledger 생성 및 관리

ledger는 풀 생성 시점에 명시적으로 생성됩니다 (지연 생성 없음).
ledger가 존재하기 전에 크로싱 이벤트가 도착하는 구간이 생기지 않도록,
base pool 생성 직후 같은 흐름에서 create_reward_ledger를 호출해야 합니다.
"""

import logging
from typing import Dict, Optional

from ..errors import LedgerAlreadyExists
from .interfaces import BasePool, RewardRateSource
from .ledger import RewardLedger

logger = logging.getLogger(__name__)


def create_reward_ledger(
    pool: BasePool,
    rate_source: RewardRateSource,
    pool_id: str,
    pool_caller: str,
    position_manager: str,
    created_at: int,
    precision_factor: Optional[int] = None
) -> RewardLedger:
    """풀에 연결된 reward ledger 생성

    last_accrual_timestamp는 created_at으로 초기화됩니다.
    """
    ledger = RewardLedger(
        pool=pool,
        rate_source=rate_source,
        pool_id=pool_id,
        pool_caller=pool_caller,
        position_manager=position_manager,
        created_at=created_at,
        precision_factor=precision_factor,
    )
    logger.info(
        "Reward ledger created: pool=%s manager=%s created_at=%d precision=%d",
        pool_id, position_manager, created_at, ledger.precision_factor,
    )
    return ledger


class LedgerRegistry:
    """풀 ID → RewardLedger 레지스트리

    풀 하나당 ledger 하나만 허용합니다.

    사용법:
        registry = LedgerRegistry(rate_source, position_manager="manager")
        ledger = registry.create_ledger("0x...", pool, pool_caller="0x...", created_at=0)
        ledger = registry.get_ledger("0x...")
    """

    def __init__(self, rate_source: RewardRateSource, position_manager: str):
        """
        Args:
            rate_source: 모든 ledger가 공유하는 배출 속도 제공자
            position_manager: position manager 호출자 식별자
        """
        self.rate_source = rate_source
        self.position_manager = position_manager
        self._ledgers: Dict[str, RewardLedger] = {}

    @property
    def ledger_count(self) -> int:
        return len(self._ledgers)

    def create_ledger(
        self,
        pool_id: str,
        pool: BasePool,
        pool_caller: str,
        created_at: int,
        precision_factor: Optional[int] = None
    ) -> RewardLedger:
        """풀의 ledger 생성

        Raises:
            LedgerAlreadyExists: 이미 ledger가 있는 풀
        """
        pool_id = pool_id.lower()
        if pool_id in self._ledgers:
            raise LedgerAlreadyExists(f"Ledger already exists for pool {pool_id}")

        ledger = create_reward_ledger(
            pool,
            self.rate_source,
            pool_id,
            pool_caller,
            self.position_manager,
            created_at,
            precision_factor,
        )
        self._ledgers[pool_id] = ledger
        return ledger

    def get_ledger(self, pool_id: str) -> Optional[RewardLedger]:
        return self._ledgers.get(pool_id.lower())
