"""
Ledger layer

- tick_index: 틱별 보상 레코드 (TickRewardIndex)
- ledger: 풀별 보상 회계 장부 (RewardLedger)
- factory: 풀 생성 시 ledger 생성 및 레지스트리
- interfaces: base pool / rate source 인터페이스
"""

from .tick_index import TickInfo, TickRewardIndex
from .interfaces import BasePool, RewardRateSource, StaticRewardRateSource
from .ledger import RewardLedger
from .factory import create_reward_ledger, LedgerRegistry
