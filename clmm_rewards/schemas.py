"""
External boundary schemas using Pydantic

- RewardPeriodInfo: rate source (rewards controller)에서 받는 보상 기간 정보
- LedgerState: ledger 관측용 스냅샷 (lens / controller 노출)
"""
from typing import Any, Dict, Tuple

from pydantic import BaseModel, Field, field_validator

from .constants import NUM_REWARD_CHANNELS, UINT256_MAX


class RewardPeriodInfo(BaseModel):
    """Latest reward period for a pool"""
    rates_per_second: Tuple[int, ...] = Field(
        ..., description=f"Per-channel emission rates (up to {NUM_REWARD_CHANNELS})"
    )
    end_timestamp: int = Field(..., description="Stream end timestamp (unix seconds)", ge=0)

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "rates_per_second": [1000, 0, 0, 0, 0, 0, 0, 0, 0, 0],
                "end_timestamp": 1000
            }
        }

    @field_validator("rates_per_second")
    @classmethod
    def _pad_rates(cls, rates: Tuple[int, ...]) -> Tuple[int, ...]:
        if len(rates) > NUM_REWARD_CHANNELS:
            raise ValueError(
                f"at most {NUM_REWARD_CHANNELS} reward channels, got {len(rates)}"
            )
        for rate in rates:
            if rate < 0 or rate > UINT256_MAX:
                raise ValueError(f"rate out of uint256 range: {rate}")
        return tuple(rates) + (0,) * (NUM_REWARD_CHANNELS - len(rates))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RewardPeriodInfo":
        """Build from the controller's camelCase payload"""
        return cls(
            rates_per_second=tuple(int(rate) for rate in data["ratesPerSecond"]),
            end_timestamp=int(data["streamEndTimestamp"]),
        )


class LedgerState(BaseModel):
    """Consistent snapshot of a reward ledger"""
    pool_id: str = Field(..., description="Pool identifier")
    active_liquidity: int = Field(..., description="Liquidity currently in range", ge=0)
    last_accrual_timestamp: int = Field(..., description="Last time global growth advanced", ge=0)
    rewards_growth_global: Tuple[int, ...] = Field(
        ..., description="Per-channel cumulative growth (Q128)"
    )
    initialized_ticks: int = Field(..., description="Number of initialized ticks", ge=0)

    class Config:
        frozen = True
