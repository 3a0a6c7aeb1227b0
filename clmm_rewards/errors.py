"""
Reward Ledger 오류 정의

모든 오류는 호출 전체를 실패시킵니다 (재시도 없음).
"""


class RewardLedgerError(Exception):
    """Reward ledger 오류 기본 클래스"""
    pass


class ArithmeticOverflow(RewardLedgerError):
    """고정소수점 연산 결과가 uint256 범위를 벗어나거나 분모가 0"""
    pass


class LiquidityError(RewardLedgerError):
    """틱 또는 활성 유동성 경계 위반"""
    pass


class LiquidityOverflow(LiquidityError):
    """유동성이 상한(틱 cap 또는 uint128)을 초과"""
    pass


class LiquidityUnderflow(LiquidityError):
    """유동성이 0 미만으로 내려감"""
    pass


class Unauthorized(RewardLedgerError):
    """허용되지 않은 호출자"""

    def __init__(self, caller: str, operation: str):
        super().__init__(f"{operation}: 허용되지 않은 호출자 {caller!r}")
        self.caller = caller
        self.operation = operation


class InvalidTickRange(RewardLedgerError, ValueError):
    """잘못된 틱 범위 (TLU / TLM / TUM)"""
    pass


class LedgerAlreadyExists(RewardLedgerError):
    """해당 풀의 ledger가 이미 존재"""
    pass
