"""트레이더 등록 예외/경고 유형"""


class TraderModError(Exception):
    """tradermod 예외 기반 클래스"""


class InvalidRangeError(TraderModError, ValueError):
    """갱신 주기 min/max 범위 오류 (음수, 정수 아님, min > max)"""


class SerializationError(TraderModError):
    """메타데이터 직렬화/역직렬화 복사 실패"""


class TraderValidationError(TraderModError, ValueError):
    """트레이더 메타데이터 구조 검증 실패"""


class DuplicateTraderError(TraderModError):
    """REJECT_DUPLICATE_TRADERS 정책에서 이미 등록된 trader id"""

    def __init__(self, trader_id: str) -> None:
        super().__init__(f"Trader already registered: {trader_id}")
        self.trader_id = trader_id


class ReferentialIntegrityWarning(UserWarning):
    """중복 item id, 해석 불가 parentId 등. 치명적이지 않음."""
