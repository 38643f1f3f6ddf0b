"""tradermod Core — 순수 Python, 호스트 테이블은 인자로 전달"""

from tradermod.core.container import Lifecycle, ServiceRegistry
from tradermod.core.errors import (
    DuplicateTraderError,
    InvalidRangeError,
    ReferentialIntegrityWarning,
    SerializationError,
    TraderModError,
    TraderValidationError,
)

__all__ = [
    "Lifecycle",
    "ServiceRegistry",
    "TraderModError",
    "InvalidRangeError",
    "SerializationError",
    "TraderValidationError",
    "DuplicateTraderError",
    "ReferentialIntegrityWarning",
]
