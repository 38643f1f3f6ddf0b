"""모드 기반 인터페이스"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List

from tradermod.core.container import ServiceRegistry
from tradermod.core.trader.models import DatabaseTables, TraderConfig


@dataclass
class ModContext:
    """모드에 전달되는 호스트 상태 컨텍스트

    tables / trader_config는 호스트 소유. 모드는 제자리에서 변경한다.
    """

    tables: DatabaseTables
    trader_config: TraderConfig
    services: ServiceRegistry = field(default_factory=ServiceRegistry)

    # 모드가 추가 데이터를 넣을 수 있는 확장 슬롯
    extra: Dict[str, Any] = field(default_factory=dict)


class HostMod(ABC):
    """모든 모드의 기반 인터페이스

    로드 단계 (모든 모드가 한 단계를 마친 뒤 다음 단계로):
    1. pre_load — DB 로드 전. 설정 변경, 서비스 등록
    2. post_db_load — DB 테이블 로드 후. 테이블 변경
    3. post_load — 서버 로드 완료 후
    """

    _loaded: bool

    def __init__(self) -> None:
        self._loaded = False

    @property
    @abstractmethod
    def name(self) -> str:
        """모드 고유 이름 (예: 'add_trader')"""
        ...

    @property
    def dependencies(self) -> List[str]:
        """이 모드보다 먼저 로드되어야 하는 모드 이름 목록

        기본값은 빈 리스트 (의존성 없음).
        """
        return []

    @property
    def loaded(self) -> bool:
        return self._loaded

    @loaded.setter
    def loaded(self, value: bool) -> None:
        self._loaded = value

    @abstractmethod
    def pre_load(self, context: ModContext) -> None:
        ...

    @abstractmethod
    def post_db_load(self, context: ModContext) -> None:
        ...

    @abstractmethod
    def post_load(self, context: ModContext) -> None:
        ...
