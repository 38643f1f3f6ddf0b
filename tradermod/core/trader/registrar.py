"""TraderRegistrar — 새 트레이더에 필요한 레코드 조립 + 호스트 테이블 기록

호스트 테이블은 항상 인자로 받아 제자리에서 변경한다 (전역 상태 없음).
모든 연산은 1회성이며 병합하지 않고 덮어쓴다.
등록은 연산 단위로만 원자적이다. 연산 사이 실패 시 롤백 없음.
"""

from __future__ import annotations

from typing import Mapping, MutableMapping, Optional

from tradermod.core.errors import DuplicateTraderError, InvalidRangeError
from tradermod.core.logging import get_logger
from tradermod.core.trader.assort import (
    build_weapon_item_tree,
    create_assort_table,
    create_quest_assort_table,
)
from tradermod.core.trader.ids import IdAllocator
from tradermod.core.trader.locales import build_locale_entries, write_locale_entries
from tradermod.core.trader.models import (
    DatabaseTables,
    Item,
    RefreshSchedule,
    TraderConfig,
    TraderLike,
    TraderRecord,
    as_trader_base,
)
from tradermod.core.trader.serializer import JsonSerializer

logger = get_logger(__name__)


class TraderRegistrar:
    """트레이더 레코드 조립기. 저장소는 소유하지 않는다."""

    def __init__(
        self,
        serializer: Optional[JsonSerializer] = None,
        reject_duplicates: bool = False,
    ) -> None:
        self._serializer = serializer or JsonSerializer()
        self._reject_duplicates = reject_duplicates

    def schedule_refresh(
        self,
        trader_config: TraderConfig,
        trader: TraderLike,
        min_seconds: int,
        max_seconds: int,
    ) -> RefreshSchedule:
        """재고 갱신 주기 레코드를 trader_config.update_time에 추가 (upsert 아님).

        0 <= min_seconds <= max_seconds 가 아니면 InvalidRangeError.
        """
        for label, value in (("min", min_seconds), ("max", max_seconds)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidRangeError(
                    f"Refresh {label} seconds must be an int, got {type(value).__name__}"
                )
            if value < 0:
                raise InvalidRangeError(f"Refresh {label} seconds must be >= 0, got {value}")
        if min_seconds > max_seconds:
            raise InvalidRangeError(
                f"Refresh min seconds ({min_seconds}) exceeds max ({max_seconds})"
            )

        base = as_trader_base(trader)
        schedule = RefreshSchedule(
            trader_id=base.id, min_seconds=min_seconds, max_seconds=max_seconds
        )
        trader_config.update_time.append(schedule)
        logger.info(
            "Refresh scheduled: trader=%s min=%ds max=%ds",
            base.id,
            min_seconds,
            max_seconds,
        )
        return schedule

    def register_trader(self, trader: TraderLike, tables: DatabaseTables) -> TraderRecord:
        """빈 assort/questassort + 메타데이터 깊은 복사본으로 TraderRecord 생성 후
        tables.traders[id]에 기록.

        같은 id가 있으면 경고 후 통째로 덮어쓴다 (필드 병합 없음).
        reject_duplicates=True면 DuplicateTraderError.
        복사 실패 시 SerializationError이며 테이블은 변경되지 않는다.
        """
        base = as_trader_base(trader)
        if base.id in tables.traders:
            if self._reject_duplicates:
                raise DuplicateTraderError(base.id)
            logger.warning("Overwriting existing trader: %s", base.id)

        record = TraderRecord(
            base=self._serializer.clone(base.to_dict()),
            assort=create_assort_table(),
            questassort=create_quest_assort_table(),
        )
        tables.traders[base.id] = record
        logger.info("Trader registered: %s (%s)", base.id, base.nickname)
        return record

    def build_weapon_item_tree(self, id_allocator: IdAllocator) -> list[Item]:
        """판매용 무기 아이템 트리 (8개, 부모 우선 순서)"""
        return build_weapon_item_tree(id_allocator)

    def register_locales(
        self,
        trader: TraderLike,
        locales: Mapping[str, MutableMapping[str, str]],
        full_name: str,
        first_name: str,
        nickname: str,
        location: str,
        description: str,
    ) -> dict[str, str]:
        """모든 언어 테이블에 파생 키 5개를 같은 값으로 기록. 반환: 기록한 키/값.

        입력과 대상 테이블을 모두 검증한 뒤 한 번에 기록한다.
        """
        base = as_trader_base(trader)
        entries = build_locale_entries(
            base.id, full_name, first_name, nickname, location, description
        )
        count = write_locale_entries(locales, entries)
        logger.info("Locales written: trader=%s languages=%d", base.id, count)
        return entries

    @staticmethod
    def existing_item_ids(tables: DatabaseTables) -> set[str]:
        """모든 트레이더 assort에 이미 존재하는 item id"""
        ids: set[str] = set()
        for record in tables.traders.values():
            ids |= record.assort.item_ids()
        return ids
