"""AddTraderMod — 새 트레이더 + 판매 무기 등록 예제 모드

pre_load: 트레이더 재고 갱신 주기 등록
post_db_load: 트레이더 레코드, 무기 오퍼, 로케일 등록
"""

import json
from pathlib import Path
from typing import List, Optional

from tradermod.config import Settings
from tradermod.core.logging import get_logger
from tradermod.core.trader.assort import add_offer, check_item_tree
from tradermod.core.trader.ids import IdAllocator, MongoIdAllocator
from tradermod.core.trader.models import BarterCost, TraderBase, as_trader_base
from tradermod.core.trader.registrar import TraderRegistrar
from tradermod.modules.base import HostMod, ModContext

logger = get_logger(__name__)

REGISTRAR_SERVICE = "TraderRegistrar"


def load_trader_base(path: str | Path) -> TraderBase:
    """base.json 로드 + 검증. 구조 오류면 TraderValidationError."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    base = as_trader_base(raw)
    logger.info("Loaded trader base %s from %s", base.id, path)
    return base


class AddTraderMod(HostMod):
    """트레이더 추가 모드

    의존성: [] (호스트 테이블만 사용)
    """

    def __init__(
        self,
        settings: Settings,
        trader_base: Optional[TraderBase] = None,
        id_allocator: Optional[IdAllocator] = None,
    ) -> None:
        super().__init__()
        self._settings = settings
        self._base = trader_base
        self._ids = id_allocator or MongoIdAllocator()

    @property
    def name(self) -> str:
        return "add_trader"

    @property
    def dependencies(self) -> List[str]:
        return []

    @property
    def trader_base(self) -> TraderBase:
        if self._base is None:
            self._base = load_trader_base(self._settings.TRADER_BASE_PATH)
        return self._base

    def _registrar(self, context: ModContext) -> TraderRegistrar:
        if not context.services.is_registered(REGISTRAR_SERVICE):
            context.services.register_singleton(
                REGISTRAR_SERVICE,
                lambda: TraderRegistrar(
                    reject_duplicates=self._settings.REJECT_DUPLICATE_TRADERS
                ),
            )
        return context.services.resolve(REGISTRAR_SERVICE)

    def pre_load(self, context: ModContext) -> None:
        self._registrar(context).schedule_refresh(
            context.trader_config,
            self.trader_base,
            self._settings.TRADER_REFRESH_MIN,
            self._settings.TRADER_REFRESH_MAX,
        )

    def post_db_load(self, context: ModContext) -> None:
        registrar = self._registrar(context)
        base = self.trader_base
        tables = context.tables

        # 신규 id 충돌 점검은 등록 전 상태 기준 (재등록 시 자기 assort 제외)
        existing_ids = registrar.existing_item_ids(tables)
        if base.id in tables.traders:
            existing_ids -= tables.traders[base.id].assort.item_ids()

        record = registrar.register_trader(base, tables)

        weapon = registrar.build_weapon_item_tree(self._ids)
        check_item_tree(weapon, existing_ids)
        price = BarterCost(
            tpl=self._settings.WEAPON_PRICE_TPL,
            count=self._settings.WEAPON_PRICE_COUNT,
        )
        root = add_offer(
            record.assort,
            weapon,
            [price],
            loyalty_level=self._settings.WEAPON_LOYALTY_LEVEL,
        )

        registrar.register_locales(
            base,
            tables.locales,
            full_name=f"{base.name} {base.surname}".strip(),
            first_name=base.name,
            nickname=base.nickname,
            location=base.location,
            description=base.description,
        )

        context.extra[self.name] = {"trader_id": base.id, "offer_root_id": root.id}

    def post_load(self, context: ModContext) -> None:
        logger.info(
            "Trader %s ready with %d assort items",
            self.trader_base.id,
            len(context.tables.traders[self.trader_base.id].assort.items),
        )
