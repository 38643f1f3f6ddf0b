"""트레이더 등록 Core"""

from tradermod.core.trader.assort import (
    add_offer,
    build_weapon_item_tree,
    check_item_tree,
    create_assort_table,
    create_quest_assort_table,
)
from tradermod.core.trader.ids import (
    GLOCK_ITEM_IDS,
    IdAllocator,
    MongoIdAllocator,
    SequenceIdAllocator,
)
from tradermod.core.trader.locales import locale_keys
from tradermod.core.trader.models import (
    BarterCost,
    DatabaseTables,
    Item,
    QuestAssort,
    RefreshSchedule,
    TraderAssort,
    TraderBase,
    TraderConfig,
    TraderRecord,
    as_trader_base,
)
from tradermod.core.trader.registrar import TraderRegistrar
from tradermod.core.trader.serializer import JsonSerializer

__all__ = [
    # models
    "TraderBase",
    "Item",
    "BarterCost",
    "TraderAssort",
    "QuestAssort",
    "TraderRecord",
    "RefreshSchedule",
    "TraderConfig",
    "DatabaseTables",
    "as_trader_base",
    # ids
    "IdAllocator",
    "MongoIdAllocator",
    "SequenceIdAllocator",
    "GLOCK_ITEM_IDS",
    # assort
    "create_assort_table",
    "create_quest_assort_table",
    "build_weapon_item_tree",
    "check_item_tree",
    "add_offer",
    # locales
    "locale_keys",
    "JsonSerializer",
    "TraderRegistrar",
]
