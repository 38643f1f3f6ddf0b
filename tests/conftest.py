"""Shared test fixtures."""

import pytest

from tradermod.core.trader.ids import GLOCK_ITEM_IDS, SequenceIdAllocator
from tradermod.core.trader.models import DatabaseTables, TraderConfig


@pytest.fixture()
def trader_raw() -> dict:
    """호스트 base.json 형태의 원시 메타데이터"""
    return {
        "_id": "T1",
        "name": "Cat",
        "surname": "Shopkeeper",
        "nickname": "Cat",
        "location": "Here in the cat shop",
        "description": "This is the cat shop",
        "loyaltyLevels": [{"minLevel": 1, "minSalesSum": 0}],
        "unlockedByDefault": True,
    }


@pytest.fixture()
def tables() -> DatabaseTables:
    """3개 언어 로케일이 들어있는 빈 DB"""
    return DatabaseTables(
        traders={},
        locales={
            "en": {"existing key": "hello"},
            "ru": {},
            "ge": {},
        },
    )


@pytest.fixture()
def trader_config() -> TraderConfig:
    return TraderConfig()


@pytest.fixture()
def glock_ids() -> SequenceIdAllocator:
    return SequenceIdAllocator(GLOCK_ITEM_IDS)
