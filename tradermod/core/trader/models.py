"""트레이더 도메인 모델 (호스트 테이블 형태와 1:1)"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tradermod.core.errors import TraderValidationError


class TraderBase(BaseModel):
    """트레이더 메타데이터 (db/base.json). 경계에서 검증.

    알려지지 않은 호스트 필드(loyaltyLevels, avatar 등)는 그대로 보존.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(..., alias="_id", min_length=1, description="트레이더 ID")
    nickname: str = Field(..., min_length=1)
    name: str = ""
    surname: str = ""
    location: str = ""
    description: str = ""
    currency: str = "RUB"

    def to_dict(self) -> dict[str, Any]:
        """호스트 형태(_id 키)로 덤프. 입력에 없던 기본값은 넣지 않는다."""
        data = self.model_dump(by_alias=True, exclude_unset=True)
        data.update(self.model_extra or {})
        return data


TraderLike = Union[TraderBase, Mapping[str, Any]]


def as_trader_base(trader: TraderLike) -> TraderBase:
    """TraderBase 또는 원시 mapping → TraderBase. 잘못된 구조면 TraderValidationError."""
    if isinstance(trader, TraderBase):
        return trader
    if not isinstance(trader, Mapping):
        raise TraderValidationError(
            f"Trader metadata must be a mapping, got {type(trader).__name__}"
        )
    try:
        return TraderBase.model_validate(dict(trader))
    except ValidationError as e:
        raise TraderValidationError(f"Invalid trader metadata: {e}") from e


@dataclass
class Item:
    """아이템 트리의 노드. parent_id 없으면 루트(무기 본체)."""

    id: str
    tpl: str  # 템플릿 카탈로그 참조 (검증하지 않음)
    parent_id: Optional[str] = None
    slot_id: Optional[str] = None  # parent_id 있으면 필수
    upd: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"_id": self.id, "_tpl": self.tpl}
        if self.parent_id is not None:
            data["parentId"] = self.parent_id
        if self.slot_id is not None:
            data["slotId"] = self.slot_id
        if self.upd is not None:
            data["upd"] = dict(self.upd)
        return data


@dataclass(frozen=True)
class BarterCost:
    """결제 수단 1개 (화폐 또는 물물교환 아이템)"""

    tpl: str
    count: int

    def to_dict(self) -> dict[str, Any]:
        return {"_tpl": self.tpl, "count": self.count}


@dataclass
class TraderAssort:
    """트레이더 판매 목록

    불변식: barter_scheme / loyal_level_items의 키는 모두 items의 id.
    """

    next_resupply: int = 0  # 초
    items: list[Item] = field(default_factory=list)
    barter_scheme: dict[str, list[list[BarterCost]]] = field(default_factory=dict)
    loyal_level_items: dict[str, int] = field(default_factory=dict)

    def item_ids(self) -> set[str]:
        return {item.id for item in self.items}

    def to_dict(self) -> dict[str, Any]:
        return {
            "nextResupply": self.next_resupply,
            "items": [item.to_dict() for item in self.items],
            "barter_scheme": {
                item_id: [[cost.to_dict() for cost in option] for option in options]
                for item_id, options in self.barter_scheme.items()
            },
            "loyal_level_items": dict(self.loyal_level_items),
        }


@dataclass
class QuestAssort:
    """퀘스트 해금 판매 목록 (item id → quest id)"""

    started: dict[str, str] = field(default_factory=dict)
    success: dict[str, str] = field(default_factory=dict)
    fail: dict[str, str] = field(default_factory=dict)

    def is_empty(self) -> bool:
        return not (self.started or self.success or self.fail)

    def to_dict(self) -> dict[str, Any]:
        return {
            "started": dict(self.started),
            "success": dict(self.success),
            "fail": dict(self.fail),
        }


@dataclass
class TraderRecord:
    """호스트 traders 테이블의 값"""

    base: dict[str, Any]  # 호출자 객체와 분리된 깊은 복사본
    assort: TraderAssort
    questassort: QuestAssort


@dataclass(frozen=True)
class RefreshSchedule:
    """트레이더 재고 갱신 주기 (초)"""

    trader_id: str
    min_seconds: int
    max_seconds: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "traderId": self.trader_id,
            "seconds": {"min": self.min_seconds, "max": self.max_seconds},
        }


@dataclass
class TraderConfig:
    """호스트 트레이더 설정. update_time은 append 전용 (중복 제거 없음)."""

    update_time: list[RefreshSchedule] = field(default_factory=list)


@dataclass
class DatabaseTables:
    """호스트 소유 인메모리 테이블"""

    traders: dict[str, TraderRecord] = field(default_factory=dict)
    locales: dict[str, dict[str, str]] = field(default_factory=dict)  # 언어 → 키/문자열
