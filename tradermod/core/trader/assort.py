"""판매 목록(assort) 구성 — 빈 테이블, 무기 아이템 트리, 오퍼 등록"""

from __future__ import annotations

import warnings
from typing import Iterable, Optional, Sequence

from tradermod.core.errors import ReferentialIntegrityWarning
from tradermod.core.logging import get_logger
from tradermod.core.trader.ids import IdAllocator
from tradermod.core.trader.models import BarterCost, Item, QuestAssort, TraderAssort

logger = get_logger(__name__)

# Glock 17 구성품 템플릿 (템플릿 카탈로그는 호스트 소유, 여기서 검증하지 않음)
GLOCK_BASE_TPL = "5a7ae0c351dfba0017554310"
GLOCK_BARREL_TPL = "5a6b60158dc32e000a31138b"
GLOCK_RECEIVER_TPL = "5a9685b1a2750c0032157104"
GLOCK_COMPENSATOR_TPL = "5a7b32a2e899ef00135e345a"
GLOCK_PISTOL_GRIP_TPL = "5a7b4960e899ef197b331a2d"
GLOCK_REAR_SIGHT_TPL = "5a6f5d528dc32e00094b97d9"
GLOCK_FRONT_SIGHT_TPL = "5a6f58f68dc32e000a311390"
GLOCK_MAGAZINE_TPL = "630769c4962d0247b029dc60"

# (부품, 템플릿, 부모 부품, 슬롯) — 부모가 항상 먼저
GLOCK_PARTS: tuple[tuple[str, str, Optional[str], Optional[str]], ...] = (
    ("base", GLOCK_BASE_TPL, None, None),
    ("barrel", GLOCK_BARREL_TPL, "base", "mod_barrel"),
    ("receiver", GLOCK_RECEIVER_TPL, "base", "mod_reciever"),  # 호스트 슬롯 철자 그대로
    # 소염기/가늠쇠/가늠자의 부모는 무기 본체가 아니라 리시버
    ("compensator", GLOCK_COMPENSATOR_TPL, "receiver", "mod_muzzle"),
    ("pistol_grip", GLOCK_PISTOL_GRIP_TPL, "base", "mod_pistol_grip"),
    ("rear_sight", GLOCK_REAR_SIGHT_TPL, "receiver", "mod_sight_rear"),
    ("front_sight", GLOCK_FRONT_SIGHT_TPL, "receiver", "mod_sight_front"),
    ("magazine", GLOCK_MAGAZINE_TPL, "base", "mod_magazine"),
)


def create_assort_table() -> TraderAssort:
    """빈 판매 목록."""
    return TraderAssort(next_resupply=0, items=[], barter_scheme={}, loyal_level_items={})


def create_quest_assort_table() -> QuestAssort:
    """빈 퀘스트 해금 목록. 퀘스트로 해금되는 상품 없음."""
    return QuestAssort(started={}, success={}, fail={})


def build_weapon_item_tree(id_allocator: IdAllocator) -> list[Item]:
    """Glock 17 + 구성품 7개 = 8개 아이템.

    부모가 항상 자식보다 앞에 온다. 순차 삽입해도 전방 참조 없음.
    id는 모두 id_allocator에서 받는다. 유일성은 할당기 책임.
    """
    ids: dict[str, str] = {}
    items: list[Item] = []
    for part, tpl, parent, slot_id in GLOCK_PARTS:
        item_id = id_allocator.new_id()
        ids[part] = item_id
        items.append(
            Item(
                id=item_id,
                tpl=tpl,
                parent_id=ids[parent] if parent else None,
                slot_id=slot_id,
            )
        )

    logger.debug("Built weapon tree: root=%s, %d items", items[0].id, len(items))
    return items


def check_item_tree(items: Sequence[Item], existing_ids: Iterable[str] = ()) -> list[str]:
    """참조 무결성 점검. 문제마다 ReferentialIntegrityWarning 발행, 예외는 없음.

    점검 항목:
    - 트리 내 중복 id / existing_ids와의 충돌
    - 루트(부모 없음)가 정확히 1개인지
    - parentId가 앞선 아이템을 가리키는지 (전방 참조/해석 불가)
    - parentId 있는데 slotId 없음

    반환: 발견된 문제 메시지 목록
    """
    existing = set(existing_ids)
    seen: set[str] = set()
    problems: list[str] = []

    roots = [item.id for item in items if item.parent_id is None]
    if len(roots) != 1:
        problems.append(f"Expected exactly one root item, found {len(roots)}")

    all_ids = {item.id for item in items}
    for item in items:
        if item.id in seen:
            problems.append(f"Duplicate item id in tree: {item.id}")
        elif item.id in existing:
            problems.append(f"Item id already used in database: {item.id}")

        if item.parent_id is not None:
            if item.parent_id not in seen:
                if item.parent_id in all_ids:
                    problems.append(
                        f"Forward parent reference: {item.id} -> {item.parent_id}"
                    )
                else:
                    problems.append(
                        f"Dangling parent reference: {item.id} -> {item.parent_id}"
                    )
            if not item.slot_id:
                problems.append(f"Item has parent but no slot: {item.id}")
        seen.add(item.id)

    for problem in problems:
        warnings.warn(problem, ReferentialIntegrityWarning, stacklevel=2)
    return problems


def add_offer(
    assort: TraderAssort,
    items: Sequence[Item],
    costs: Sequence[BarterCost],
    loyalty_level: int,
    stock: Optional[int] = None,
) -> Item:
    """아이템 트리를 판매 오퍼로 등록. 반환: 루트 아이템.

    stock=None이면 무제한 재고(UnlimitedCount).
    barter_scheme / loyal_level_items는 루트 id로 키잉 — assort 불변식 유지.
    """
    if not items:
        raise ValueError("Offer requires at least one item")
    root = items[0]
    if root.parent_id is not None:
        raise ValueError(f"Offer root must not have a parent: {root.id}")
    if loyalty_level < 1:
        raise ValueError(f"Loyalty level must be >= 1, got {loyalty_level}")
    if not costs:
        raise ValueError("Offer requires at least one barter cost")
    if stock is not None and stock < 0:
        raise ValueError(f"Stock must be >= 0, got {stock}")

    if stock is None:
        root.upd = {"UnlimitedCount": True, "StackObjectsCount": 9999999}
    else:
        root.upd = {"UnlimitedCount": False, "StackObjectsCount": stock}

    assort.items.extend(items)
    assort.barter_scheme[root.id] = [list(costs)]
    assort.loyal_level_items[root.id] = loyalty_level
    logger.debug(
        "Offer added: root=%s items=%d loyalty=%d", root.id, len(items), loyalty_level
    )
    return root
