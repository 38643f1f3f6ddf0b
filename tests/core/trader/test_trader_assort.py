"""무기 아이템 트리, 무결성 점검, 오퍼 등록 테스트"""

from __future__ import annotations

import warnings

import pytest

from tradermod.core.errors import ReferentialIntegrityWarning
from tradermod.core.trader.assort import (
    GLOCK_BASE_TPL,
    GLOCK_FRONT_SIGHT_TPL,
    GLOCK_REAR_SIGHT_TPL,
    add_offer,
    build_weapon_item_tree,
    check_item_tree,
    create_assort_table,
    create_quest_assort_table,
)
from tradermod.core.trader.ids import GLOCK_ITEM_IDS, MongoIdAllocator, SequenceIdAllocator
from tradermod.core.trader.models import BarterCost, Item


# ── build_weapon_item_tree ───────────────────────────────────


class TestBuildWeaponItemTree:
    def test_eight_items(self, glock_ids: SequenceIdAllocator) -> None:
        assert len(build_weapon_item_tree(glock_ids)) == 8

    def test_root_first(self, glock_ids: SequenceIdAllocator) -> None:
        items = build_weapon_item_tree(glock_ids)
        assert items[0].parent_id is None
        assert items[0].slot_id is None
        assert items[0].tpl == GLOCK_BASE_TPL
        assert all(item.parent_id is not None for item in items[1:])

    def test_parents_precede_children(self) -> None:
        items = build_weapon_item_tree(MongoIdAllocator())
        seen: set[str] = set()
        for item in items:
            if item.parent_id is not None:
                assert item.parent_id in seen
                assert item.slot_id
            seen.add(item.id)

    def test_ids_from_allocator(self, glock_ids: SequenceIdAllocator) -> None:
        items = build_weapon_item_tree(glock_ids)
        assert [item.id for item in items] == list(GLOCK_ITEM_IDS)
        assert glock_ids.remaining == 0

    def test_receiver_mods_parented_to_receiver(self, glock_ids: SequenceIdAllocator) -> None:
        items = build_weapon_item_tree(glock_ids)
        by_slot = {item.slot_id: item for item in items}
        receiver_id = by_slot["mod_reciever"].id
        base_id = items[0].id
        assert by_slot["mod_muzzle"].parent_id == receiver_id
        assert by_slot["mod_sight_front"].parent_id == receiver_id
        assert by_slot["mod_sight_rear"].parent_id == receiver_id
        assert by_slot["mod_barrel"].parent_id == base_id
        assert by_slot["mod_pistol_grip"].parent_id == base_id
        assert by_slot["mod_magazine"].parent_id == base_id

    def test_template_slot_pairs(self, glock_ids: SequenceIdAllocator) -> None:
        items = build_weapon_item_tree(glock_ids)
        assert [(item.tpl, item.slot_id) for item in items] == [
            ("5a7ae0c351dfba0017554310", None),
            ("5a6b60158dc32e000a31138b", "mod_barrel"),
            ("5a9685b1a2750c0032157104", "mod_reciever"),
            ("5a7b32a2e899ef00135e345a", "mod_muzzle"),
            ("5a7b4960e899ef197b331a2d", "mod_pistol_grip"),
            ("5a6f5d528dc32e00094b97d9", "mod_sight_rear"),
            ("5a6f58f68dc32e000a311390", "mod_sight_front"),
            ("630769c4962d0247b029dc60", "mod_magazine"),
        ]

    def test_sight_constants_match_slots(self, glock_ids: SequenceIdAllocator) -> None:
        by_slot = {item.slot_id: item.tpl for item in build_weapon_item_tree(glock_ids)}
        assert by_slot["mod_sight_rear"] == GLOCK_REAR_SIGHT_TPL
        assert by_slot["mod_sight_front"] == GLOCK_FRONT_SIGHT_TPL

    def test_no_uniqueness_check(self) -> None:
        # 할당기가 중복 id를 돌려줘도 그대로 사용
        items = build_weapon_item_tree(SequenceIdAllocator(["dup"] * 8))
        assert {item.id for item in items} == {"dup"}


# ── check_item_tree ──────────────────────────────────────────


class TestCheckItemTree:
    def test_valid_tree_no_warnings(self, glock_ids: SequenceIdAllocator) -> None:
        items = build_weapon_item_tree(glock_ids)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert check_item_tree(items) == []

    def test_duplicate_id_warns(self) -> None:
        items = [Item(id="a", tpl="t"), Item(id="a", tpl="t", parent_id="a", slot_id="s")]
        with pytest.warns(ReferentialIntegrityWarning):
            problems = check_item_tree(items)
        assert any("Duplicate" in p for p in problems)

    def test_existing_id_warns(self, glock_ids: SequenceIdAllocator) -> None:
        items = build_weapon_item_tree(glock_ids)
        with pytest.warns(ReferentialIntegrityWarning):
            problems = check_item_tree(items, existing_ids={GLOCK_ITEM_IDS[3]})
        assert problems == [f"Item id already used in database: {GLOCK_ITEM_IDS[3]}"]

    def test_dangling_parent_warns(self) -> None:
        items = [Item(id="a", tpl="t"), Item(id="b", tpl="t", parent_id="zzz", slot_id="s")]
        with pytest.warns(ReferentialIntegrityWarning, match="Dangling"):
            check_item_tree(items)

    def test_forward_reference_warns(self) -> None:
        items = [
            Item(id="a", tpl="t"),
            Item(id="b", tpl="t", parent_id="c", slot_id="s"),
            Item(id="c", tpl="t", parent_id="a", slot_id="s"),
        ]
        with pytest.warns(ReferentialIntegrityWarning, match="Forward"):
            check_item_tree(items)

    def test_missing_slot_warns(self) -> None:
        items = [Item(id="a", tpl="t"), Item(id="b", tpl="t", parent_id="a")]
        with pytest.warns(ReferentialIntegrityWarning, match="no slot"):
            check_item_tree(items)

    def test_two_roots_warns(self) -> None:
        items = [Item(id="a", tpl="t"), Item(id="b", tpl="t")]
        with pytest.warns(ReferentialIntegrityWarning, match="exactly one root"):
            check_item_tree(items)


# ── create_* / add_offer ─────────────────────────────────────


class TestEmptyTables:
    def test_assort_empty(self) -> None:
        assort = create_assort_table()
        assert assort.next_resupply == 0
        assert assort.items == [] and assort.barter_scheme == {}
        assert assort.loyal_level_items == {}

    def test_quest_assort_empty(self) -> None:
        assert create_quest_assort_table().is_empty()


class TestAddOffer:
    @pytest.fixture()
    def rub(self) -> list[BarterCost]:
        return [BarterCost(tpl="5449016a4bdc2d6f028b456f", count=20000)]

    def test_keys_reference_items(self, glock_ids: SequenceIdAllocator, rub) -> None:
        assort = create_assort_table()
        root = add_offer(assort, build_weapon_item_tree(glock_ids), rub, loyalty_level=1)
        item_ids = assort.item_ids()
        assert set(assort.barter_scheme) <= item_ids
        assert set(assort.loyal_level_items) <= item_ids
        assert assort.barter_scheme[root.id] == [rub]
        assert assort.loyal_level_items[root.id] == 1
        assert len(assort.items) == 8

    def test_unlimited_stock(self, glock_ids: SequenceIdAllocator, rub) -> None:
        root = add_offer(create_assort_table(), build_weapon_item_tree(glock_ids), rub, 1)
        assert root.upd == {"UnlimitedCount": True, "StackObjectsCount": 9999999}

    def test_limited_stock(self, glock_ids: SequenceIdAllocator, rub) -> None:
        root = add_offer(
            create_assort_table(), build_weapon_item_tree(glock_ids), rub, 2, stock=5
        )
        assert root.upd == {"UnlimitedCount": False, "StackObjectsCount": 5}

    def test_children_have_no_upd(self, glock_ids: SequenceIdAllocator, rub) -> None:
        items = build_weapon_item_tree(glock_ids)
        add_offer(create_assort_table(), items, rub, 1)
        assert all(item.upd is None for item in items[1:])

    def test_empty_tree_rejected(self, rub) -> None:
        with pytest.raises(ValueError):
            add_offer(create_assort_table(), [], rub, 1)

    def test_root_with_parent_rejected(self, rub) -> None:
        with pytest.raises(ValueError):
            add_offer(
                create_assort_table(),
                [Item(id="b", tpl="t", parent_id="a", slot_id="s")],
                rub,
                1,
            )

    def test_bad_loyalty_rejected(self, rub) -> None:
        with pytest.raises(ValueError):
            add_offer(create_assort_table(), [Item(id="a", tpl="t")], rub, 0)

    def test_no_costs_rejected(self) -> None:
        with pytest.raises(ValueError):
            add_offer(create_assort_table(), [Item(id="a", tpl="t")], [], 1)

    def test_rejected_offer_leaves_assort_untouched(self) -> None:
        assort = create_assort_table()
        with pytest.raises(ValueError):
            add_offer(assort, [Item(id="a", tpl="t")], [], 1)
        assert assort.items == []
