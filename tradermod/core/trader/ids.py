"""아이템 ID 할당기

호스트 DB의 id는 24자리 16진수(MongoDB ObjectId 형식).
할당기는 전역 유일성을 보장할 책임이 있다. 트리 빌더는 검사하지 않는다.
"""

from __future__ import annotations

import itertools
import os
import time
from typing import Iterable, Protocol


class IdAllocator(Protocol):
    def new_id(self) -> str: ...


class MongoIdAllocator:
    """ObjectId 형식: 4바이트 타임스탬프 + 5바이트 프로세스 랜덤 + 3바이트 카운터"""

    def __init__(self) -> None:
        self._process_part = os.urandom(5).hex()
        self._counter = itertools.count(int.from_bytes(os.urandom(3), "big"))

    def new_id(self) -> str:
        timestamp = int(time.time()) & 0xFFFFFFFF
        counter = next(self._counter) & 0xFFFFFF
        return f"{timestamp:08x}{self._process_part}{counter:06x}"


class SequenceIdAllocator:
    """미리 정한 id를 순서대로 반환. 소진 시 IndexError."""

    def __init__(self, ids: Iterable[str]) -> None:
        self._ids = list(ids)
        self._next = 0

    def new_id(self) -> str:
        if self._next >= len(self._ids):
            raise IndexError(f"Id sequence exhausted after {len(self._ids)} ids")
        item_id = self._ids[self._next]
        self._next += 1
        return item_id

    @property
    def remaining(self) -> int:
        return len(self._ids) - self._next


# 예제 무기(Glock 17) 고정 id — build_weapon_item_tree 호출 순서와 동일
GLOCK_ITEM_IDS: tuple[str, ...] = (
    "66d9ae1f3c52a0b1f0a10001",  # base
    "66d9ae1f3c52a0b1f0a10002",  # barrel
    "66d9ae1f3c52a0b1f0a10003",  # receiver
    "66d9ae1f3c52a0b1f0a10004",  # compensator
    "66d9ae1f3c52a0b1f0a10005",  # pistol grip
    "66d9ae1f3c52a0b1f0a10006",  # rear sight
    "66d9ae1f3c52a0b1f0a10007",  # front sight
    "66d9ae1f3c52a0b1f0a10008",  # magazine
)
