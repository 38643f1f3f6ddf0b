"""트레이더 로케일 문자열 — 모든 언어 테이블에 동일 값 기록"""

from __future__ import annotations

from typing import Mapping, MutableMapping

from tradermod.core.logging import get_logger

logger = get_logger(__name__)

LOCALE_FIELDS: tuple[str, ...] = (
    "FullName",
    "FirstName",
    "Nickname",
    "Location",
    "Description",
)


def locale_keys(trader_id: str) -> list[str]:
    """"<id> FullName" 등 파생 키 5개"""
    return [f"{trader_id} {suffix}" for suffix in LOCALE_FIELDS]


def build_locale_entries(
    trader_id: str,
    full_name: str,
    first_name: str,
    nickname: str,
    location: str,
    description: str,
) -> dict[str, str]:
    values = (full_name, first_name, nickname, location, description)
    for suffix, value in zip(LOCALE_FIELDS, values):
        if not isinstance(value, str):
            raise TypeError(f"Locale value for {suffix} must be str, got {type(value).__name__}")
    return dict(zip(locale_keys(trader_id), values))


def write_locale_entries(
    locales: Mapping[str, MutableMapping[str, str]], entries: Mapping[str, str]
) -> int:
    """entries를 모든 언어 테이블에 기록. 반환: 기록한 언어 수.

    쓰기 전에 모든 대상이 쓰기 가능한 mapping인지 먼저 확인한다.
    확인 후에는 실패할 수 있는 연산이 없으므로 일부 언어만 기록된 상태로 끝나지 않는다.
    """
    targets = list(locales.items())
    for language, table in targets:
        if not isinstance(table, MutableMapping):
            raise TypeError(
                f"Locale table for {language!r} is not a mutable mapping: {type(table).__name__}"
            )

    for _language, table in targets:
        table.update(entries)
    return len(targets)
