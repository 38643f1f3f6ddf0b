"""모드 로더 - 등록, 의존성 검증, 단계별 훅 호출"""

from typing import Dict, List, Set

from tradermod.core.logging import get_logger
from tradermod.modules.base import HostMod, ModContext

logger = get_logger(__name__)

LOAD_PHASES = ("pre_load", "post_db_load", "post_load")


class ModLoader:
    """모드 생명주기 관리

    훅에서 발생한 예외는 그대로 전파된다 (재시도/무시 없음).
    완료된 단계는 기록되므로 실패 후 load_all을 다시 호출하면 실패한 단계부터 재개한다.
    """

    def __init__(self) -> None:
        self._mods: Dict[str, HostMod] = {}
        self._phases_done: Dict[str, Set[str]] = {}  # 모드별 완료된 단계

    @property
    def mods(self) -> Dict[str, HostMod]:
        """등록된 모든 모드 (읽기 전용 접근)"""
        return dict(self._mods)

    def register(self, mod: HostMod) -> None:
        """모드 등록. 같은 이름 중복 등록 시 경고 후 덮어쓰기."""
        if mod.name in self._mods:
            logger.warning(f"모드 덮어쓰기: {mod.name}")
        self._mods[mod.name] = mod
        self._phases_done.pop(mod.name, None)
        logger.info(f"모드 등록: {mod.name}")

    def resolve_order(self) -> List[HostMod]:
        """로드 순서. 등록 순서를 따르되 의존성을 먼저 배치.

        의존성 미등록 또는 순환이면 해당 모드(와 그에 의존하는 모드)는 제외.
        """
        ordered: List[HostMod] = []
        placed: Set[str] = set()
        skipped: Set[str] = set()

        def place(mod: HostMod, stack: Set[str]) -> bool:
            if mod.name in placed:
                return True
            if mod.name in skipped:
                return False
            if mod.name in stack:
                logger.warning(f"의존성 순환: {mod.name}")
                skipped.add(mod.name)
                return False

            for dep in mod.dependencies:
                dep_mod = self._mods.get(dep)
                if dep_mod is None:
                    logger.warning(f"의존성 미등록: {mod.name} requires {dep}")
                    skipped.add(mod.name)
                    return False
                if not place(dep_mod, stack | {mod.name}):
                    logger.warning(f"의존성 로드 불가: {mod.name} requires {dep}")
                    skipped.add(mod.name)
                    return False

            placed.add(mod.name)
            ordered.append(mod)
            return True

        for mod in self._mods.values():
            place(mod, set())
        return ordered

    def load_all(self, context: ModContext) -> List[str]:
        """모든 모드를 단계별로 로드. 반환: 로드된 모드 이름 (로드 순서)."""
        ordered = [m for m in self.resolve_order() if not m.loaded]
        for phase in LOAD_PHASES:
            for mod in ordered:
                done = self._phases_done.setdefault(mod.name, set())
                if phase in done:
                    continue
                logger.debug(f"{phase}: {mod.name}")
                getattr(mod, phase)(context)
                done.add(phase)

        for mod in ordered:
            mod.loaded = True
            logger.info(f"모드 로드 완료: {mod.name}")
        return [m.name for m in ordered]

    def is_loaded(self, name: str) -> bool:
        """특정 모드가 로드되었는지 확인"""
        mod = self._mods.get(name)
        return mod.loaded if mod else False
