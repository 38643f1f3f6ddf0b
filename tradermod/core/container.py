"""서비스 레지스트리 — 싱글톤 vs 트랜지언트 수명

규칙:
- SINGLETON: 최초 resolve 시 한 번 생성, 이후 같은 인스턴스 반환
- TRANSIENT: resolve마다 factory 호출, 새 인스턴스 반환
- 같은 이름 재등록 시 경고 후 덮어쓰기
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional

from tradermod.core.logging import get_logger

logger = get_logger(__name__)

Factory = Callable[[], Any]


class Lifecycle(str, Enum):
    SINGLETON = "singleton"
    TRANSIENT = "transient"


@dataclass
class _Registration:
    factory: Factory
    lifecycle: Lifecycle
    instance: Optional[Any] = None
    built: bool = False


class ServiceRegistry:
    """이름 기반 서비스 조회

    사용 패턴:
        services = ServiceRegistry()
        services.register_singleton("TraderRegistrar", TraderRegistrar)
        services.register_transient("Processing", Processing)
        registrar = services.resolve("TraderRegistrar")
    """

    def __init__(self) -> None:
        self._registrations: Dict[str, _Registration] = {}

    def register(
        self, name: str, factory: Factory, lifecycle: Lifecycle = Lifecycle.TRANSIENT
    ) -> None:
        """서비스 등록. 기본 수명은 TRANSIENT."""
        if name in self._registrations:
            logger.warning(f"서비스 덮어쓰기: {name}")
        self._registrations[name] = _Registration(factory=factory, lifecycle=lifecycle)
        logger.debug(f"서비스 등록: {name} ({lifecycle.value})")

    def register_singleton(self, name: str, factory: Factory) -> None:
        self.register(name, factory, Lifecycle.SINGLETON)

    def register_transient(self, name: str, factory: Factory) -> None:
        self.register(name, factory, Lifecycle.TRANSIENT)

    def register_instance(self, name: str, instance: Any) -> None:
        """이미 생성된 객체를 싱글톤으로 등록"""
        self.register_singleton(name, lambda: instance)
        registration = self._registrations[name]
        registration.instance = instance
        registration.built = True

    def resolve(self, name: str) -> Any:
        """서비스 조회. 미등록 이름이면 KeyError."""
        registration = self._registrations.get(name)
        if registration is None:
            raise KeyError(f"Service not registered: {name}")

        if registration.lifecycle is Lifecycle.TRANSIENT:
            return registration.factory()

        if not registration.built:
            registration.instance = registration.factory()
            registration.built = True
        return registration.instance

    def is_registered(self, name: str) -> bool:
        return name in self._registrations

    @property
    def names(self) -> list[str]:
        """등록된 서비스 이름 목록"""
        return list(self._registrations)
