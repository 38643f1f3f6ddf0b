"""Mod entrypoint — 호스트 초기화 시 호출."""

from typing import Optional

from tradermod.config import Settings, settings as default_settings
from tradermod.core.container import ServiceRegistry
from tradermod.core.logging import get_logger, setup_logging
from tradermod.core.trader.models import DatabaseTables, TraderConfig
from tradermod.core.trader.registrar import TraderRegistrar
from tradermod.core.trader.serializer import JsonSerializer
from tradermod.modules.base import ModContext
from tradermod.modules.module_manager import ModLoader
from tradermod.modules.trader.module import REGISTRAR_SERVICE, AddTraderMod

logger = get_logger(__name__)


def build_services(settings: Settings) -> ServiceRegistry:
    """공유 서비스 등록. 직렬화기/등록기는 싱글톤."""
    services = ServiceRegistry()
    services.register_singleton("JsonSerializer", JsonSerializer)
    services.register_singleton(
        REGISTRAR_SERVICE,
        lambda: TraderRegistrar(
            serializer=services.resolve("JsonSerializer"),
            reject_duplicates=settings.REJECT_DUPLICATE_TRADERS,
        ),
    )
    return services


def bootstrap(
    tables: DatabaseTables,
    trader_config: TraderConfig,
    settings: Optional[Settings] = None,
    loader: Optional[ModLoader] = None,
) -> ModContext:
    """로깅 설정 → 서비스 등록 → 모드 등록/로드. 반환: 로드에 사용한 컨텍스트."""
    settings = settings or default_settings
    setup_logging(settings.LOG_LEVEL)

    context = ModContext(
        tables=tables,
        trader_config=trader_config,
        services=build_services(settings),
    )

    loader = loader or ModLoader()
    if "add_trader" not in loader.mods:
        loader.register(AddTraderMod(settings))

    logger.info("Loading mods...")
    loaded = loader.load_all(context)
    logger.info(f"Mods loaded: {', '.join(loaded) or '(none)'}")
    return context
