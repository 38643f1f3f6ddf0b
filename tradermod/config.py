"""Mod configuration loaded from environment variables and .env file."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

ROUBLES_TPL = "5449016a4bdc2d6f028b456f"
DEFAULT_TRADER_BASE_PATH = Path(__file__).parent / "data" / "trader_base.json"


class Settings(BaseSettings):
    """Mod settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    LOG_LEVEL: str = "INFO"

    # 트레이더 정의
    TRADER_BASE_PATH: str = str(DEFAULT_TRADER_BASE_PATH)
    TRADER_REFRESH_MIN: int = 3600
    TRADER_REFRESH_MAX: int = 4000

    # True면 같은 trader id 재등록 시 덮어쓰지 않고 예외
    REJECT_DUPLICATE_TRADERS: bool = False

    # 판매 무기 가격
    WEAPON_PRICE_TPL: str = ROUBLES_TPL
    WEAPON_PRICE_COUNT: int = 20000
    WEAPON_LOYALTY_LEVEL: int = 1


settings = Settings()
