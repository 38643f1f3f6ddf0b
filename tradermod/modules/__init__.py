"""모드 시스템"""

from tradermod.modules.base import HostMod, ModContext
from tradermod.modules.module_manager import ModLoader

__all__ = ["HostMod", "ModContext", "ModLoader"]
