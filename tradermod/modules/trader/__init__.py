from tradermod.modules.trader.module import AddTraderMod, load_trader_base

__all__ = ["AddTraderMod", "load_trader_base"]
