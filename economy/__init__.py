from .bank import CoinBank
from .player import Player
from .runtime import init_bank, get_bank, shutdown_bank

__all__ = [
    "CoinBank",
    "Player",
    "init_bank",
    "get_bank",
    "shutdown_bank",
]
