# economy/runtime.py

"""
Bank runtime lifecycle management.

This module owns the singleton CoinBank instance shared by every player.
"""

from typing import Optional

from config.settings import get_settings
from economy.bank import CoinBank
from economy.exceptions import BankAlreadyInitialized
from economy.metrics import BankMetrics
from economy.utils import get_logger

log = get_logger("runtime")

# Internal singleton
_BANK: Optional[CoinBank] = None


def init_bank(
    *,
    total_coins: Optional[int] = None,
    strict: Optional[bool] = None,
) -> CoinBank:
    """
    Initialize the global bank instance.

    Arguments left as None fall back to BANK_INITIAL_COINS / BANK_STRICT.
    Must be called at most once before `shutdown_bank`.
    """

    global _BANK

    if _BANK is not None:
        raise BankAlreadyInitialized("Bank already initialized")

    settings = get_settings()
    if total_coins is None:
        total_coins = settings.BANK_INITIAL_COINS
    if strict is None:
        strict = settings.BANK_STRICT

    _BANK = CoinBank(total_coins, strict=strict, metrics=BankMetrics())
    log.debug(f"Bank opened with {total_coins} coins (strict={strict})")
    return _BANK


def get_bank() -> CoinBank:
    """
    Retrieve the global bank, opening it from settings on first use.
    """
    if _BANK is None:
        return init_bank()

    return _BANK


def shutdown_bank() -> None:
    """Forget the global bank. Players created earlier keep their own reference."""
    global _BANK
    _BANK = None
