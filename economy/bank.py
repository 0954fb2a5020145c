import threading
from typing import Optional

from economy.exceptions import InsufficientSupply, OverCapacity
from economy.metrics import BankMetrics
from economy.utils import get_logger

log = get_logger("bank")

DEFAULT_TOTAL_COINS = 10_000


class CoinBank:
    """
    Bounded coin supply.

    Hands out coins with `distribute` and takes them back with `receive`.
    By default a request larger than the remaining supply is clamped and
    receipts are never checked against the cap. A strict bank raises
    instead of clamping or overfilling.
    """

    __slots__ = ("_total", "_available", "_strict", "_lock", "metrics")

    def __init__(
        self,
        total_coins: int = DEFAULT_TOTAL_COINS,
        *,
        strict: bool = False,
        metrics: Optional[BankMetrics] = None,
    ):
        if total_coins < 0:
            raise ValueError(f"Bank supply must be non-negative, got {total_coins}")
        self._total: int = total_coins
        self._available: int = total_coins
        self._strict: bool = strict
        self._lock = threading.Lock()
        self.metrics: BankMetrics = metrics or BankMetrics()
        self.metrics.set_gauge("coins_in_bank", total_coins)

    @property
    def total(self) -> int:
        return self._total

    @property
    def available(self) -> int:
        return self._available

    @property
    def strict(self) -> bool:
        return self._strict

    def can_distribute(self, coins: int) -> bool:
        _check_amount(coins)
        return coins <= self._available

    def distribute(self, coins: int) -> int:
        """
        Vend up to `coins` coins and return how many were actually vended.
        """
        _check_amount(coins)
        with self._lock:
            vend = min(coins, self._available)
            if self._strict and vend < coins:
                raise InsufficientSupply(coins, self._available)
            self._available -= vend
            remaining = self._available

        self.metrics.inc("distributions")
        self.metrics.inc("coins_requested", coins)
        self.metrics.inc("coins_distributed", vend)
        self.metrics.set_gauge("coins_in_bank", remaining)
        if vend < coins:
            self.metrics.inc("coins_shortfall", coins - vend)
            log.info(f"Requested {coins} coins, bank could only vend {vend}")
        log.debug(f"Distributed {vend} coins, {remaining} left")
        return vend

    def receive(self, coins: int) -> None:
        _check_amount(coins)
        with self._lock:
            if self._strict and self._available + coins > self._total:
                raise OverCapacity(coins, self._available, self._total)
            self._available += coins
            remaining = self._available

        self.metrics.inc("receipts")
        self.metrics.inc("coins_received", coins)
        self.metrics.set_gauge("coins_in_bank", remaining)
        log.debug(f"Received {coins} coins, {remaining} in bank")

    def __repr__(self) -> str:
        return f"CoinBank(available={self._available}, total={self._total})"


def _check_amount(coins: int) -> None:
    if coins < 0:
        raise ValueError(f"Coin amounts must be non-negative, got {coins}")
