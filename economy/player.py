import weakref
from dataclasses import dataclass
from typing import Optional

from economy.bank import CoinBank
from economy.exceptions import BankError, PlayerFinalizedError
from economy.runtime import get_bank
from economy.types import PlayerState
from economy.utils import get_logger

log = get_logger("player")


class Player:
    """
    A player holding coins drawn from a bank.

    Coins are drawn on construction and by `win`. Everything left in the
    purse goes back to the bank exactly once, when the last reference to
    the player disappears or when a `with` block around it exits,
    whichever happens first. A failed return is logged when the player is
    dropped, and raised from the `with` block when the block exits.
    """

    @dataclass(slots=True)
    class Purse:
        """
        Coins currently held. Shared with the finalizer, which must not
        reference the player itself.
        """

        coins: int = 0

    __slots__ = ("name", "_bank", "_purse", "_finalizer", "__weakref__")

    def __init__(self, coins: int, *, name: str = "player", bank: Optional[CoinBank] = None):
        self.name = name
        self._bank = bank if bank is not None else get_bank()
        self._purse = Player.Purse(self._bank.distribute(coins))
        self._finalizer = weakref.finalize(
            self, _return_coins, self._bank, self._purse, name
        )
        # Coins of players still alive at interpreter exit stay where they are.
        self._finalizer.atexit = False
        log.debug(f"{name} joined with {self._purse.coins} coins")

    @property
    def coins_in_purse(self) -> int:
        return self._purse.coins

    @property
    def bank(self) -> CoinBank:
        return self._bank

    @property
    def state(self) -> PlayerState:
        return PlayerState.ACTIVE if self._finalizer.alive else PlayerState.FINALIZED

    def win(self, coins: int) -> int:
        """
        Draw `coins` more from the bank. Returns how many were granted.
        """
        if not self._finalizer.alive:
            raise PlayerFinalizedError(f"{self.name} has already left the game")
        granted = self._bank.distribute(coins)
        self._purse.coins += granted
        return granted

    def __enter__(self) -> "Player":
        if not self._finalizer.alive:
            raise PlayerFinalizedError(f"{self.name} has already left the game")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # Detaching marks the finalizer dead, so a later drop returns nothing.
        if self._finalizer.detach() is not None:
            _settle(self._bank, self._purse, self.name)

    def __repr__(self) -> str:
        return (
            f"Player(name={self.name!r}, coins_in_purse={self._purse.coins}, "
            f"state={self.state.value})"
        )


def _settle(bank: CoinBank, purse: Player.Purse, name: str) -> None:
    coins = purse.coins
    bank.receive(coins)
    purse.coins = 0
    log.info(f"{name} left the game and returned {coins} coins")


def _return_coins(bank: CoinBank, purse: Player.Purse, name: str) -> None:
    try:
        _settle(bank, purse, name)
    except BankError:
        log.exception(f"{name} could not return {purse.coins} coins to the bank")
