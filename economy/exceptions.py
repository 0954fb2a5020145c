# economy/exceptions.py

class BankError(Exception):
    """Base class for bank accounting errors"""


class InsufficientSupply(BankError):
    """Raised by a strict bank when a request exceeds the coins in the bank."""

    def __init__(self, requested: int, available: int):
        super().__init__(
            f"Requested {requested} coins but only {available} left in the bank"
        )
        self.requested = requested
        self.available = available


class OverCapacity(BankError):
    """Raised by a strict bank when a receipt would exceed its total supply."""

    def __init__(self, received: int, available: int, total: int):
        super().__init__(
            f"Receiving {received} coins would put {available + received} "
            f"in a bank capped at {total}"
        )
        self.received = received
        self.available = available
        self.total = total


class BankAlreadyInitialized(BankError):
    pass


class PlayerFinalizedError(Exception):
    """Raised when a player is used after its coins went back to the bank."""
