from enum import Enum


class PlayerState(str, Enum):
    """
    Lifecycle of a player.
    ACTIVE -> FINALIZED is the only transition and it is terminal.
    """

    ACTIVE = "ACTIVE"
    FINALIZED = "FINALIZED"
