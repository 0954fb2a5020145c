"""
Blackjack cards, with the supporting enumerations nested inside the card.

Nested types are referred to by their qualified name from outside the card,
e.g. ``BlackjackCard.Suit.HEARTS`` or ``BlackjackCard.Rank.Values``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, nonmember
from typing import List, NamedTuple, Optional


@dataclass(frozen=True, slots=True)
class BlackjackCard:

    class Suit(str, Enum):
        SPADES = "♠"
        HEARTS = "♡"
        DIAMONDS = "♢"
        CLUBS = "♣"

    class Rank(int, Enum):
        TWO = 2
        THREE = 3
        FOUR = 4
        FIVE = 5
        SIX = 6
        SEVEN = 7
        EIGHT = 8
        NINE = 9
        TEN = 10
        JACK = 11
        QUEEN = 12
        KING = 13
        ACE = 14

        @nonmember
        class Values(NamedTuple):
            """An ace counts as one or eleven, every other card has one value."""

            first: int
            second: Optional[int] = None

        @property
        def values(self) -> BlackjackCard.Rank.Values:
            Values = type(self).Values
            if self is BlackjackCard.Rank.ACE:
                return Values(1, 11)
            if self in (
                BlackjackCard.Rank.JACK,
                BlackjackCard.Rank.QUEEN,
                BlackjackCard.Rank.KING,
            ):
                return Values(10)
            return Values(int(self))

    rank: Rank
    suit: Suit

    @property
    def description(self) -> str:
        output = f"suit is {self.suit.value},"
        output += f" value is {self.rank.values.first}"
        if self.rank.values.second is not None:
            output += f" or {self.rank.values.second}"
        return output

    @classmethod
    def deck(cls) -> List[BlackjackCard]:
        """All 52 cards, suit by suit, ranks ascending."""
        return [cls(rank, suit) for suit in cls.Suit for rank in cls.Rank]

    def __str__(self) -> str:
        return self.description
