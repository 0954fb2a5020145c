import dataclasses

import pytest

from cards.blackjack import BlackjackCard


def test_ace_of_spades_description():
    the_ace_of_spades = BlackjackCard(rank=BlackjackCard.Rank.ACE, suit=BlackjackCard.Suit.SPADES)
    assert the_ace_of_spades.description == "suit is ♠, value is 1 or 11"
    assert str(the_ace_of_spades) == the_ace_of_spades.description


def test_qualified_nested_names():
    assert BlackjackCard.Suit.HEARTS.value == "♡"
    assert BlackjackCard.Rank.Values(1, 11).second == 11
    assert BlackjackCard.Rank.Values.__qualname__ == "BlackjackCard.Rank.Values"


def test_values_is_not_a_rank():
    assert "Values" not in BlackjackCard.Rank.__members__
    assert len(BlackjackCard.Rank) == 13


@pytest.mark.parametrize(
    "rank, expected",
    [
        (BlackjackCard.Rank.TWO, (2, None)),
        (BlackjackCard.Rank.TEN, (10, None)),
        (BlackjackCard.Rank.JACK, (10, None)),
        (BlackjackCard.Rank.QUEEN, (10, None)),
        (BlackjackCard.Rank.KING, (10, None)),
        (BlackjackCard.Rank.ACE, (1, 11)),
    ],
)
def test_rank_values(rank, expected):
    assert tuple(rank.values) == expected


def test_single_value_description():
    card = BlackjackCard(rank=BlackjackCard.Rank.KING, suit=BlackjackCard.Suit.DIAMONDS)
    assert card.description == "suit is ♢, value is 10"


def test_deck_has_every_card_once():
    deck = BlackjackCard.deck()
    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert deck[0] == BlackjackCard(BlackjackCard.Rank.TWO, BlackjackCard.Suit.SPADES)
    assert deck[-1] == BlackjackCard(BlackjackCard.Rank.ACE, BlackjackCard.Suit.CLUBS)


def test_card_is_immutable():
    card = BlackjackCard(rank=BlackjackCard.Rank.TWO, suit=BlackjackCard.Suit.CLUBS)
    with pytest.raises(dataclasses.FrozenInstanceError):
        card.rank = BlackjackCard.Rank.ACE
