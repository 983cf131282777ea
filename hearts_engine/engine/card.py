from functools import total_ordering

from .constants import Suit, CARDS_IN_SUIT_COUNT

RANK_NAMES = (
    'Ace',  # the display index wraps, so the Ace is 0 even though it ranks highest
    'Two', 'Three', 'Four', 'Five', 'Six', 'Seven',
    'Eight', 'Nine', 'Ten', 'Jack', 'Queen', 'King',
)


def suit_of(card: int) -> Suit:
    return Suit.from_order(card // CARDS_IN_SUIT_COUNT)


def rank_name(card: int) -> str:
    """Display name of the card's rank. Not meant for comparisons."""
    return RANK_NAMES[(card % CARDS_IN_SUIT_COUNT + 1) % CARDS_IN_SUIT_COUNT]


def compare(a: int, b: int) -> int:
    """
    Compare two cards by their ordinals.

    Returns:
        A negative number if ``a`` is lower than ``b``, zero if they are the
        same card, and a positive number if ``a`` is higher. The result is
        only meaningful for two cards of the same suit
    """
    return a - b


@total_ordering
class Card:
    """
    Args:
        idx: Value from the range 0-51 representing the index of the card.
            The cards are ordered by suit: diamonds, clubs, hearts, spades;
            and within each suit by rank: from 2 to Ace
    """

    def __init__(self, idx: int):
        self.idx = idx

    ranks_str = ('2', '3', '4', '5', '6', '7', '8', '9', '10', 'J', 'Q', 'K', 'A')

    @classmethod
    def of(cls, rank: str, suit: Suit):
        suit_order = Suit.order(suit)
        rank_order = Card.ranks_str.index(rank)
        return cls(suit_order * CARDS_IN_SUIT_COUNT + rank_order)

    @property
    def rank(self) -> str:
        return Card.ranks_str[self.idx % CARDS_IN_SUIT_COUNT]

    @property
    def value(self) -> str:
        return rank_name(self.idx)

    @property
    def suit(self) -> Suit:
        return suit_of(self.idx)

    def compare(self, other: 'Card') -> int:
        return compare(self.idx, other.idx)

    def __str__(self) -> str:
        return f'{self.rank}{self.suit.value}'

    def __repr__(self) -> str:
        return str(self)

    def __hash__(self):
        return hash(self.idx)

    def __index__(self):
        return self.idx

    def __eq__(self, other):
        if type(other) != Card:
            return False
        return self.idx == other.idx

    def __lt__(self, other: 'Card') -> bool:
        return self.idx < other.idx
