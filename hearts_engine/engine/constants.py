from enum import Enum

PLAYER_COUNT = 4
CARDS_IN_DECK_COUNT = 52
CARDS_PER_PLAYER_COUNT = CARDS_IN_DECK_COUNT // PLAYER_COUNT
CARDS_IN_SUIT_COUNT = 13
CARDS_TO_PASS_COUNT = 3

PENALTY_SUIT_POINTS = 1
HIGH_PENALTY_POINTS = 13

OPENING_CARD_IDX = 13
Q_SPADES_IDX = 49

DEFAULT_TARGET_SCORE = 100


class Suit(Enum):
    DIAMOND = '♦'
    CLUB = '♣'
    HEART = '♥'
    SPADE = '♠'

    @staticmethod
    def order(suit: 'Suit') -> int:
        return list(Suit).index(suit)

    @staticmethod
    def from_order(suit_idx: int) -> 'Suit':
        return list(Suit)[suit_idx]


class PassDirection(Enum):
    HOLD = 0
    LEFT = 1
    RIGHT = 2
    ACROSS = 3


class Phase(Enum):
    PASS = 0
    PLAY = 1
