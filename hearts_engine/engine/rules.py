from dataclasses import dataclass

from .card import suit_of
from .constants import (
    Suit, DEFAULT_TARGET_SCORE, Q_SPADES_IDX, OPENING_CARD_IDX,
    CARDS_IN_DECK_COUNT, CARDS_IN_SUIT_COUNT, PENALTY_SUIT_POINTS, HIGH_PENALTY_POINTS,
)


@dataclass(frozen=True)
class HeartsRules:
    """
    Args:
        target_score: Score every player starts the game with. Points taken
            are subtracted from it and the game ends once any player
            reaches zero
        penalty_suit: Suit in which every card is worth a point
        high_penalty_card: Index of the single card worth 13 points
        opening_card: Index of the card that has to open the first trick
            of each round
    """
    target_score: int = DEFAULT_TARGET_SCORE
    penalty_suit: Suit = Suit.HEART
    high_penalty_card: int = Q_SPADES_IDX
    opening_card: int = OPENING_CARD_IDX

    def __post_init__(self):
        if self.target_score <= 0:
            raise ValueError('Target score must be positive')
        for card in (self.high_penalty_card, self.opening_card):
            if not 0 <= card < CARDS_IN_DECK_COUNT:
                raise ValueError(f'Invalid card index: {card}')
        if suit_of(self.high_penalty_card) == self.penalty_suit:
            raise ValueError('The high penalty card cannot belong to the penalty suit')
        if self.is_penalty_card(self.opening_card):
            raise ValueError('The opening card cannot be worth any points')

    @property
    def max_points(self) -> int:
        """Number of points to be collected in a single round"""
        return CARDS_IN_SUIT_COUNT * PENALTY_SUIT_POINTS + HIGH_PENALTY_POINTS

    def is_penalty_suit(self, card: int) -> bool:
        return suit_of(card) == self.penalty_suit

    def is_penalty_card(self, card: int) -> bool:
        return self.is_penalty_suit(card) or card == self.high_penalty_card

    def points_for_card(self, card: int) -> int:
        if self.is_penalty_suit(card):
            return PENALTY_SUIT_POINTS
        if card == self.high_penalty_card:
            return HIGH_PENALTY_POINTS
        return 0
