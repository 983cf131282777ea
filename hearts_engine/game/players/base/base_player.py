from abc import ABC, abstractmethod

from hearts_engine.engine.card import Card
from hearts_engine.engine.constants import PassDirection


class BasePlayer(ABC):
    """Abstract base class for all Hearts players"""

    @abstractmethod
    def play_card(self,
                  hand: list[Card],
                  trick: list[Card],
                  valid_plays: list[Card],
                  are_hearts_broken: bool) -> Card:
        """
        Chooses a card to play into the current trick.

        Args:
            hand: Cards the player currently holds, sorted
            trick: Cards already played into the current trick, in play order.
                Empty if the player is leading
            valid_plays: Cards from the hand the engine accepts for this trick.
                The returned card must be one of them, otherwise the move is
                rejected
            are_hearts_broken: Whether a heart has been played in this round
        """
        raise NotImplementedError()

    @abstractmethod
    def select_cards_to_pass(self, hand: list[Card], direction: PassDirection) -> list[Card]:
        """Chooses three distinct cards from the hand to give away in the given direction"""
        raise NotImplementedError()

    def post_trick_callback(self, trick: list[Card], is_trick_taken: bool) -> None:
        """A method which is called after every trick to inform a player about its outcome"""
        pass

    def post_round_callback(self, score: int) -> None:
        """A method which is called after every round to inform a player about their score"""
        pass
