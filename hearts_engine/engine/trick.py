from .card import suit_of
from .constants import Suit
from .errors import (
    IllegalMoveError, CardNotHeld, MustPlayOpener, MustFollowSuit,
    NoHeartsOnFirstTrick, HeartsNotBrokenYet,
)
from .hand import has_suit, only_suit
from .rules import HeartsRules


def find_violation(seat: int,
                   hand: list[int],
                   card: int,
                   led_suit: Suit | None,
                   are_hearts_broken: bool,
                   is_first_trick: bool,
                   rules: HeartsRules) -> IllegalMoveError | None:
    """
    Checks whether a card can be played into the current trick.

    Returns:
        The error describing the first broken rule, or ``None`` if the card
        can be played
    """
    if card not in hand:
        return CardNotHeld(seat, [card])

    if rules.opening_card in hand and card != rules.opening_card:
        return MustPlayOpener(seat, [card])

    card_suit = suit_of(card)
    if led_suit is not None and card_suit != led_suit:
        if has_suit(hand, led_suit):
            return MustFollowSuit(seat, [card], f'must follow {led_suit.name.lower()}')
        if (is_first_trick
                and card_suit == rules.penalty_suit
                and not only_suit(hand, rules.penalty_suit)):
            return NoHeartsOnFirstTrick(seat, [card])
    elif led_suit is None and not are_hearts_broken and card_suit == rules.penalty_suit:
        if not only_suit(hand, rules.penalty_suit):
            return HeartsNotBrokenYet(seat, [card])

    return None


def get_valid_plays(hand: list[int],
                    led_suit: Suit | None,
                    are_hearts_broken: bool,
                    is_first_trick: bool,
                    rules: HeartsRules = HeartsRules()) -> list[int]:
    """
    Returns:
        Cards from the hand that can be played into the current trick
    """
    return [
        card for card in hand
        if find_violation(0, hand, card, led_suit, are_hearts_broken, is_first_trick, rules) is None
    ]


def trick_winner(played: list[int], led_suit: Suit) -> int:
    """
    Args:
        played: Cards played into the trick, indexed by player

    Returns:
        Index of a player who takes the trick. Only cards in the leading
        suit can take it
    """
    winner_idx = None
    for player_idx, card in enumerate(played):
        if suit_of(card) != led_suit:
            continue
        if winner_idx is None or card > played[winner_idx]:
            winner_idx = player_idx
    if winner_idx is None:
        raise ValueError('No card in the leading suit was played')
    return winner_idx


def trick_points(cards: list[int], rules: HeartsRules = HeartsRules()) -> int:
    return sum(rules.points_for_card(card) for card in cards)
