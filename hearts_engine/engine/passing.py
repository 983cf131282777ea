from .constants import PLAYER_COUNT, CARDS_TO_PASS_COUNT, PassDirection
from .errors import InvalidMove, InvalidCardCount, DuplicateCard, CardNotHeld
from .hand import has_cards

_PASS_OFFSETS = {
    PassDirection.LEFT: -1,
    PassDirection.RIGHT: 1,
    PassDirection.ACROSS: 2,
}


def pass_direction(round_no: int) -> PassDirection:
    """Directions cycle every 4 rounds: hold, left, right, across"""
    return PassDirection(round_no % len(PassDirection))


def pass_target(seat: int, direction: PassDirection) -> int:
    """
    Returns:
        Index of a player receiving the cards passed by ``seat``.
        Left is towards the start of the table order, right towards the end
    """
    if direction == PassDirection.HOLD:
        raise ValueError('Nobody receives any cards on a hold round')
    return (seat + _PASS_OFFSETS[direction]) % PLAYER_COUNT


def validate_pass(seat: int, hand: list[int], cards: tuple[int, ...], direction: PassDirection):
    """
    Raises:
        IllegalMoveError: the matching subclass if the cards cannot be passed
    """
    if direction == PassDirection.HOLD:
        raise InvalidMove(seat, cards, 'cannot pass cards on the hold round')
    if len(cards) != CARDS_TO_PASS_COUNT:
        raise InvalidCardCount(seat, cards, f'player must pass exactly {CARDS_TO_PASS_COUNT} cards')
    if len(set(cards)) != len(cards):
        raise DuplicateCard(seat, cards)
    if not has_cards(hand, cards):
        raise CardNotHeld(seat, cards)
