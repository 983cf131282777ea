"""
Exceptions raised by the Hearts engine.

Every :class:`HeartsError` rejects the attempted action and leaves the state
of the game untouched. :class:`GameStateError` is the only exception that
signals a corrupted game, which should be discarded.
"""
from typing import Iterable


class HeartsError(Exception):
    """Base exception for all rejected actions."""

    pass


class SetupNotReady(HeartsError):
    """Raised when a new round is set up before all cards have been played."""

    def __init__(self):
        super().__init__('not all cards have been played')


class PhaseNotReady(HeartsError):
    """Raised when the phase is advanced before it has ended."""

    def __init__(self):
        super().__init__('cannot end phase')


class GameFinished(HeartsError):
    """Raised on any action attempted after the game has ended."""

    def __init__(self):
        super().__init__('the game is finished')


class IllegalMoveError(HeartsError):
    """Raised when a player attempts a move that is against the rules."""

    reason = 'illegal move'

    def __init__(self, seat: int, cards: Iterable[int], reason: str | None = None):
        self.seat = seat
        self.cards = tuple(cards)
        if reason is not None:
            self.reason = reason
        super().__init__(f'player {seat} cannot play {list(self.cards)}: {self.reason}')


class OutOfTurn(IllegalMoveError):
    reason = 'it is not this player\'s turn'


class InvalidCardCount(IllegalMoveError):
    reason = 'wrong number of cards for this phase'


class DuplicateCard(IllegalMoveError):
    reason = 'cards to pass must be different'


class CardNotHeld(IllegalMoveError):
    reason = 'player must have the cards to play them'


class MustPlayOpener(IllegalMoveError):
    reason = 'player holds the opening card and must play it'


class MustFollowSuit(IllegalMoveError):
    reason = 'player must follow the leading suit'


class HeartsNotBrokenYet(IllegalMoveError):
    reason = 'cannot lead with a penalty card until hearts are broken'


class NoHeartsOnFirstTrick(IllegalMoveError):
    reason = 'cannot play a penalty card on the first trick'


class InvalidMove(IllegalMoveError):
    reason = 'move is not allowed at this point of the game'


class GameStateError(RuntimeError):
    """
    Raised when the engine fails to advance the game even though the current
    phase has ended. The state is corrupted and the game cannot continue.
    """

    pass
