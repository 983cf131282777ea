from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .card import Card
from .constants import PassDirection, Phase, Suit

if TYPE_CHECKING:
    from .hearts_core import HeartsCore


@dataclass(frozen=True)
class Perspective:
    """
    What a single player is allowed to know about the game. Other players'
    hands and the cards being passed are never included.
    """
    player_idx: int
    hand: list[Card]
    # only penalty suit cards break hearts, the high penalty card does not
    are_hearts_broken: bool
    finished: bool
    phase: Phase
    round_no: int
    trick_no: int
    pass_direction: PassDirection
    has_passed: list[int] = field(default_factory=list)
    led_suit: Suit | None = None
    this_trick: list[Card] = field(default_factory=list)
    last_trick: list[Card] = field(default_factory=list)
    # player to move, only set during the play phase
    turn: int | None = None
    took: int | None = None
    winners: list[int] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Plain representation containing only builtin types"""

        def cards_to_dicts(cards: list[Card]) -> list[dict[str, str]]:
            return [{'suit': card.suit.name.lower(), 'value': card.value} for card in cards]

        return {
            'player': self.player_idx,
            'hand': cards_to_dicts(self.hand),
            'brokenHearted': self.are_hearts_broken,
            'finished': self.finished,
            'phase': self.phase.name.lower(),
            'round': self.round_no,
            'trick': self.trick_no,
            'passTo': self.pass_direction.name.lower(),
            'hasPassed': list(self.has_passed),
            'suit': self.led_suit.name.lower() if self.led_suit is not None else None,
            'thisTrick': cards_to_dicts(self.this_trick),
            'lastTrick': cards_to_dicts(self.last_trick),
            'turn': self.turn,
            'took': self.took,
            'winners': list(self.winners),
        }


def perspective(core: 'HeartsCore', player_idx: int) -> Perspective:
    """Builds the view of the game from the given player's seat"""
    players_turn = core.players_turn
    turn = None
    if core.phase == Phase.PLAY and len(players_turn) > 0:
        turn = players_turn[0]

    return Perspective(
        player_idx=player_idx,
        hand=[Card(i) for i in core.hands[player_idx]],
        are_hearts_broken=core.are_hearts_broken,
        finished=core.is_finished,
        phase=core.phase,
        round_no=core.round_no,
        trick_no=core.trick_no,
        pass_direction=core.pass_direction,
        has_passed=[i for i, passed in enumerate(core.has_passed) if passed],
        led_suit=core.led_suit,
        this_trick=[Card(i) for i in core.current_trick],
        last_trick=[Card(i) for i in core.last_trick] if core.trick_no > 1 else [],
        turn=turn,
        took=core.last_taken,
        winners=core.winners,
    )
