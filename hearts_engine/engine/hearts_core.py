import logging

import numpy as np

from .card import Card, suit_of
from .constants import PLAYER_COUNT, PassDirection, Phase, Suit
from .deck import deal
from .errors import (
    HeartsError, SetupNotReady, PhaseNotReady, GameFinished, GameStateError,
    OutOfTurn, InvalidCardCount, InvalidMove, IllegalMoveError,
)
from .hand import merge_sorted, remove_cards
from .moves import Move, Pass
from .passing import pass_direction, pass_target, validate_pass
from .player import Player
from .rules import HeartsRules
from .scoring import apply_round_scores, winners
from .trick import find_violation, get_valid_plays, trick_winner, trick_points
from .view import Perspective, perspective

logger = logging.getLogger(__name__)


class HeartsCore:
    """
    Engine for the standard 4-player game of Hearts.

    The engine holds the whole state of a single game. It is changed only
    through :meth:`setup`, :meth:`play` and :meth:`next_phase`; every move
    that breaks the rules raises a subclass of
    :class:`~hearts_engine.engine.errors.HeartsError` and leaves the state
    unchanged. The engine is not thread-safe.

    Args:
        rules: Configurable rules of the engine (see :class:`HeartsRules`
            for defaults)
        random_state: Random seed for reproducibility
    """

    def __init__(self,
                 rules: HeartsRules = HeartsRules(),
                 random_state: int | None = None):
        self.rules = rules
        self._rng = np.random.default_rng(random_state)

        self._players = [Player(game_score=rules.target_score) for _ in range(PLAYER_COUNT)]
        self._phase = Phase.PASS
        self._phase_ended = False
        self._round_no = 1
        self._trick_no = 1
        self._led_suit: Suit | None = None
        self._are_hearts_broken = False
        self._last_played: int | None = None
        self._last_taken: int | None = None
        self._trick_leader: int | None = None
        self._last_trick: list[int] = []
        self._last_trick_winner: int | None = None
        self._last_round_scores: list[int] = [0] * PLAYER_COUNT
        self._is_finished = False

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def round_no(self) -> int:
        return self._round_no

    @property
    def trick_no(self) -> int:
        return self._trick_no

    @property
    def pass_direction(self) -> PassDirection:
        return pass_direction(self._round_no)

    @property
    def led_suit(self) -> Suit | None:
        """Leading suit in the current trick, or None if the trick is empty"""
        return self._led_suit

    @property
    def are_hearts_broken(self) -> bool:
        return self._are_hearts_broken

    @property
    def last_taken(self) -> int | None:
        """Index of the player who took the last trick"""
        return self._last_taken

    @property
    def is_finished(self) -> bool:
        return self._is_finished

    @property
    def hands(self) -> list[list[int]]:
        return [p.hand.copy() for p in self._players]

    @property
    def taken_cards(self) -> list[list[int]]:
        return [p.taken.copy() for p in self._players]

    @property
    def has_passed(self) -> list[bool]:
        return [p.has_passed for p in self._players]

    @property
    def round_scores(self) -> list[int]:
        """Points collected by each player so far in the current round"""
        return [p.round_score for p in self._players]

    @property
    def scores(self) -> list[int]:
        """Each player's distance from losing the game"""
        return [p.game_score for p in self._players]

    @property
    def last_round_scores(self) -> list[int]:
        """Points subtracted from each game score at the end of the last round"""
        return self._last_round_scores.copy()

    @property
    def winners(self) -> list[int]:
        """
        Players with the highest score once the game is finished (there can
        be a tie). Empty while the game is still going
        """
        if not self._is_finished:
            return []
        return winners(self.scores)

    @property
    def current_trick(self) -> list[int]:
        """Cards in the current trick, in the order they were played"""
        if self._trick_leader is None:
            return []
        trick = []
        for i in range(PLAYER_COUNT):
            card = self._players[(self._trick_leader - i) % PLAYER_COUNT].played
            if card is None:
                break
            trick.append(card)
        return trick

    @property
    def last_trick(self) -> list[int]:
        """Cards of the last completed trick, in the order they were played"""
        return self._last_trick.copy()

    @property
    def last_trick_winner(self) -> int | None:
        """Index of the player who took the last completed trick, kept after the round ends"""
        return self._last_trick_winner

    @property
    def players_turn(self) -> list[int]:
        """
        Indexes of players who are allowed to move. During the pass phase these
        are all players who have not passed their cards yet. During the play
        phase it is the player after the one who played last, or the player
        who took the last trick, or the holder of the opening card
        """
        if self._is_finished:
            return []
        if self._phase == Phase.PASS:
            return [i for i, p in enumerate(self._players) if not p.has_passed]

        if self._last_played is not None:
            return [(self._last_played - 1) % PLAYER_COUNT]
        if self._last_taken is not None:
            return [self._last_taken]
        for player_idx, player in enumerate(self._players):
            if self.rules.opening_card in player.hand:
                return [player_idx]
        return []

    def valid_plays(self, player_idx: int) -> list[int]:
        """Cards the player could play into the current trick"""
        return get_valid_plays(
            hand=self._players[player_idx].hand,
            led_suit=self._led_suit,
            are_hearts_broken=self._are_hearts_broken,
            is_first_trick=self._trick_no == 1,
            rules=self.rules,
        )

    def perspective(self, player_idx: int) -> Perspective:
        """The game as seen by the given player"""
        return perspective(self, player_idx)

    def setup(self):
        """
        Deals the cards for a new round. On a round without passing, the game
        goes straight into the play phase.

        Raises:
            GameFinished: if the game has ended
            SetupNotReady: if any player still holds cards
        """
        if self._is_finished:
            raise GameFinished()
        if any(len(p.hand) > 0 for p in self._players):
            raise SetupNotReady()

        for player, hand in zip(self._players, deal(self._rng)):
            player.hand = hand
            player.taken = []
            player.played = None
            player.receiving = []
            player.has_passed = False

        self._phase = Phase.PASS
        self._phase_ended = False
        self._trick_no = 1
        self._led_suit = None
        self._are_hearts_broken = False
        self._last_played = None
        self._last_taken = None
        self._trick_leader = None
        logger.debug('Round %d dealt, passing %s', self._round_no, self.pass_direction.name.lower())

        if self.pass_direction == PassDirection.HOLD:
            self._phase_ended = True
            self._advance()

    def play(self, player_idx: int, move: Move):
        """
        Makes a move for a player. In the pass phase, the move must pass three
        cards; in the play phase, it must play one card into the trick.

        Raises:
            GameFinished: if the game has ended
            IllegalMoveError: the matching subclass if the move is illegal
        """
        if self._is_finished:
            raise GameFinished()
        try:
            if player_idx not in self.players_turn:
                raise OutOfTurn(player_idx, move.cards)
            if self._phase == Phase.PASS:
                self._pass_cards(player_idx, move)
            else:
                self._play_card(player_idx, move)
        except IllegalMoveError as e:
            logger.debug('Rejected move: %s', e)
            raise

    def next_phase(self):
        """
        Toggles between the pass phase and the play phase.

        Raises:
            PhaseNotReady: if the current phase has not ended
        """
        if not self._phase_ended:
            raise PhaseNotReady()

        if self._phase == Phase.PASS:
            for player in self._players:
                player.hand = merge_sorted(player.hand, player.receiving)
                player.receiving = []
                player.has_passed = False
            self._phase = Phase.PLAY
            self._phase_ended = False
            logger.debug('Round %d: play phase', self._round_no)
        else:
            self._complete_round()

    def _advance(self):
        try:
            self.next_phase()
        except HeartsError as e:
            raise GameStateError('unable to advance the game state') from e

    def _pass_cards(self, player_idx: int, move: Move):
        player = self._players[player_idx]
        direction = self.pass_direction
        validate_pass(player_idx, player.hand, move.cards, direction)

        player.hand = remove_cards(player.hand, move.cards)
        player.has_passed = True
        target_idx = pass_target(player_idx, direction)
        self._players[target_idx].receiving.extend(move.cards)
        logger.debug('Player %d passed cards to player %d', player_idx, target_idx)

        if len(self.players_turn) == 0:
            self._phase_ended = True
            self._advance()

    def _play_card(self, player_idx: int, move: Move):
        if isinstance(move, Pass) and self.pass_direction == PassDirection.HOLD:
            raise InvalidMove(player_idx, move.cards, 'cannot pass cards on the hold round')
        if isinstance(move, Pass) or len(move.cards) != 1:
            raise InvalidCardCount(player_idx, move.cards, 'player must play exactly one card')

        player = self._players[player_idx]
        card = move.cards[0]
        violation = find_violation(
            seat=player_idx,
            hand=player.hand,
            card=card,
            led_suit=self._led_suit,
            are_hearts_broken=self._are_hearts_broken,
            is_first_trick=self._trick_no == 1,
            rules=self.rules,
        )
        if violation is not None:
            raise violation

        player.hand = remove_cards(player.hand, [card])
        player.played = card
        self._last_played = player_idx
        if self._led_suit is None:
            self._led_suit = suit_of(card)
            self._trick_leader = player_idx
        if self.rules.is_penalty_suit(card):
            self._are_hearts_broken = True
        logger.debug('Player %d played %s', player_idx, Card(card))

        if all(p.played is not None for p in self._players):
            self._complete_trick()

    def _complete_trick(self):
        played = [p.played for p in self._players]
        winner_idx = trick_winner(played, self._led_suit)
        pts = trick_points(played, self.rules)

        winner = self._players[winner_idx]
        winner.round_score += pts
        winner.taken.extend(card for card in played if self.rules.points_for_card(card) > 0)

        self._last_trick = self.current_trick
        self._last_trick_winner = winner_idx
        for player in self._players:
            player.played = None
        self._led_suit = None
        self._trick_leader = None
        self._last_played = None
        self._last_taken = winner_idx
        logger.debug('Trick %d taken by player %d (%d pts)', self._trick_no, winner_idx, pts)
        self._trick_no += 1

        if all(len(p.hand) == 0 for p in self._players):
            self._phase_ended = True
            self._advance()

    def _complete_round(self):
        self._last_round_scores = apply_round_scores(self._players, self.rules.max_points)
        logger.info('Round %d finished, scores: %s', self._round_no, self.scores)

        self._round_no += 1
        self._phase = Phase.PASS
        self._phase_ended = False
        self._last_taken = None

        if any(score <= 0 for score in self.scores):
            self._is_finished = True
            logger.info('Game finished, winners: %s', self.winners)
            return

        self.setup()
