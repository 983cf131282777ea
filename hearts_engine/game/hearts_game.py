import warnings

from hearts_engine.engine import HeartsCore, HeartsRules, Move, Pass, PlayCard, Phase
from hearts_engine.engine.constants import PLAYER_COUNT, CARDS_PER_PLAYER_COUNT
from hearts_engine.engine.errors import IllegalMoveError
from .players.base import BasePlayer
from .utils import to_cards


class HeartsGame:
    """
    Runs a whole game of Hearts between four players.

    Args:
        players: List of exactly 4 player 'brains'
        rules: Configurable rules of the engine (see :class:`HeartsRules`
            for defaults)
        random_state: Random seed for reproducibility. Does not control the
            randomness of players.
    """

    def __init__(self,
                 players: list[BasePlayer],
                 rules: HeartsRules = HeartsRules(),
                 random_state: int | None = None):

        if len(players) != PLAYER_COUNT:
            raise ValueError(f'There should be exactly {PLAYER_COUNT} players')

        self.players = players
        self.core = HeartsCore(rules=rules, random_state=random_state)
        self.core.setup()

    @property
    def scoreboard(self) -> list[int]:
        return self.core.scores

    def pass_cards(self):
        if self.core.phase != Phase.PASS:
            return

        hands = self.core.hands
        for player_idx, player in enumerate(self.players):
            selected_cards = player.select_cards_to_pass(
                to_cards(hands[player_idx]),
                self.core.pass_direction,
            )
            self._make_move(player_idx, Pass(selected_cards))

    def play_trick(self):
        for _ in range(PLAYER_COUNT):
            current_player_idx = self.core.players_turn[0]
            card = self.players[current_player_idx].play_card(
                hand=to_cards(self.core.hands[current_player_idx]),
                trick=to_cards(self.core.current_trick),
                valid_plays=to_cards(self.core.valid_plays(current_player_idx)),
                are_hearts_broken=self.core.are_hearts_broken,
            )
            self._make_move(current_player_idx, PlayCard(card))

        trick = to_cards(self.core.last_trick)
        winner_idx = self.core.last_trick_winner
        for i, player in enumerate(self.players):
            player.post_trick_callback(trick, i == winner_idx)

    def play_round(self) -> list[int]:
        """
        Plays a full round, including card passing.

        Returns:
            Points subtracted from each player's score in this round
        """
        self.pass_cards()
        for _ in range(CARDS_PER_PLAYER_COUNT):
            self.play_trick()

        round_scores = self.core.last_round_scores
        for player, score in zip(self.players, round_scores):
            player.post_round_callback(score)
        return round_scores

    def play_game(self) -> list[int]:
        """
        Plays rounds until the game is finished.

        Returns:
            Indexes of the winners
        """
        while not self.core.is_finished:
            self.play_round()
        return self.core.winners

    def _make_move(self, player_idx: int, move: Move):
        try:
            self.core.play(player_idx, move)
        except IllegalMoveError as e:
            warnings.warn(f'Illegal move made by player {player_idx}: {e}')
            raise
