import unittest
from unittest.mock import patch

from hearts_engine.engine import HeartsRules, PassDirection, Card
from hearts_engine.engine.errors import IllegalMoveError
from hearts_engine.game import HeartsGame
from hearts_engine.game.players import RandomPlayer


def get_game_with_random_players(target_score: int = 100) -> HeartsGame:
    players = [
        RandomPlayer(random_state=1),
        RandomPlayer(random_state=2),
        RandomPlayer(random_state=3),
        RandomPlayer(random_state=4),
    ]
    game = HeartsGame(
        players,
        rules=HeartsRules(target_score=target_score),
        random_state=5,
    )
    return game


class TestHeartsGame(unittest.TestCase):
    def test_wrong_number_of_players(self):
        with self.assertRaises(ValueError):
            HeartsGame([RandomPlayer() for _ in range(3)])

    def test_play_round(self):
        # arrange
        game = get_game_with_random_players()
        # act
        round_scores = game.play_round()
        # assert
        self.assertIn(sum(round_scores), [26, 78],
                      'Sum of all points should be equal to 26, or 78 after a moon shot')
        self.assertEqual(400 - sum(round_scores), sum(game.scoreboard),
                         'Scoreboard should be updated after the round')
        self.assertEqual([13] * 4, [len(hand) for hand in game.core.hands],
                         'Cards for the next round should be dealt')
        self.assertEqual(2, game.core.round_no)

    def test_passing_cards_changes(self):
        game = get_game_with_random_players(target_score=1000)

        self.assertEqual(PassDirection.LEFT, game.core.pass_direction)

        game.play_round()
        self.assertEqual(PassDirection.RIGHT, game.core.pass_direction)

        game.play_round()
        self.assertEqual(PassDirection.ACROSS, game.core.pass_direction)

        game.play_round()
        self.assertEqual(PassDirection.HOLD, game.core.pass_direction)

        game.play_round()
        self.assertEqual(PassDirection.LEFT, game.core.pass_direction)

    def test_play_game(self):
        game = get_game_with_random_players()
        winners = game.play_game()

        self.assertTrue(game.core.is_finished)
        self.assertTrue(any(score <= 0 for score in game.scoreboard))
        self.assertEqual(game.core.winners, winners)
        self.assertTrue(all(game.scoreboard[i] == max(game.scoreboard) for i in winners))

    def test_post_trick_callbacks_called(self):
        with patch.object(RandomPlayer, 'post_trick_callback') as mocked_callback:
            # arrange
            game = get_game_with_random_players()
            # act
            game.play_round()
            # assert
            self.assertEqual(4 * 13, len(mocked_callback.mock_calls))
            taken_flags = [call.args[1] for call in mocked_callback.call_args_list]
            self.assertEqual(13, sum(taken_flags), 'Exactly one player should take each trick')
            last_trick = mocked_callback.call_args_list[-1].args[0]
            self.assertEqual(4, len(last_trick), 'The last trick of the round should be reported')

    def test_post_round_callbacks_called(self):
        with patch.object(RandomPlayer, 'post_round_callback') as mocked_callback:
            # arrange
            game = get_game_with_random_players()
            # act
            game.play_round()
            # assert
            self.assertEqual(4, len(mocked_callback.mock_calls))

    def test_illegal_move_warns(self):
        game = get_game_with_random_players()
        # a card nobody can hold twice: the opener passed by every player
        with patch.object(RandomPlayer, 'select_cards_to_pass', return_value=[Card(13)] * 3):
            with self.assertWarns(UserWarning):
                with self.assertRaises(IllegalMoveError):
                    game.pass_cards()

    def test_card_outside_valid_plays_rejected(self):
        game = get_game_with_random_players()
        game.pass_cards()

        def play_invalid_card(hand, trick, valid_plays, are_hearts_broken):
            self.assertTrue(all(card in hand for card in valid_plays))
            return next(card for card in hand if card not in valid_plays)

        # only the holder of the opening card may lead, so every other card is invalid
        with patch.object(RandomPlayer, 'play_card', side_effect=play_invalid_card):
            with self.assertWarns(UserWarning):
                with self.assertRaises(IllegalMoveError):
                    game.play_trick()
        self.assertEqual([], game.core.current_trick)
