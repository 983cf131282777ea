import unittest

from hearts_engine.engine import Card, Pass, PlayCard, Phase, PassDirection, Suit
from test.utils import c, cl, get_core_with_hands
from test.engine.test_hearts_core import get_setup_core, get_final_trick_core, play_final_trick


class TestPerspective(unittest.TestCase):
    def test_start_of_round(self):
        core = get_setup_core()
        view = core.perspective(2)

        self.assertEqual([Card(i) for i in core.hands[2]], view.hand)
        self.assertEqual(Phase.PASS, view.phase)
        self.assertEqual(PassDirection.LEFT, view.pass_direction)
        self.assertEqual(1, view.round_no)
        self.assertIsNone(view.turn, 'Nobody in particular is on turn while passing')
        self.assertEqual([], view.this_trick)
        self.assertEqual([], view.last_trick)
        self.assertEqual([], view.winners)
        self.assertFalse(view.finished)

    def test_passed_cards_hidden(self):
        core = get_setup_core()
        passed = core.hands[1][:3]
        core.play(1, Pass(passed))
        view = core.perspective(0)

        self.assertEqual([1], view.has_passed)
        # player 1 passes to player 0, who should not see the cards before the phase ends
        self.assertFalse(any(Card(card) in view.hand for card in passed))
        self.assertEqual(13, len(view.hand))

    def test_trick_in_progress(self):
        core = get_core_with_hands(
            [['9♦', 'Q♠'], ['7♦', '8♥'], ['5♣', '6♦'], ['3♣', '4♦']],
            trick_no=5,
            last_taken=3,
        )
        core.play(3, PlayCard(c('3♣')))
        view = core.perspective(2)

        self.assertEqual(cl(['6♦', '5♣']), view.hand)
        self.assertEqual(cl(['3♣']), view.this_trick)
        self.assertEqual(Suit.CLUB, view.led_suit)
        self.assertEqual(2, view.turn)
        self.assertEqual(3, view.took)

    def test_finished_game(self):
        core = get_final_trick_core()
        for player in core._players:
            player.game_score = 1
        core._players[2].game_score = 100
        play_final_trick(core)
        view = core.perspective(0)

        self.assertTrue(view.finished)
        self.assertEqual([2], view.winners)
        self.assertEqual([], view.hand)

    def test_to_dict(self):
        core = get_core_with_hands(
            [['9♦', 'Q♠'], ['7♦', '8♥'], ['5♣', '6♦'], ['3♣', '4♦']],
            trick_no=5,
            last_taken=3,
        )
        core.play(3, PlayCard(c('3♣')))
        result = core.perspective(0).to_dict()

        self.assertEqual(
            [{'suit': 'diamond', 'value': 'Nine'}, {'suit': 'spade', 'value': 'Queen'}],
            result['hand'],
        )
        self.assertEqual([{'suit': 'club', 'value': 'Three'}], result['thisTrick'])
        self.assertEqual('play', result['phase'])
        self.assertEqual('club', result['suit'])
        self.assertEqual(2, result['turn'])
        self.assertNotIn('receiving', result)
