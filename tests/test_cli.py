import unittest

from game import ConcentrationModel, STATUS_TEXT, WIN_TEXT, moves_label, status_message
from concentration_core.cli import TerminalView, play
from concentration_core.view import cards_to_json


class _NoShuffle:
    def shuffle(self, x):
        pass


def _feed(lines):
    it = iter(lines)

    def read(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read


class TestStatusText(unittest.TestCase):
    def test_given_each_state_when_formatting_then_gui_messages(self):
        m = ConcentrationModel(rng=_NoShuffle())
        self.assertEqual(status_message(m), "Select the first card.")
        m.select_card(0)
        self.assertEqual(status_message(m), "Select the second card.")
        m.select_card(1)
        self.assertEqual(status_message(m), "No Match: Undo or select a card.")
        self.assertEqual(moves_label(m), "1 Moves")
        self.assertEqual(STATUS_TEXT[2], status_message(m))
        m.reset()
        for i in range(8):
            m.select_card(i)
            m.select_card(i + 8)
        self.assertEqual(status_message(m), WIN_TEXT)

    def test_given_board_when_serialising_then_face_down_pictures_hidden(self):
        m = ConcentrationModel(rng=_NoShuffle())
        m.select_card(2)
        js = cards_to_json(m.get_cards())
        self.assertEqual(js[2], {"pairId": 2, "faceUp": True, "matched": False})
        self.assertEqual(js[0], {"pairId": None, "faceUp": False, "matched": False})
        self.assertTrue(all(c["pairId"] is not None for c in cards_to_json(m.get_cheat())))


class TestTerminalPlay(unittest.TestCase):
    def setUp(self):
        self.out = []
        self.model = ConcentrationModel(rng=_NoShuffle())

    def test_given_script_when_playing_then_board_redrawn_and_moves_tracked(self):
        play(self.model, read=_feed(['0', '8', '1', '2', 'u', 'q']), write=self.out.append)
        self.assertTrue(self.model.get_cards()[0].matched)
        self.assertEqual(self.model.get_move_count(), 1)  # undo reverted the 1/2 mismatch
        text = "\n".join(self.out)
        self.assertIn("[0]", text)
        self.assertIn("No Match: Undo or select a card.", text)

    def test_given_bad_input_when_playing_then_reported_and_loop_continues(self):
        play(self.model, read=_feed(['abc', '42', '-3', '', '5']), write=self.out.append)
        text = "\n".join(self.out)
        self.assertIn("Could not parse.", text)
        self.assertIn("No such card.", text)
        self.assertTrue(self.model.get_cards()[5].face_up)

    def test_given_cheat_command_then_cheat_grid_printed_without_changing_board(self):
        play(self.model, read=_feed(['c']), write=self.out.append)
        idx = self.out.index("Cheat Window:")
        self.assertNotIn('?', self.out[idx + 1])
        self.assertTrue(all(not c.face_up for c in self.model.get_cards()))

    def test_given_undo_with_empty_history_then_message(self):
        play(self.model, read=_feed(['u']), write=self.out.append)
        self.assertIn('Nothing to undo.', self.out)

    def test_given_play_finished_then_view_unregistered(self):
        play(self.model, read=_feed(['q']), write=self.out.append)
        n = len(self.out)
        self.model.select_card(0)
        self.assertEqual(len(self.out), n)

    def test_given_terminal_view_when_reset_then_prints_face_down_board(self):
        view = TerminalView(self.out.append)
        self.model.add_observer(view)
        self.model.select_card(3)
        self.model.reset()
        self.assertIn("Select the first card.", self.out[-1])
        self.assertIn("0 Moves", self.out[-1])


if __name__ == '__main__':
    unittest.main(verbosity=2)
