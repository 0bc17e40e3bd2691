import unittest

from game import (
    GameState,
    Phase,
    clear_mismatch,
    flip,
    initial_state,
    is_selectable,
    resolve_pair,
    select_card,
)

# Pairs sit two apart inside each row: (0,2) (1,3) (4,6) (5,7) ...
DECK = (0, 1, 0, 1, 2, 3, 2, 3, 4, 5, 4, 5, 6, 7, 6, 7)


class TestTransitions(unittest.TestCase):
    def setUp(self):
        self.s0 = initial_state(DECK)

    def test_given_fresh_state_when_inspecting_then_idle_and_nothing_showing(self):
        self.assertEqual(self.s0.phase, Phase.IDLE)
        self.assertEqual(self.s0.move_count, 0)
        self.assertFalse(any(c.face_up for c in self.s0.cards()))
        self.assertFalse(self.s0.is_won())

    def test_given_indices_when_checking_selectable_then_range_and_face_rules(self):
        self.assertTrue(is_selectable(self.s0, 0))
        self.assertTrue(is_selectable(self.s0, 15))
        self.assertFalse(is_selectable(self.s0, -1))
        self.assertFalse(is_selectable(self.s0, 16))
        s1 = flip(self.s0, 4)
        self.assertFalse(is_selectable(s1, 4))
        s2 = GameState(DECK, tuple(), (0, 2), 1)
        self.assertFalse(is_selectable(s2, 0))
        self.assertFalse(is_selectable(s2, 2))

    def test_given_first_click_when_selecting_then_one_selected_without_move(self):
        s1 = select_card(self.s0, 0)
        self.assertEqual(s1.phase, Phase.ONE_SELECTED)
        self.assertEqual(s1.face_up, (0,))
        self.assertEqual(s1.move_count, 0)

    def test_given_matching_second_click_when_selecting_then_pair_matched_and_move_counted(self):
        s2 = select_card(select_card(self.s0, 0), 2)
        self.assertEqual(s2.phase, Phase.IDLE)
        self.assertEqual(s2.matched, (0, 2))
        self.assertEqual(s2.move_count, 1)
        self.assertTrue(s2.cards()[0].face_up)
        self.assertTrue(s2.cards()[2].face_up)

    def test_given_differing_second_click_when_selecting_then_mismatch_pending(self):
        s2 = select_card(select_card(self.s0, 0), 1)
        self.assertEqual(s2.phase, Phase.MISMATCHED)
        self.assertEqual(s2.face_up, (0, 1))
        self.assertEqual(s2.matched, ())
        self.assertEqual(s2.move_count, 1)

    def test_given_pending_mismatch_when_third_click_then_pair_cleared_and_new_pair_started(self):
        s2 = select_card(select_card(self.s0, 0), 1)
        s3 = select_card(s2, 4)
        self.assertEqual(s3.phase, Phase.ONE_SELECTED)
        self.assertEqual(s3.face_up, (4,))
        self.assertEqual(s3.move_count, 1)
        cards = s3.cards()
        self.assertFalse(cards[0].face_up)
        self.assertFalse(cards[1].face_up)
        self.assertTrue(cards[4].face_up)

    def test_given_pending_mismatch_when_clicking_showing_card_then_ignored(self):
        s2 = select_card(select_card(self.s0, 0), 1)
        self.assertIs(select_card(s2, 0), s2)
        self.assertIs(select_card(s2, 1), s2)

    def test_given_ignored_clicks_when_selecting_then_same_object_returned(self):
        s1 = select_card(self.s0, 0)
        self.assertIs(select_card(s1, 0), s1)
        self.assertIs(select_card(s1, 99), s1)
        matched = select_card(s1, 2)
        self.assertIs(select_card(matched, 2), matched)

    def test_given_non_mismatch_states_when_clearing_then_unchanged(self):
        self.assertIs(clear_mismatch(self.s0), self.s0)
        s1 = flip(self.s0, 3)
        self.assertIs(clear_mismatch(s1), s1)
        self.assertIs(resolve_pair(s1), s1)

    def test_given_all_pairs_when_selected_then_won(self):
        s = self.s0
        for a, b in [(0, 2), (1, 3), (4, 6), (5, 7), (8, 10), (9, 11), (12, 14), (13, 15)]:
            s = select_card(select_card(s, a), b)
        self.assertTrue(s.is_won())
        self.assertEqual(s.move_count, 8)
        self.assertTrue(all(c.face_up for c in s.cards()))
        for i in range(16):
            self.assertIs(select_card(s, i), s)


if __name__ == '__main__':
    unittest.main(verbosity=2)
