import unittest

from bowling_core.scoring import calculate_score, get_frame_scores, running_totals


class TestCalculateScore(unittest.TestCase):
    def test_given_no_rolls_when_scoring_then_zero(self):
        self.assertEqual(calculate_score([]), 0)

    def test_given_perfect_game_when_scoring_then_300(self):
        self.assertEqual(calculate_score([10] * 12), 300)

    def test_given_gutter_game_when_scoring_then_zero(self):
        self.assertEqual(calculate_score([0] * 20), 0)

    def test_given_single_spare_when_scoring_then_bonus_is_next_roll(self):
        self.assertEqual(calculate_score([5, 5, 3, 0] + [0] * 16), 16)

    def test_given_single_strike_when_scoring_then_bonus_is_next_two_rolls(self):
        self.assertEqual(calculate_score([10, 3, 4] + [0] * 16), 24)

    def test_given_tenth_frame_strikes_when_scoring_then_thirty(self):
        self.assertEqual(calculate_score([0] * 18 + [10, 10, 10]), 30)

    def test_given_tenth_frame_spare_when_scoring_then_thirteen(self):
        self.assertEqual(calculate_score([0] * 18 + [5, 5, 3]), 13)

    def test_given_all_fives_when_scoring_then_150(self):
        self.assertEqual(calculate_score([5] * 21), 150)

    def test_given_mixed_game_when_scoring_then_known_total(self):
        rolls = [10, 7, 3, 9, 0, 10, 0, 8, 8, 2, 0, 6, 10, 10, 10, 8, 1]
        self.assertEqual(calculate_score(rolls), 167)

    def test_given_unresolved_bonus_when_scoring_then_only_resolved_frames_count(self):
        self.assertEqual(calculate_score([10, 3]), 0)
        self.assertEqual(calculate_score([3, 4, 5, 5]), 7)
        self.assertEqual(calculate_score([3, 4, 6]), 7)


class TestFrameScores(unittest.TestCase):
    def test_given_partial_game_when_frame_scores_then_unresolved_are_none(self):
        scores = get_frame_scores([10, 3, 4, 5, 5])
        self.assertEqual(len(scores), 10)
        self.assertEqual(scores[:2], [17, 7])
        self.assertTrue(all(s is None for s in scores[2:]))

    def test_given_several_frames_when_frame_scores_then_not_cumulative(self):
        scores = get_frame_scores([10, 3, 4, 5, 5, 3] + [0] * 13)
        self.assertEqual(scores[:3], [17, 7, 13])
        self.assertEqual(scores[3:], [3] + [0] * 6)

    def test_given_pending_strike_when_frame_scores_then_later_frames_none(self):
        scores = get_frame_scores([10, 10, 4])
        self.assertEqual(scores[0], 24)
        self.assertIsNone(scores[1])
        self.assertIsNone(scores[2])

    def test_given_same_rolls_when_called_twice_then_identical(self):
        rolls = [9, 1, 10, 4]
        self.assertEqual(get_frame_scores(rolls), get_frame_scores(rolls))
        self.assertEqual(rolls, [9, 1, 10, 4])

    def test_given_rolls_when_running_totals_then_cumulative_until_unresolved(self):
        totals = running_totals([10, 3, 4, 5, 5])
        self.assertEqual(totals[:2], [17, 24])
        self.assertEqual(totals[2:], [None] * 8)
        self.assertEqual(running_totals([10] * 12)[-1], 300)


if __name__ == '__main__':
    unittest.main(verbosity=2)
