import logging
import unittest

import numpy as np

from ..knowledge import Knowledge
from ..ranking import best_candidates, score_words
from ..wordle_game import parse_tiles
from . import letter_frequencies


logging.basicConfig(level=logging.INFO)  # Set the default logging level
logger = logging.getLogger(__name__)


class TestBestCandidates(unittest.TestCase):

    def test_more_distinct_letters_first(self):
        words = ["aabbc", "abcde", "fghij"]
        # frequencies that favor the duplicate-heavy word
        freq = {'a': 0.4, 'b': 0.4, 'c': 0.1, 'd': 0.01, 'e': 0.01,
                'f': 0.01, 'g': 0.01, 'h': 0.01, 'i': 0.01, 'j': 0.01}
        ranked = best_candidates(words, Knowledge(5), freq)
        logger.debug(f"{ranked = }")
        self.assertEqual(set(ranked[:2]), {"abcde", "fghij"})
        self.assertEqual(ranked[2], "aabbc")

    def test_tier_sorted_by_frequency(self):
        words = ["motor", "robot", "sorts"]
        freq = letter_frequencies(["thorn", "sorts", "robot", "palmy", "motor"])
        ranked = best_candidates(words, Knowledge(5), freq)
        self.assertEqual(ranked, ["motor", "robot", "sorts"])

    def test_known_letters_score_nothing(self):
        freq = letter_frequencies(["thorn", "sorts", "robot", "palmy", "motor"])
        k = Knowledge(5)
        k.absorb(parse_tiles("?t!h?o?r!n"))
        ranked = best_candidates(["motor", "robot", "sorts"], k, freq)
        self.assertEqual(ranked, ["sorts", "motor", "robot"])

        scores = score_words(["motor", "robot", "sorts"], k, freq)
        np.testing.assert_allclose(scores, [2 / 25, 1 / 25, 4 / 25])

    def test_ties_keep_incoming_order(self):
        words = ["bcdea", "abcde", "edcba"]
        freq = {c: 0.2 for c in "abcde"}
        self.assertEqual(best_candidates(words, Knowledge(5), freq), words)

    def test_missing_letters_weigh_nothing(self):
        ranked = best_candidates(["xyzvw", "abcdq"], Knowledge(5), {'a': 0.5})
        self.assertEqual(ranked, ["abcdq", "xyzvw"])

    def test_whole_tier_appended_past_count(self):
        tier5 = ["abcde", "bcdef", "cdefg"]
        tier4 = ["aabcd", "bbcde", "ccdef", "ddefg", "eefgh",
                 "ffghi", "gghij", "hhijk", "iijkl"]
        tier3 = ["aaabc", "bbbcd"]
        freq = letter_frequencies(tier5 + tier4 + tier3)

        ranked = best_candidates(tier3 + tier4 + tier5, Knowledge(5), freq)
        self.assertEqual(len(ranked), 12)
        self.assertEqual(set(ranked[:3]), set(tier5))
        self.assertEqual(set(ranked[3:]), set(tier4))

        ranked = best_candidates(tier3 + tier4 + tier5, Knowledge(5), freq, count=3)
        self.assertEqual(set(ranked), set(tier5))

    def test_smaller_tiers_fill_up_to_count(self):
        words = ["abcde", "aabcd", "aaabc", "aaaab", "aaaaa"]
        ranked = best_candidates(words, Knowledge(5), letter_frequencies(words))
        self.assertEqual(ranked, words)

    def test_single_word(self):
        self.assertEqual(best_candidates(["robot"], Knowledge(5), {}), ["robot"])

    def test_empty(self):
        self.assertEqual(best_candidates([], Knowledge(5), {'a': 1.0}), [])

    def test_nan_frequency(self):
        with self.assertRaises(ValueError):
            best_candidates(["abcde", "fghij"], Knowledge(5), {'a': float('nan')})


if __name__ == '__main__':
    unittest.main()
