import random
import unittest
from dice_sim.core.dice import FACES, roll_die, roll_n, possible_totals
from dice_sim.core.outcome import RollOutcome


class TestDice(unittest.TestCase):
    def test_roll_die_stays_on_the_die(self):
        rng = random.Random(3)
        seen = {roll_die(rng) for _ in range(600)}
        # every face shows up and nothing else does
        self.assertEqual(seen, set(FACES))

    def test_roll_n_length_and_reproducibility(self):
        a = roll_n(4, random.Random(11))
        b = roll_n(4, random.Random(11))
        self.assertEqual(len(a), 4)
        self.assertEqual(a, b)

    def test_possible_totals(self):
        self.assertEqual(list(possible_totals(1)), [1, 2, 3, 4, 5, 6])
        self.assertEqual(possible_totals(3)[0], 3)
        self.assertEqual(possible_totals(3)[-1], 18)

    def test_outcome_total_and_face_bounds(self):
        outcome = RollOutcome((1, 6, 4))
        self.assertEqual(outcome.total, 11)
        with self.assertRaises(ValueError):
            RollOutcome((0, 3))
        with self.assertRaises(ValueError):
            RollOutcome((7,))

    def test_outcome_rejects_non_integer_faces(self):
        for faces in [(1.5, 2), (2.0,), ("3",), (True, 2), (None,)]:
            with self.assertRaises(ValueError):
                RollOutcome(faces)

    def test_outcome_keeps_faces_as_tuple(self):
        source = [1, 2]
        outcome = RollOutcome(source)
        source.append(6)
        self.assertEqual(outcome.faces, (1, 2))
        self.assertEqual(outcome.total, 3)
        self.assertEqual(hash(outcome), hash(RollOutcome((1, 2))))
        self.assertEqual(outcome, RollOutcome((1, 2)))


if __name__ == '__main__':
    unittest.main()
