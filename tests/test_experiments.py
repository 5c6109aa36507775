import random
import unittest
from dice_sim.core.simulation import run
from dice_sim.persistence import csv_io
from scripts.run_experiments import summarize


class TestSummarize(unittest.TestCase):
    """
    Tests for the per-run summary row of the experiments script:
      - The row has exactly the columns of the summary CSV header.
      - Observed and theoretical statistics come from the run they describe.
    """

    def setUp(self):
        self.result = run(2, 100, rng=random.Random(42))
        self.row = summarize(self.result, "abc123", "2026-01-01T00:00:00+00:00")

    def test_columns_match_header(self):
        self.assertEqual(list(self.row.keys()), csv_io.get_summary_header())

    def test_values(self):
        self.assertEqual(self.row["run_id"], "abc123")
        self.assertEqual(self.row["dice_count"], 2)
        self.assertEqual(self.row["trial_count"], 100)
        self.assertEqual(self.row["distinct_totals"], len(self.result.histogram))
        self.assertEqual(self.row["theoretical_mean"], 7.0)
        self.assertAlmostEqual(self.row["sample_mean"], self.result.sample_mean(), places=4)
        self.assertGreaterEqual(self.row["max_abs_deviation"], 0)
        self.assertLessEqual(self.row["max_abs_deviation"], 1)


if __name__ == '__main__':
    unittest.main()
