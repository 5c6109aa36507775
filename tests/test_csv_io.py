import csv
import os
import random
import tempfile
import unittest
from dice_sim.core.simulation import run
from dice_sim.persistence import csv_io


class TestCsvIo(unittest.TestCase):
    def setUp(self):
        self.result = run(3, 25, rng=random.Random(21))
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def test_history_rows(self):
        rows = csv_io.history_rows(self.result.history)
        self.assertEqual(len(rows), 25)
        first = rows[0]
        outcome = self.result.history[0]
        self.assertEqual(first["index"], 1)
        self.assertEqual(first["sum"], outcome.total)
        self.assertEqual(first["faces"], "[" + ", ".join(map(str, outcome.faces)) + "]")

    def test_write_history_csv_overwrites(self):
        path = os.path.join(self.tmp.name, "out", "history.csv")
        csv_io.write_history_csv(self.result.history, path)
        csv_io.write_history_csv(self.result.history[:3], path)
        with open(path, newline='', encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        self.assertEqual(len(rows), 3)
        self.assertEqual(list(rows[0].keys()), csv_io.HISTORY_HEADER)

    def test_histogram_csv(self):
        path = os.path.join(self.tmp.name, "histogram.csv")
        csv_io.write_histogram_csv(self.result, path)
        with open(path, newline='', encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        self.assertEqual([int(r["sum"]) for r in rows], self.result.totals())
        self.assertEqual(sum(int(r["count"]) for r in rows), 25)

    def test_append_row_writes_header_once(self):
        path = os.path.join(self.tmp.name, "summary.csv")
        header = csv_io.get_summary_header()
        csv_io.append_row_to_csv({"run_id": "a", "dice_count": 1}, path, header)
        csv_io.append_row_to_csv({"run_id": "b", "dice_count": 2}, path, header)
        with open(path, newline='', encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        self.assertEqual([r["run_id"] for r in rows], ["a", "b"])


if __name__ == '__main__':
    unittest.main()
