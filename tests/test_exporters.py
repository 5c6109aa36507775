import os
import random
import tempfile
import unittest
from dice_sim.core.config import SimulationConfig
from dice_sim.core.result import SimulationResult
from dice_sim.core.simulation import run
from dice_sim.exporters import EXPORTER_MAP, get_exporter, export_all
from dice_sim.persistence import serializer


class TestExporters(unittest.TestCase):
    """
    Tests for the exporter registry:
      - All built-in exporters register themselves on import.
      - export_all writes one file per exporter under the configured names.
      - Empty results and unknown names are refused.
    """

    def setUp(self):
        self.result = run(2, 40, rng=random.Random(5))
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)

    def test_registry(self):
        self.assertEqual(set(EXPORTER_MAP), {"history", "histogram", "json", "png"})
        self.assertEqual(get_exporter("PNG").name, "png")

    def test_unknown_exporter(self):
        with self.assertRaises(ValueError):
            get_exporter("xlsx")

    def test_export_all_writes_files(self):
        cfg = SimulationConfig(chart_filename="c.png", history_filename="h.csv")
        paths = export_all(self.result, ["png", "history", "json"], self.tmp.name, cfg)
        self.assertEqual([os.path.basename(p) for p in paths], ["c.png", "h.csv", "result.json"])
        for path in paths:
            self.assertTrue(os.path.getsize(path) > 0)
        with open(paths[0], "rb") as f:
            self.assertEqual(f.read(4), b"\x89PNG")

    def test_png_without_curve(self):
        exporter = get_exporter("png", SimulationConfig(show_normal=False))
        path = exporter.export(self.result, os.path.join(self.tmp.name, "bars.png"))
        self.assertTrue(os.path.exists(path))

    def test_json_content(self):
        path = get_exporter("json").export(self.result, os.path.join(self.tmp.name, "r.json"))
        with open(path, encoding="utf-8") as f:
            data = serializer.loads(f.read())
        self.assertEqual(data["dice_count"], 2)
        self.assertEqual(len(data["history"]), 40)
        self.assertEqual(sum(e["count"] for e in data["histogram"]), 40)
        self.assertEqual([e["sum"] for e in data["histogram"]], [p["sum"] for p in data["curve"]])

    def test_empty_result_refused(self):
        empty = SimulationResult(dice_count=1, trial_count=0, history=(), histogram=(), curve=())
        for name in EXPORTER_MAP:
            with self.assertRaises(ValueError):
                get_exporter(name).export(empty, os.path.join(self.tmp.name, "x"))


if __name__ == '__main__':
    unittest.main()
