import io
import os
import random
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest import mock
from dice_sim.core.config import SimulationConfig
from dice_sim.core.simulation import run
from UI import cli


class TestCli(unittest.TestCase):
    def test_print_result_shows_recent_rolls(self):
        result = run(2, 8, rng=random.Random(2))
        out = io.StringIO()
        with redirect_stdout(out):
            cli.print_result(result, SimulationConfig(recent_count=3))
        text = out.getvalue()
        self.assertIn("LAST 3 ROLLS", text)
        self.assertIn("expected", text)
        last = result.history[-1]
        self.assertIn(cli.format_faces(last.faces), text)

    def test_roll_reports_invalid_settings(self):
        out = io.StringIO()
        with redirect_stdout(out):
            result = cli.roll(SimulationConfig(dice_count=0))
        self.assertIsNone(result)
        self.assertIn("Invalid settings", out.getvalue())

    def test_menu_roll_then_quit(self):
        out = io.StringIO()
        with mock.patch("builtins.input", side_effect=["2", "5"]), redirect_stdout(out):
            cli.main(["20", "2", "1"])
        self.assertIn("DISTRIBUTION", out.getvalue())
        self.assertIn("Goodbye", out.getvalue())

    def test_export_reports_unwritable_directory(self):
        result = run(2, 10, rng=random.Random(4))
        with tempfile.TemporaryDirectory() as tmp:
            blocker = os.path.join(tmp, "not_a_dir")
            with open(blocker, "w", encoding="utf-8") as f:
                f.write("x")
            cfg = SimulationConfig(output_dir=os.path.join(blocker, "sub"))
            out = io.StringIO()
            with mock.patch("builtins.input", return_value="history"), redirect_stdout(out):
                cli.export(result, cfg)
        self.assertIn("Export failed", out.getvalue())
        self.assertNotIn("Saved", out.getvalue())

    def test_export_reports_unknown_format(self):
        result = run(2, 10, rng=random.Random(4))
        out = io.StringIO()
        with mock.patch("builtins.input", return_value="xlsx"), redirect_stdout(out):
            cli.export(result, SimulationConfig())
        self.assertIn("Unknown exporter", out.getvalue())


if __name__ == '__main__':
    unittest.main()
