from dice_sim.core.result import SimulationResult
from dice_sim.persistence import csv_io
from .base import Exporter
from . import register_exporter


@register_exporter("history")
class HistoryCsvExporter(Exporter):
    """One CSV row per roll: index, sum, faces."""

    def default_filename(self) -> str:
        return self.config.history_filename

    def write(self, result: SimulationResult, out_path: str) -> None:
        csv_io.write_history_csv(result.history, out_path)


@register_exporter("histogram")
class HistogramCsvExporter(Exporter):
    """One CSV row per distinct total: observed count and expected count."""

    def default_filename(self) -> str:
        return self.config.histogram_filename

    def write(self, result: SimulationResult, out_path: str) -> None:
        csv_io.write_histogram_csv(result, out_path)
