from dice_sim.core.result import SimulationResult
from dice_sim.persistence.chart import save_chart_png
from .base import Exporter
from . import register_exporter


@register_exporter("png")
class PngExporter(Exporter):
    """Chart of the histogram, with the normal curve when config.show_normal is set."""

    def default_filename(self) -> str:
        return self.config.chart_filename

    def write(self, result: SimulationResult, out_path: str) -> None:
        save_chart_png(result, out_path, show_normal=self.config.show_normal)
