import os

from dice_sim.core.result import SimulationResult
from dice_sim.persistence import serializer
from .base import Exporter
from . import register_exporter


@register_exporter("json")
class JsonExporter(Exporter):

    def default_filename(self) -> str:
        return self.config.json_filename

    def write(self, result: SimulationResult, out_path: str) -> None:
        parent = os.path.dirname(out_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(serializer.dumps(serializer.result_to_dict(result), indent=2))
