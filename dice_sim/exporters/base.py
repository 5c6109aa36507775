from abc import ABC, abstractmethod
from typing import Optional

from dice_sim.core.config import SimulationConfig
from dice_sim.core.result import SimulationResult


class Exporter(ABC):
    """
    Abstract base class for all result exporters.
    Exporters must implement default_filename() and write(result, out_path).
    export() refuses empty results and returns the written path.
    """
    name = None

    def __init__(self, config: Optional[SimulationConfig] = None):
        self.config = config or SimulationConfig()

    @abstractmethod
    def default_filename(self) -> str:
        """File name used when the caller only supplies a directory."""
        raise NotImplementedError

    @abstractmethod
    def write(self, result: SimulationResult, out_path: str) -> None:
        """
        Write the result to out_path.
        Args:
            result (SimulationResult): Non-empty result to export.
            out_path (str): Destination file.
        """
        raise NotImplementedError

    def export(self, result: SimulationResult, out_path: str) -> str:
        """
        Validate and write the result.
        Returns:
            str: out_path.
        Raises:
            ValueError: If the result holds no rolls.
        """
        if result.is_empty():
            raise ValueError("Nothing to export: the result holds no rolls")
        self.write(result, out_path)
        return out_path
