"""
chart.py
Draws the histogram of a SimulationResult with the normal curve overlaid, and saves it as PNG.
Related modules:
- exporters/png_exporter.py: Saves charts through save_chart_png.
- UI/gui.py: Embeds the figure from build_figure in the Tk window.
"""

import os
from typing import Optional

from matplotlib.figure import Figure

from dice_sim.core.dice import possible_totals
from dice_sim.core.result import SimulationResult

BAR_COLOR = "#10b981"
CURVE_COLOR = "#ef4444"
MAX_TICKS = 20


def build_figure(result: SimulationResult, show_normal: bool = True, figure: Optional[Figure] = None) -> Figure:
    """
    Plot observed counts as bars and, optionally, the expected counts as a line on the same axis.
    Args:
        result (SimulationResult): Run to plot.
        show_normal (bool): Overlay the normal curve.
        figure (Figure|None): Figure to draw into (cleared first); a new one is created if None.
    Returns:
        Figure: The drawn figure.
    """
    if figure is None:
        figure = Figure(figsize=(8, 4))
    figure.clear()
    ax = figure.add_subplot(111)
    ax.grid(True, linestyle="--", alpha=0.5)
    ax.set_axisbelow(True)
    if result.is_empty():
        ax.set_title("No data")
        return figure
    totals = result.totals()
    ax.bar(totals, result.counts(), color=BAR_COLOR, label="Observed")
    if show_normal:
        ax.plot(totals, result.densities(), color=CURVE_COLOR, linewidth=2, label="Normal curve")
    # axis spans every reachable total, not only the observed ones
    reachable = possible_totals(result.dice_count)
    step = max(1, -(-len(reachable) // MAX_TICKS))
    ax.set_xticks(list(reachable[::step]))
    ax.set_xlim(reachable[0] - 0.5, reachable[-1] + 0.5)
    ax.set_xlabel("Sum of dice")
    ax.set_ylabel("Count")
    ax.set_title(f"{result.trial_count} rolls of {result.dice_count} dice")
    ax.legend()
    figure.tight_layout()
    return figure


def save_chart_png(result: SimulationResult, out_path: str, show_normal: bool = True) -> str:
    """Render the chart of result and write it to out_path as PNG."""
    parent = os.path.dirname(out_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    figure = build_figure(result, show_normal=show_normal)
    figure.savefig(out_path, format="png")
    return out_path
