import tkinter as tk
from dataclasses import replace
from tkinter import filedialog, messagebox
from typing import Optional

from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure

from dice_sim.core.config import SimulationConfig
from dice_sim.core.engine import InvalidParameterError
from dice_sim.core.result import SimulationResult
from dice_sim.core.simulation import run
from dice_sim.exporters import get_exporter
from dice_sim.persistence.chart import build_figure
from dice_sim.persistence.csv_io import format_faces


class DiceSimulatorGUI:
    def __init__(self, root: tk.Tk, config: Optional[SimulationConfig] = None):
        self.root = root
        root.title("Dice Roll Simulator")

        self.config = config or SimulationConfig()
        self.rng = self.config.make_rng()
        # the window owns the current result; every roll replaces it
        self.result: Optional[SimulationResult] = None

        # Top controls: roll count, dice count, curve toggle and Roll button
        top = tk.Frame(root)
        top.pack(fill=tk.X, padx=10, pady=8)
        tk.Label(top, text="Number of rolls:").pack(side=tk.LEFT)
        self.rolls_entry = tk.Entry(top, width=8)
        self.rolls_entry.insert(0, str(self.config.trial_count))
        self.rolls_entry.pack(side=tk.LEFT, padx=(4, 12))
        tk.Label(top, text="Number of dice:").pack(side=tk.LEFT)
        self.dice_entry = tk.Entry(top, width=6)
        self.dice_entry.insert(0, str(self.config.dice_count))
        self.dice_entry.pack(side=tk.LEFT, padx=(4, 12))
        self.show_normal_var = tk.BooleanVar(value=self.config.show_normal)
        tk.Checkbutton(top, text="Show normal curve", variable=self.show_normal_var, command=self.redraw_chart).pack(side=tk.LEFT, padx=(0, 12))
        tk.Button(top, text="Roll!", command=self.on_roll).pack(side=tk.LEFT)

        main = tk.Frame(root)
        main.pack(fill=tk.BOTH, expand=True, padx=10, pady=6)

        # Left: recent rolls and full history
        left = tk.Frame(main)
        left.pack(side=tk.LEFT, fill=tk.Y)
        recent_frame = tk.LabelFrame(left, text=f"Last {self.config.recent_count} rolls")
        recent_frame.pack(fill=tk.X, padx=6, pady=6)
        self.recent_listbox = tk.Listbox(recent_frame, height=self.config.recent_count, width=36, font=("Courier", 10))
        self.recent_listbox.pack(fill=tk.X, padx=6, pady=6)

        history_frame = tk.LabelFrame(left, text="All rolls")
        history_frame.pack(fill=tk.BOTH, expand=True, padx=6, pady=6)
        scrollbar = tk.Scrollbar(history_frame)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self.history_listbox = tk.Listbox(history_frame, height=12, width=36, font=("Courier", 10), yscrollcommand=scrollbar.set)
        self.history_listbox.pack(fill=tk.BOTH, expand=True, padx=6, pady=6)
        scrollbar.config(command=self.history_listbox.yview)

        # Right: chart and export buttons
        right = tk.Frame(main)
        right.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(12, 0))
        chart_frame = tk.LabelFrame(right, text="Distribution")
        chart_frame.pack(fill=tk.BOTH, expand=True, padx=6, pady=6)
        self.figure = Figure(figsize=(7, 4))
        self.canvas = FigureCanvasTkAgg(self.figure, master=chart_frame)
        self.canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True)

        buttons = tk.Frame(right)
        buttons.pack(fill=tk.X, padx=6, pady=(0, 6))
        self.png_button = tk.Button(buttons, text="Save chart PNG", command=lambda: self.on_export("png"), state=tk.DISABLED)
        self.png_button.pack(side=tk.LEFT)
        self.csv_button = tk.Button(buttons, text="Save history CSV", command=lambda: self.on_export("history"), state=tk.DISABLED)
        self.csv_button.pack(side=tk.LEFT, padx=(8, 0))

        self.status_var = tk.StringVar(value="Choose the number of rolls and dice, then press Roll!")
        tk.Label(root, textvariable=self.status_var, anchor="w").pack(fill=tk.X, padx=8, pady=(0, 8))

    def read_inputs(self):
        """
        Parse the entry fields.
        Returns:
            tuple[int, int]: (dice_count, trial_count).
        Raises:
            InvalidParameterError: If a field is not an integer.
        """
        try:
            trial_count = int(self.rolls_entry.get().strip())
            dice_count = int(self.dice_entry.get().strip())
        except ValueError:
            raise InvalidParameterError("Number of rolls and number of dice must be whole numbers")
        return dice_count, trial_count

    def on_roll(self):
        try:
            dice_count, trial_count = self.read_inputs()
            result = run(dice_count, trial_count, rng=self.rng)
        except InvalidParameterError as e:
            messagebox.showwarning("Invalid input", str(e))
            return
        self.result = result
        self.update_ui()

    def update_ui(self):
        if self.result is None:
            return
        result = self.result
        recent = result.recent(self.config.recent_count)
        first = result.trial_count - len(recent) + 1
        self.recent_listbox.delete(0, tk.END)
        for i, outcome in enumerate(recent, start=first):
            self.recent_listbox.insert(tk.END, f"{i:>6}  {outcome.total:>4}  {format_faces(outcome.faces)}")
        self.history_listbox.delete(0, tk.END)
        for i, outcome in enumerate(result.history, start=1):
            self.history_listbox.insert(tk.END, f"{i:>6}  {outcome.total:>4}  {format_faces(outcome.faces)}")
        self.redraw_chart()
        self.png_button.config(state=tk.NORMAL)
        self.csv_button.config(state=tk.NORMAL)
        self.status_var.set(
            f"{result.trial_count} rolls of {result.dice_count} dice. "
            "The red line is the theoretical Gaussian curve."
        )

    def redraw_chart(self):
        if self.result is None:
            return
        build_figure(self.result, show_normal=self.show_normal_var.get(), figure=self.figure)
        self.canvas.draw()

    def on_export(self, name: str):
        if self.result is None:
            return
        exporter = get_exporter(name, self.config)
        # the png exporter follows the checkbox, not the startup config
        if name == "png":
            exporter.config = replace(exporter.config, show_normal=self.show_normal_var.get())
        default = exporter.default_filename()
        path = filedialog.asksaveasfilename(initialfile=default, defaultextension=default[default.rfind("."):])
        if not path:
            return
        try:
            exporter.export(self.result, path)
        except (OSError, ValueError) as e:
            messagebox.showerror("Export failed", str(e))
            return
        self.status_var.set(f"Saved {path}")


def main():
    root = tk.Tk()
    DiceSimulatorGUI(root)
    root.mainloop()


if __name__ == "__main__":
    main()
