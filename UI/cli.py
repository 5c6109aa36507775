import sys
from dataclasses import replace
from typing import Optional

from dice_sim.core.config import SimulationConfig
from dice_sim.core.engine import InvalidParameterError
from dice_sim.core.normal import theoretical_mean, theoretical_std
from dice_sim.core.result import SimulationResult
from dice_sim.core.simulation import run_config
from dice_sim.exporters import EXPORTER_MAP, export_all
from dice_sim.persistence.csv_io import format_faces

BAR_WIDTH = 50


def print_rolls(rolls, start_index: int = 1):
    """
    Print a table of rolls: index, sum and the faces as drawn.
    Args:
        rolls (iterable[RollOutcome]): Rolls to print.
        start_index (int): Index shown for the first roll.
    """
    print(f"{'#':>6}  {'Sum':>5}  Combination")
    for i, outcome in enumerate(rolls, start=start_index):
        print(f"{i:>6}  {outcome.total:>5}  {format_faces(outcome.faces)}")


def print_histogram(result: SimulationResult, show_normal: bool = True):
    """
    Print the histogram as horizontal text bars, with the expected count of the normal curve.
    Args:
        result (SimulationResult): Result to show.
        show_normal (bool): Print the expected counts column.
    """
    peak = max(result.counts() + (result.densities() if show_normal else []))
    for entry, point in zip(result.histogram, result.curve):
        bar = "#" * max(1, round(entry.count / peak * BAR_WIDTH))
        line = f"{entry.total:>4} | {bar:<{BAR_WIDTH}} {entry.count:>7}"
        if show_normal:
            line += f"  (expected {point.density:.1f})"
        print(line)


def print_result(result: SimulationResult, config: SimulationConfig):
    """
    Print the recent rolls, the histogram and summary statistics of a run.
    """
    recent = result.recent(config.recent_count)
    print(f"\n=== LAST {len(recent)} ROLLS ===")
    print_rolls(recent, start_index=result.trial_count - len(recent) + 1)
    print("\n=== DISTRIBUTION ===")
    print_histogram(result, show_normal=config.show_normal)
    print("\n=== STATISTICS ===")
    print(f"Sample mean: {result.sample_mean():.3f} (theory {theoretical_mean(result.dice_count):.3f})")
    print(f"Sample std:  {result.sample_std():.3f} (theory {theoretical_std(result.dice_count):.3f})")
    print("The more dice, the closer the distribution gets to the bell-shaped normal curve.")


def read_int(prompt: str, default: int) -> int:
    """
    Ask for an integer, keeping the default on empty input. Re-prompts until an integer is entered.
    """
    while True:
        raw = input(f"{prompt} [{default}]: ").strip()
        if not raw:
            return default
        try:
            return int(raw)
        except ValueError:
            print("Please enter a valid integer.")


def edit_settings(config: SimulationConfig) -> SimulationConfig:
    """Prompt for the roll count, dice count and normal-curve toggle."""
    trial_count = read_int("Number of rolls", config.trial_count)
    dice_count = read_int("Number of dice", config.dice_count)
    show = input(f"Show normal curve (y/n) [{'y' if config.show_normal else 'n'}]: ").strip().lower()
    show_normal = config.show_normal if not show else show.startswith("y")
    return replace(config, trial_count=trial_count, dice_count=dice_count, show_normal=show_normal)


def roll(config: SimulationConfig) -> Optional[SimulationResult]:
    """
    Run one simulation and print it. Invalid settings are reported, not raised.
    Returns:
        SimulationResult or None: The new result, or None if the settings were rejected.
    """
    try:
        result = run_config(config)
    except InvalidParameterError as e:
        print(f"Invalid settings: {e}")
        return None
    print_result(result, config)
    return result


def export(result: SimulationResult, config: SimulationConfig):
    """Ask which exporters to run and write their files into config.output_dir."""
    names = sorted(EXPORTER_MAP)
    raw = input(f"Formats to export, comma separated ({', '.join(names)}) [all]: ").strip()
    chosen = [n.strip() for n in raw.split(",") if n.strip()] if raw else names
    try:
        paths = export_all(result, chosen, config.output_dir, config)
    except (OSError, ValueError) as e:
        print(f"Export failed: {e}")
        return
    for path in paths:
        print(f"[Saved {path}]")


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    cfg = SimulationConfig()
    # optional positional arguments: rolls, dice, seed
    try:
        if len(argv) > 0:
            cfg = replace(cfg, trial_count=int(argv[0]))
        if len(argv) > 1:
            cfg = replace(cfg, dice_count=int(argv[1]))
        if len(argv) > 2:
            cfg = replace(cfg, rng_seed=int(argv[2]))
    except ValueError:
        raise SystemExit("Usage: cli.py [rolls] [dice] [seed]")

    # the current result is owned here, not by the simulator
    result = None
    print("Dice roll simulator (CLI)")
    while True:
        print(f"\nSettings: {cfg.trial_count} rolls of {cfg.dice_count} dice")
        print("Menu:\n  1) Change settings\n  2) Roll!\n  3) Show full history\n  4) Export\n  5) Quit")
        sel = input("Choose: ").strip()
        if sel == "1":
            cfg = edit_settings(cfg)
            continue
        if sel == "2":
            result = roll(cfg) or result
            continue
        if sel in ("3", "4"):
            if result is None:
                print("Roll the dice first.")
                continue
            if sel == "3":
                print_rolls(result.history)
            else:
                export(result, cfg)
            continue
        if sel == "5":
            print("Goodbye")
            break
        print("Unknown choice")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nExiting.")
