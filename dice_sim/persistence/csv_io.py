"""
csv_io.py
Persistence utilities for writing roll histories, histograms and experiment summaries to CSV files.
"""

import os
import csv
from typing import Dict, List, Any, Iterable

from dice_sim.core.outcome import RollOutcome
from dice_sim.core.result import SimulationResult

HISTORY_HEADER = ["index", "sum", "faces"]
HISTOGRAM_HEADER = ["sum", "count", "expected"]
SUMMARY_HEADER = [
    "run_id", "timestamp", "dice_count", "trial_count", "distinct_totals",
    "sample_mean", "theoretical_mean", "sample_std", "theoretical_std",
    "max_abs_deviation",
]


def format_faces(faces: Iterable[int]) -> str:
    return "[" + ", ".join(str(f) for f in faces) + "]"


def history_rows(history: Iterable[RollOutcome]) -> List[Dict[str, Any]]:
    """
    One row per roll: 1-based index, total and the faces as drawn.
    """
    return [
        {"index": i, "sum": outcome.total, "faces": format_faces(outcome.faces)}
        for i, outcome in enumerate(history, start=1)
    ]


def histogram_rows(result: SimulationResult) -> List[Dict[str, Any]]:
    return [
        {"sum": entry.total, "count": entry.count, "expected": round(point.density, 6)}
        for entry, point in zip(result.histogram, result.curve)
    ]


def write_rows_to_csv(rows: List[Dict[str, Any]], csv_path: str, header: List[str]) -> str:
    """
    Write rows to csv_path, replacing any existing file.
    Args:
        rows (list[dict]): Rows keyed by header names.
        csv_path (str): Destination file.
        header (list[str]): Column order.
    Returns:
        str: csv_path.
    """
    parent = os.path.dirname(csv_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(csv_path, "w", newline='', encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=header)
        writer.writeheader()
        for row in rows:
            writer.writerow(row)
    return csv_path


def append_row_to_csv(row: Dict[str, Any], csv_path: str, header: List[str]):
    write_header = not os.path.exists(csv_path)
    with open(csv_path, "a", newline='', encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=header)
        if write_header:
            writer.writeheader()
        writer.writerow(row)


def write_history_csv(history: Iterable[RollOutcome], csv_path: str) -> str:
    return write_rows_to_csv(history_rows(history), csv_path, HISTORY_HEADER)


def write_histogram_csv(result: SimulationResult, csv_path: str) -> str:
    return write_rows_to_csv(histogram_rows(result), csv_path, HISTOGRAM_HEADER)


def get_summary_header():
    return SUMMARY_HEADER.copy()
