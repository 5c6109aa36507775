"""
serializer.py
Provides utility functions for serializing simulation results to and from JSON.
Used by the json exporter and the experiments script.
"""

import json
from typing import Any, Dict

from dice_sim.core.result import SimulationResult


def result_to_dict(result: SimulationResult) -> Dict[str, Any]:
    """
    Flatten a SimulationResult into plain JSON-friendly types.
    Args:
        result (SimulationResult): Result to convert.
    Returns:
        dict: dice_count, trial_count, history (face lists), histogram and curve.
    """
    return {
        "dice_count": result.dice_count,
        "trial_count": result.trial_count,
        "history": [list(outcome.faces) for outcome in result.history],
        "histogram": [{"sum": e.total, "count": e.count} for e in result.histogram],
        "curve": [{"sum": p.total, "value": p.density} for p in result.curve],
    }


def dumps(obj: Any, indent=None) -> str:
    """
    Serialize a Python object (including dataclasses) to a JSON string.
    Args:
        obj: Object to serialize.
        indent (int|None): Passed to json.dumps.
    Returns:
        str: JSON string.
    """
    return json.dumps(obj, indent=indent, default=lambda o: getattr(o, '__dict__', str(o)))


def loads(s: str):
    """
    Deserialize a JSON string to a Python object (dict/list).
    Args:
        s (str): JSON string.
    Returns:
        object: Deserialized Python object.
    """
    return json.loads(s)
