"""Trajectory export utilities."""

import json
from pathlib import Path

import numpy as np

from lander.simulation import SimulationResult


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder for NumPy scalars and arrays (NaN becomes null)."""
    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.ndarray):
            return [None if isinstance(v, float) and np.isnan(v) else v for v in obj.tolist()]
        return super().default(obj)


def trajectory_to_dict(result: SimulationResult) -> dict:
    """Structure a run as ``{"metadata": ..., "trajectory": ...}``."""
    final = result.final_state
    outcome = result.outcome
    return {
        "metadata": {
            "reason": result.reason.value,
            "outcome": outcome.value if outcome is not None else None,
            "steps": result.steps,
            "safe_landing_speed": result.safe_landing_speed,
            "gravity": final.gravity,
            "max_thrust": final.max_thrust,
            "fuel_burn_rate": final.fuel_burn_rate,
            "final_velocity": final.velocity,
        },
        "trajectory": {
            "time": result.time,
            "altitude": result.altitude,
            "velocity": result.velocity,
            "fuel": result.fuel,
            "throttle": result.throttle,
        },
    }


def export_trajectory_to_json(result: SimulationResult, filepath: str | Path) -> Path:
    """Export a run to a JSON file.

    Args:
        result: Completed simulation
        filepath: Path to save the JSON file

    Returns:
        The written path
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        json.dump(trajectory_to_dict(result), f, cls=NumpyEncoder)

    print(f"Exported flight data to {path}")
    return path


def export_trajectory_to_csv(result: SimulationResult, filepath: str | Path) -> Path:
    """Export the per-tick history of a run to CSV."""
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    result.to_dataframe().write_csv(path)

    print(f"Exported flight data to {path}")
    return path
