"""Trajectory plots for lander runs.

All plots use matplotlib and return the Figure without showing it.
"""

import matplotlib.pyplot as plt
from beartype import beartype
from matplotlib.figure import Figure

from lander.simulation import SimulationResult

COLORS = {
    "altitude": "#2E86AB",
    "velocity": "#A23B72",
    "fuel": "#F18F01",
    "throttle": "#454545",
    "limit": "#E63946",
}


@beartype
def plot_trajectory(
    result: SimulationResult,
    figsize: tuple[float, float] = (10.0, 10.0),
    title: str | None = None,
) -> Figure:
    """Plot altitude, velocity, fuel and throttle against time.

    Args:
        result: Completed simulation
        figsize: Figure size (width, height) in inches
        title: Figure title; defaults to the run's termination summary

    Returns:
        matplotlib Figure with four stacked axes
    """
    fig, (ax_alt, ax_vel, ax_fuel, ax_thr) = plt.subplots(4, 1, figsize=figsize, sharex=True)
    t = result.time

    ax_alt.plot(t, result.altitude, color=COLORS["altitude"], linewidth=2)
    ax_alt.axhline(0.0, color=COLORS["limit"], linewidth=1, linestyle="--")
    ax_alt.set_ylabel("Altitude (m)")

    ax_vel.plot(t, result.velocity, color=COLORS["velocity"], linewidth=2)
    for limit in (-result.safe_landing_speed, result.safe_landing_speed):
        ax_vel.axhline(limit, color=COLORS["limit"], linewidth=1, linestyle="--")
    ax_vel.set_ylabel("Velocity (m/s)")

    ax_fuel.plot(t, result.fuel, color=COLORS["fuel"], linewidth=2)
    ax_fuel.set_ylabel("Fuel (kg)")

    # Command i is held from t[i] to t[i+1]
    ax_thr.step(t, result.throttle, where="post", color=COLORS["throttle"], linewidth=1.5)
    ax_thr.set_ylim(-5, 105)
    ax_thr.set_ylabel("Throttle (%)")
    ax_thr.set_xlabel("Time (s)")

    for ax in (ax_alt, ax_vel, ax_fuel, ax_thr):
        ax.grid(True, alpha=0.3)

    if title is None:
        outcome = result.outcome
        verdict = outcome.value if outcome is not None else result.reason.value
        title = f"Descent: {verdict} (v = {result.final_state.velocity:.2f} m/s)"
    fig.suptitle(title)

    fig.tight_layout()
    return fig
