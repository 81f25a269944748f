"""Simulation module for the vertical descent lander.

Provides the single-tick physics step and the step-driven simulator that
drives it under a throttle policy.

Example:
    >>> from lander.simulation import Simulator, SimConfig
    >>>
    >>> sim = Simulator(config=SimConfig(dt=1.0))
    >>>
    >>> # Driver loop
    >>> while not sim.is_terminal:
    ...     state = sim.get_state()
    ...     sim.step(50.0 if state.velocity < -5 else 0.0)
"""

from lander.simulation.simulator import (
    SimConfig,
    SimulationResult,
    Simulator,
    TerminationReason,
    ThrottlePolicy,
    run_simulation,
)
from lander.simulation.step import simulate_step

__all__ = [
    "SimConfig",
    "SimulationResult",
    "Simulator",
    "TerminationReason",
    "ThrottlePolicy",
    "run_simulation",
    "simulate_step",
]
