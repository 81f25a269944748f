"""Autopilot package - throttle strategies for the lunar lander.

This package contains the Input Source side of the simulation: algorithms
that look at the lander state and command a throttle. They are developed and
tested against the physics in lander/.

Architecture:
    The simulation (lander/) provides the "plant". Autopilots provide the
    throttle commands.

    Simulation loop:
        state = sim.get_state()          # truth state
        throttle = autopilot(state)      # your algorithm
        sim.step(throttle)               # apply to plant

Example:
    >>> from autopilot import PIDThrottle
    >>> from lander.simulation import Simulator
    >>>
    >>> sim = Simulator()
    >>> autopilot = PIDThrottle(kp=20.0)
    >>> while not sim.is_terminal:
    ...     sim.step(autopilot(sim.get_state()))
"""

from autopilot.pid import PIDController, PIDThrottle
from autopilot.strategies import (
    STRATEGIES,
    altitude_targeted,
    bang_bang,
    constant,
    crude_autopilot,
    dumb_descent,
    get_strategy,
    list_strategies,
    scripted,
    velocity_fine_control,
)

__all__ = [
    # Control
    "PIDController",
    "PIDThrottle",
    # Strategies
    "crude_autopilot",
    "dumb_descent",
    "altitude_targeted",
    "velocity_fine_control",
    "bang_bang",
    "constant",
    "scripted",
    # Registry
    "STRATEGIES",
    "get_strategy",
    "list_strategies",
]
