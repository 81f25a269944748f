"""Scripted throttle strategies.

Every strategy is a throttle policy: a callable taking the current
:class:`~lander.state.LanderState` and returning a throttle in percent.
Strategies are pure functions of the state (``scripted`` and ``PIDThrottle``
keep their own internal history), so they can be swapped freely to drive the
simulator through varied trajectories.

Example:
    >>> from autopilot.strategies import get_strategy
    >>> from lander.simulation import run_simulation
    >>>
    >>> result = run_simulation(get_strategy("velocity-control"))
    >>> result.outcome
    <LandingOutcome.SUCCESS: 'success'>
"""

from collections.abc import Callable, Iterable

import numpy as np
from beartype import beartype

from autopilot.pid import PIDThrottle
from lander.simulation import ThrottlePolicy
from lander.state import LanderState

# =============================================================================
# Threshold Strategies
# =============================================================================


@beartype
def crude_autopilot(state: LanderState) -> float:
    """Push the throttle harder the faster the vehicle is falling."""
    if state.altitude < 20:
        return 90.0
    elif state.velocity < -40:
        return 100.0
    elif state.velocity < -20:
        return 75.0
    elif state.velocity < -5:
        return 50.0
    return 0.0


@beartype
def dumb_descent(state: LanderState) -> float:
    """Coarse velocity bands with a heavy burn below 100 m."""
    if state.altitude < 100:
        return 90.0
    elif state.velocity < -40:
        return 100.0
    elif state.velocity < -25:
        return 80.0
    elif state.velocity < -10:
        return 50.0
    return 0.0


@beartype
def altitude_targeted(state: LanderState) -> float:
    """Throttle scheduled on altitude only, ignoring velocity."""
    if state.altitude < 50:
        return 100.0
    elif state.altitude < 150:
        return 70.0
    return 30.0


# =============================================================================
# Parameterized Strategies
# =============================================================================


@beartype
def velocity_fine_control(gain: float = 20.0) -> ThrottlePolicy:
    """Proportional control toward an altitude-scheduled descent rate.

    The desired velocity is ``-2 - (altitude / 300) * 10`` m/s and the
    throttle is ``gain`` times the velocity error, saturated to [0, 100].
    """
    def policy(state: LanderState) -> float:
        desired_velocity = -2.0 - (state.altitude / 300.0) * 10.0
        error = desired_velocity - state.velocity
        return float(np.clip(gain * error, 0.0, 100.0))

    return policy


@beartype
def bang_bang(threshold: float = -5.0) -> ThrottlePolicy:
    """Full throttle while descending faster than ``threshold``, else off."""
    def policy(state: LanderState) -> float:
        return 100.0 if state.velocity < threshold else 0.0

    return policy


@beartype
def constant(percent: float) -> ThrottlePolicy:
    """Hold a fixed throttle for the whole run."""
    def policy(state: LanderState) -> float:
        return percent

    return policy


@beartype
def scripted(commands: Iterable[float], default: float = 0.0) -> ThrottlePolicy:
    """Replay a fixed sequence of throttle commands, one per tick.

    Once the sequence is exhausted the policy returns ``default``.
    """
    remaining = iter(commands)

    def policy(state: LanderState) -> float:
        return float(next(remaining, default))

    return policy


# =============================================================================
# Registry
# =============================================================================

STRATEGIES: dict[str, Callable[[], ThrottlePolicy]] = {
    "crude": lambda: crude_autopilot,
    "dumb-descent": lambda: dumb_descent,
    "altitude-targeted": lambda: altitude_targeted,
    "velocity-control": velocity_fine_control,
    "bang-bang": bang_bang,
    "pid": PIDThrottle,
}


@beartype
def list_strategies() -> list[str]:
    """Names accepted by :func:`get_strategy`."""
    return sorted(STRATEGIES)


@beartype
def get_strategy(name: str) -> ThrottlePolicy:
    """Build a fresh throttle policy by name.

    Raises:
        KeyError: If ``name`` is not a registered strategy
    """
    try:
        factory = STRATEGIES[name]
    except KeyError:
        raise KeyError(
            f"Unknown strategy {name!r}. Available: {', '.join(list_strategies())}"
        ) from None
    return factory()
