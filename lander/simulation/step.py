"""Single-tick state transition for the vertical descent simulation.

The step uses semi-implicit Euler integration: velocity is updated first and
the *updated* velocity is used to advance altitude. The order of operations
below is fixed so that runs with the same inputs reproduce the same
trajectory bit for bit.

Example:
    >>> from lander import LanderState
    >>> from lander.simulation import simulate_step
    >>>
    >>> state = LanderState()
    >>> simulate_step(state, thrust_percent=0.0)
    >>> round(state.altitude, 2), round(state.velocity, 2)
    (998.38, -1.62)
"""

from beartype import beartype
from numba import njit

from lander.state import NUMERIC_CONF, LanderState


@njit(cache=True)
def _step_core(
    altitude: float, velocity: float, fuel: float, time: float,
    gravity: float, max_thrust: float, fuel_burn_rate: float,
    thrust_percent: float, dt: float,
) -> tuple[float, float, float, float]:
    """Numba-compiled scalar step kernel (no fastmath, IEEE ordering kept)."""
    thrust_accel = max_thrust * (thrust_percent / 100.0)
    net_accel = gravity + thrust_accel

    # Tanks cannot be overdrawn, but the commanded thrust is still applied
    # in full for this tick.
    fuel_used = fuel_burn_rate * thrust_accel * dt
    if fuel_used > fuel:
        fuel = 0.0
    else:
        fuel -= fuel_used

    velocity += net_accel * dt
    altitude += velocity * dt
    time += dt

    return altitude, velocity, fuel, time


@beartype(conf=NUMERIC_CONF)
def simulate_step(state: LanderState, thrust_percent: float, dt: float = 1.0) -> None:
    """Advance the lander by one tick, mutating ``state`` in place.

    The caller is responsible for keeping ``thrust_percent`` within
    [0, 100]; out-of-range values are applied as given.

    Args:
        state: Lander state to update
        thrust_percent: Commanded throttle [% of max thrust]
        dt: Time step [s]
    """
    state.altitude, state.velocity, state.fuel, state.time = _step_core(
        float(state.altitude), float(state.velocity), float(state.fuel), float(state.time),
        float(state.gravity), float(state.max_thrust), float(state.fuel_burn_rate),
        float(thrust_percent), float(dt),
    )
